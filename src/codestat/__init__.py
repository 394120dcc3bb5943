"""
codestat - Structural statistics for Java source trees

Counts classes, methods and fields across a directory of source files and
reports corpus-level and per-file averages (method length, fields per class,
field-name length).
"""

__version__ = "0.1.0"

from .core import StatisticCollector, collect_statistics
from .statistics import FileRecord, MetricKind, MetricSet, ProjectReport, StatisticAggregator

__all__ = [
    "collect_statistics",  # Main entry point
    "StatisticCollector",
    "StatisticAggregator",
    "ProjectReport",
    "FileRecord",
    "MetricSet",
    "MetricKind",
]
