"""Metric counters and their aggregation."""

from .models import FileRecord, MetricKind, MetricSet, ProjectReport
from .aggregator import StatisticAggregator

__all__ = [
    "MetricKind",
    "MetricSet",
    "FileRecord",
    "ProjectReport",
    "StatisticAggregator",
]
