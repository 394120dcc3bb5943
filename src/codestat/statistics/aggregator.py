"""StatisticAggregator: accumulates declaration counts per corpus and per file.

The record_* methods are plain additions. Recording the same declaration
twice counts it twice; callers feed each file's events exactly once.

Usage:
    aggregator = StatisticAggregator()
    aggregator.record_class("A.java")
    aggregator.record_method("A.java", name_length=3, body_length=42)
    print(aggregator.render())
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Optional

from ..scanning.syntax import ClassSeen, FieldSeen, MethodSeen, SyntaxEvent
from .models import MetricKind, ProjectReport


class StatisticAggregator:
    """Owns one ProjectReport and the operations that grow it."""

    def __init__(self, root: Optional[Path] = None, count_class_events: bool = True) -> None:
        """
        Args:
            root: Analysis root, kept on the report
            count_class_events: When False, consume() ignores ClassSeen
                events and the caller records classes itself (one per file)
        """
        self.report = ProjectReport(root=root)
        self.count_class_events = count_class_events

    def open_file(self, file: str) -> None:
        """Register a file so it is listed even if it declares nothing."""
        self.report.file(file)

    def skip_file(self, file: str) -> None:
        """Note a file that was discovered but contributes nothing."""
        self.report.skipped_files.append(file)

    def record_class(self, file: str) -> None:
        self._add(file, MetricKind.NUMBER_OF_CLASSES, 1)

    def record_method(self, file: str, name_length: int, body_length: int) -> None:
        # name_length is part of the event contract but has no counter
        self._add(file, MetricKind.NUMBER_OF_METHODS, 1)
        self._add(file, MetricKind.LENGTH_OF_METHODS, body_length)

    def record_field(self, file: str, name_length: int) -> None:
        self._add(file, MetricKind.NUMBER_OF_FIELDS, 1)
        self._add(file, MetricKind.LENGTH_OF_FIELDS_NAMES, name_length)

    def consume(self, file: str, events: Iterable[SyntaxEvent]) -> None:
        """Dispatch visitor events onto the record_* operations."""
        self.open_file(file)
        for event in events:
            if isinstance(event, ClassSeen):
                if self.count_class_events:
                    self.record_class(file)
            elif isinstance(event, MethodSeen):
                self.record_method(file, event.name_length, event.body_length)
            elif isinstance(event, FieldSeen):
                self.record_field(file, event.name_length)

    def render(self, output_format: str = "text") -> str:
        """Render the report without modifying it."""
        from ..formatters import get_formatter  # formatters import statistics.models

        return get_formatter(output_format).format(self.report)

    def _add(self, file: str, kind: MetricKind, amount: int) -> None:
        self.report.metrics.add(kind, amount)
        self.report.file(file).metrics.add(kind, amount)
