"""Counter models for structural statistics."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


class MetricKind(Enum):
    """The counters collected at every scope."""

    NUMBER_OF_CLASSES = "classes"
    NUMBER_OF_METHODS = "methods"
    LENGTH_OF_METHODS = "method_length"
    NUMBER_OF_FIELDS = "fields"
    LENGTH_OF_FIELDS_NAMES = "field_name_length"


def _zero_counts() -> dict[MetricKind, int]:
    return {kind: 0 for kind in MetricKind}


def _ratio(numerator: int, denominator: int) -> Optional[float]:
    if denominator == 0:
        return None
    return numerator / denominator


@dataclass
class MetricSet:
    """One non-negative counter per MetricKind, all present, starting at 0.

    Counters only grow: ``add`` is the single update operation.
    """

    counts: dict[MetricKind, int] = field(default_factory=_zero_counts)

    def __getitem__(self, kind: MetricKind) -> int:
        return self.counts[kind]

    def __iter__(self) -> Iterator[MetricKind]:
        return iter(self.counts)

    def add(self, kind: MetricKind, amount: int = 1) -> None:
        """Increase a counter.

        Raises:
            ValueError: If amount is negative
        """
        if amount < 0:
            raise ValueError(f"Cannot add negative amount {amount} to {kind.name}")
        self.counts[kind] += amount

    def as_dict(self) -> dict[str, int]:
        """Counters keyed by MetricKind value, in MetricKind order."""
        return {kind.value: self.counts[kind] for kind in MetricKind}

    @property
    def classes(self) -> int:
        return self.counts[MetricKind.NUMBER_OF_CLASSES]

    @property
    def methods(self) -> int:
        return self.counts[MetricKind.NUMBER_OF_METHODS]

    @property
    def fields(self) -> int:
        return self.counts[MetricKind.NUMBER_OF_FIELDS]

    @property
    def average_method_length(self) -> Optional[float]:
        """Mean method text length; None when there are no methods."""
        return _ratio(self.counts[MetricKind.LENGTH_OF_METHODS], self.methods)

    @property
    def average_fields_per_class(self) -> Optional[float]:
        """Fields per class; None when there are no classes."""
        return _ratio(self.fields, self.classes)

    @property
    def average_field_name_length(self) -> Optional[float]:
        """Mean field name length; None when there are no fields."""
        return _ratio(self.counts[MetricKind.LENGTH_OF_FIELDS_NAMES], self.fields)


@dataclass
class FileRecord:
    """Statistics scoped to one source file."""

    path: str
    metrics: MetricSet = field(default_factory=MetricSet)


@dataclass
class ProjectReport:
    """Corpus statistics plus per-file records.

    Attributes:
        root: Analysis root
        metrics: Corpus-level counters
        files: Path -> FileRecord, in discovery order
        skipped_files: Paths of files that could not be read or parsed
    """

    root: Optional[Path] = None
    metrics: MetricSet = field(default_factory=MetricSet)
    files: dict[str, FileRecord] = field(default_factory=dict)
    skipped_files: list[str] = field(default_factory=list)

    @property
    def file_count(self) -> int:
        return len(self.files)

    def file(self, path: str) -> FileRecord:
        """Return the record for path, creating it on first touch."""
        record = self.files.get(path)
        if record is None:
            record = FileRecord(path=path)
            self.files[path] = record
        return record
