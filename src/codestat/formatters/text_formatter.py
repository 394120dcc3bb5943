"""Plain-text report: a corpus block, then one block per file."""

from typing import Optional

from ..statistics.models import MetricSet, ProjectReport
from .base import BaseFormatter

SEPARATOR = "------------"

NO_METHODS = "No methods"
NO_CLASSES = "No classes"
NO_FIELDS = "No fields"


def _average(value: Optional[float], sentinel: str) -> str:
    return sentinel if value is None else str(value)


class TextFormatter(BaseFormatter):
    """Render the report as separator-delimited text blocks."""

    def format(self, report: ProjectReport) -> str:
        lines = self._project_block(report.metrics)
        for record in report.files.values():
            lines.extend(self._file_block(record.path, record.metrics))
        return "\n".join(lines) + "\n"

    def _project_block(self, metrics: MetricSet) -> list[str]:
        return [
            f"Total number of classes: {metrics.classes}",
            f"Total number of methods: {metrics.methods}",
            f"Total number of fields: {metrics.fields}",
            "Average length of methods in project: "
            + _average(metrics.average_method_length, NO_METHODS),
            "Average number of fields in class: "
            + _average(metrics.average_fields_per_class, NO_CLASSES),
            SEPARATOR,
        ]

    def _file_block(self, path: str, metrics: MetricSet) -> list[str]:
        return [
            f"Statistics for file {path}",
            "Average length of methods in file: "
            + _average(metrics.average_method_length, NO_METHODS),
            "Average length of field names in file: "
            + _average(metrics.average_field_name_length, NO_FIELDS),
            SEPARATOR,
        ]
