"""JSON formatter for codestat."""

import json
from typing import Any

from ..statistics.models import MetricSet, ProjectReport
from .base import BaseFormatter


def _metrics_dict(metrics: MetricSet) -> dict[str, Any]:
    data: dict[str, Any] = metrics.as_dict()
    data["average_method_length"] = metrics.average_method_length
    return data


class JsonFormatter(BaseFormatter):
    """Render the report as JSON; undefined averages are null."""

    def format(self, report: ProjectReport) -> str:
        project = _metrics_dict(report.metrics)
        project["average_fields_per_class"] = report.metrics.average_fields_per_class

        files = []
        for record in report.files.values():
            entry = {"path": record.path}
            entry.update(_metrics_dict(record.metrics))
            entry["average_field_name_length"] = record.metrics.average_field_name_length
            files.append(entry)

        data = {
            "root": str(report.root) if report.root is not None else None,
            "project": project,
            "files": files,
            "skipped_files": list(report.skipped_files),
        }
        return json.dumps(data, indent=2) + "\n"
