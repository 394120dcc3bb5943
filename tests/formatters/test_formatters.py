"""Tests for report formatters."""

import json
from pathlib import Path

import pytest

from codestat.formatters import JsonFormatter, TextFormatter, get_formatter
from codestat.statistics import StatisticAggregator


@pytest.fixture
def report():
    """The A/B scenario recorded directly through the aggregator."""
    aggregator = StatisticAggregator(root=Path("/project"))
    aggregator.record_class("A.java")
    aggregator.record_method("A.java", 1, 10)
    aggregator.record_method("A.java", 4, 20)
    aggregator.record_field("A.java", 3)
    aggregator.record_class("B.java")
    aggregator.record_field("B.java", 4)
    aggregator.record_field("B.java", 6)
    return aggregator.report


EXPECTED_TEXT = """\
Total number of classes: 2
Total number of methods: 2
Total number of fields: 3
Average length of methods in project: 15.0
Average number of fields in class: 1.5
------------
Statistics for file A.java
Average length of methods in file: 15.0
Average length of field names in file: 3.0
------------
Statistics for file B.java
Average length of methods in file: No methods
Average length of field names in file: 5.0
------------
"""


class TestTextFormatter:

    def test_layout(self, report):
        assert TextFormatter().format(report) == EXPECTED_TEXT

    def test_every_block_ends_with_separator(self, report):
        lines = TextFormatter().format(report).splitlines()
        assert lines.count("------------") == 1 + report.file_count
        assert lines[-1] == "------------"

    def test_non_terminating_average(self):
        aggregator = StatisticAggregator()
        for _ in range(3):
            aggregator.record_class("A.java")
        aggregator.record_field("A.java", 1)
        assert "Average number of fields in class: 0.3333333333333333" in aggregator.render()

    def test_render_writes_stdout(self, report, capsys):
        TextFormatter().render(report)
        assert capsys.readouterr().out == EXPECTED_TEXT


class TestJsonFormatter:

    def test_structure(self, report):
        data = json.loads(JsonFormatter().format(report))

        assert data["root"] == str(Path("/project"))
        assert data["project"]["classes"] == 2
        assert data["project"]["method_length"] == 30
        assert data["project"]["average_method_length"] == 15.0
        assert data["project"]["average_fields_per_class"] == 1.5
        assert [f["path"] for f in data["files"]] == ["A.java", "B.java"]
        assert data["skipped_files"] == []

    def test_undefined_averages_are_null(self, report):
        data = json.loads(JsonFormatter().format(report))
        file_b = data["files"][1]
        assert file_b["average_method_length"] is None
        assert file_b["average_field_name_length"] == 5.0


class TestGetFormatter:

    def test_known_names(self):
        assert isinstance(get_formatter("text"), TextFormatter)
        assert isinstance(get_formatter("json"), JsonFormatter)

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown formatter"):
            get_formatter("yaml")
