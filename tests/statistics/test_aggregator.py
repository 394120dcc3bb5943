"""Tests for StatisticAggregator."""

import pytest

from codestat.formatters import NO_CLASSES, NO_FIELDS, NO_METHODS
from codestat.scanning import ClassSeen, FieldSeen, MethodSeen
from codestat.statistics import MetricKind, StatisticAggregator


@pytest.fixture
def aggregator():
    return StatisticAggregator()


class TestRecording:
    """Each record_* call updates corpus and file scope."""

    def test_record_class(self, aggregator):
        aggregator.record_class("A.java")
        assert aggregator.report.metrics.classes == 1
        assert aggregator.report.files["A.java"].metrics.classes == 1

    def test_record_method(self, aggregator):
        aggregator.record_method("A.java", name_length=3, body_length=25)
        file_metrics = aggregator.report.files["A.java"].metrics
        for metrics in (aggregator.report.metrics, file_metrics):
            assert metrics.methods == 1
            assert metrics[MetricKind.LENGTH_OF_METHODS] == 25

    def test_record_field(self, aggregator):
        aggregator.record_field("A.java", name_length=6)
        file_metrics = aggregator.report.files["A.java"].metrics
        for metrics in (aggregator.report.metrics, file_metrics):
            assert metrics.fields == 1
            assert metrics[MetricKind.LENGTH_OF_FIELDS_NAMES] == 6

    def test_files_are_scoped_separately(self, aggregator):
        aggregator.record_field("A.java", 3)
        aggregator.record_field("B.java", 5)
        assert aggregator.report.metrics.fields == 2
        assert aggregator.report.files["A.java"].metrics.fields == 1
        assert aggregator.report.files["B.java"].metrics.fields == 1

    def test_recording_twice_doubles_contribution(self, aggregator):
        """Replaying a method is not idempotent: it is simply added again."""
        aggregator.record_method("A.java", name_length=3, body_length=40)
        aggregator.record_method("A.java", name_length=3, body_length=40)
        assert aggregator.report.metrics.methods == 2
        assert aggregator.report.metrics[MetricKind.LENGTH_OF_METHODS] == 80
        assert aggregator.report.files["A.java"].metrics[MetricKind.LENGTH_OF_METHODS] == 80

    def test_open_file_registers_without_counting(self, aggregator):
        aggregator.open_file("Empty.java")
        assert list(aggregator.report.files) == ["Empty.java"]
        assert aggregator.report.metrics.as_dict() == {
            "classes": 0,
            "methods": 0,
            "method_length": 0,
            "fields": 0,
            "field_name_length": 0,
        }

    def test_skip_file(self, aggregator):
        aggregator.skip_file("Broken.java")
        assert aggregator.report.skipped_files == ["Broken.java"]
        assert aggregator.report.files == {}


class TestConsume:
    """Visitor events are dispatched onto the record_* operations."""

    EVENTS = [
        ClassSeen("A"),
        FieldSeen("foo", 3),
        MethodSeen("a", 1, 10),
        MethodSeen("bbbb", 4, 20),
    ]

    def test_consume(self, aggregator):
        aggregator.consume("A.java", self.EVENTS)
        metrics = aggregator.report.files["A.java"].metrics
        assert metrics.classes == 1
        assert metrics.methods == 2
        assert metrics[MetricKind.LENGTH_OF_METHODS] == 30
        assert metrics.fields == 1

    def test_consume_without_events_lists_file(self, aggregator):
        aggregator.consume("package-info.java", [])
        assert "package-info.java" in aggregator.report.files

    def test_class_events_ignored_in_per_file_mode(self):
        aggregator = StatisticAggregator(count_class_events=False)
        aggregator.consume("A.java", [ClassSeen("A"), ClassSeen("Inner")])
        assert aggregator.report.metrics.classes == 0


class TestRender:
    """Rendering reads the report and never changes it."""

    def test_empty_corpus(self, aggregator):
        output = aggregator.render()
        assert NO_METHODS in output
        assert NO_CLASSES in output
        assert "Total number of classes: 0" in output
        assert "Total number of methods: 0" in output
        assert "Total number of fields: 0" in output

    def test_file_without_fields(self, aggregator):
        aggregator.record_class("A.java")
        aggregator.record_method("A.java", 1, 12)
        output = aggregator.render()
        assert "Average length of field names in file: " + NO_FIELDS in output
        assert "Average length of methods in file: 12.0" in output

    def test_n_files_with_one_method_each(self, aggregator):
        n, length = 7, 23
        for i in range(n):
            aggregator.record_method(f"F{i}.java", name_length=1, body_length=length)

        metrics = aggregator.report.metrics
        assert metrics.methods == n
        assert metrics[MetricKind.LENGTH_OF_METHODS] == n * length
        assert metrics.average_method_length == length
        assert f"Average length of methods in project: {float(length)}" in aggregator.render()

    def test_render_is_repeatable(self, aggregator):
        aggregator.record_class("A.java")
        aggregator.record_field("A.java", 4)
        before = aggregator.report.metrics.as_dict()

        first = aggregator.render()
        second = aggregator.render()

        assert first == second
        assert aggregator.report.metrics.as_dict() == before

    def test_json_render(self, aggregator):
        aggregator.record_class("A.java")
        assert aggregator.render("json").lstrip().startswith("{")

    def test_unknown_format(self, aggregator):
        with pytest.raises(ValueError):
            aggregator.render("xml")
