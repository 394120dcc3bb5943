"""Tests for MetricSet, FileRecord and ProjectReport."""

import pytest

from codestat.statistics import FileRecord, MetricKind, MetricSet, ProjectReport


class TestMetricSet:
    """Five counters, always present, only growing."""

    def test_all_kinds_start_at_zero(self):
        metrics = MetricSet()
        assert set(metrics) == set(MetricKind)
        assert all(metrics[kind] == 0 for kind in MetricKind)

    def test_add(self):
        metrics = MetricSet()
        metrics.add(MetricKind.LENGTH_OF_METHODS, 42)
        metrics.add(MetricKind.LENGTH_OF_METHODS, 8)
        assert metrics[MetricKind.LENGTH_OF_METHODS] == 50

    def test_add_defaults_to_one(self):
        metrics = MetricSet()
        metrics.add(MetricKind.NUMBER_OF_CLASSES)
        assert metrics.classes == 1

    def test_negative_amount_rejected(self):
        metrics = MetricSet()
        with pytest.raises(ValueError):
            metrics.add(MetricKind.NUMBER_OF_FIELDS, -1)
        assert metrics.fields == 0

    def test_as_dict_order(self):
        assert list(MetricSet().as_dict()) == [
            "classes",
            "methods",
            "method_length",
            "fields",
            "field_name_length",
        ]

    def test_instances_do_not_share_counts(self):
        first, second = MetricSet(), MetricSet()
        first.add(MetricKind.NUMBER_OF_METHODS)
        assert second.methods == 0


class TestAverages:
    """Averages are None whenever the denominator is zero."""

    def test_undefined_when_empty(self):
        metrics = MetricSet()
        assert metrics.average_method_length is None
        assert metrics.average_fields_per_class is None
        assert metrics.average_field_name_length is None

    def test_method_length(self):
        metrics = MetricSet()
        metrics.add(MetricKind.NUMBER_OF_METHODS, 2)
        metrics.add(MetricKind.LENGTH_OF_METHODS, 30)
        assert metrics.average_method_length == 15.0

    def test_fields_per_class(self):
        metrics = MetricSet()
        metrics.add(MetricKind.NUMBER_OF_CLASSES, 2)
        metrics.add(MetricKind.NUMBER_OF_FIELDS, 3)
        assert metrics.average_fields_per_class == 1.5

    def test_fields_without_classes(self):
        metrics = MetricSet()
        metrics.add(MetricKind.NUMBER_OF_FIELDS, 3)
        assert metrics.average_fields_per_class is None

    def test_field_name_length(self):
        metrics = MetricSet()
        metrics.add(MetricKind.NUMBER_OF_FIELDS, 2)
        metrics.add(MetricKind.LENGTH_OF_FIELDS_NAMES, 10)
        assert metrics.average_field_name_length == 5.0


class TestProjectReport:

    def test_file_created_on_first_touch(self):
        report = ProjectReport()
        record = report.file("A.java")
        assert isinstance(record, FileRecord)
        assert report.file("A.java") is record
        assert report.file_count == 1

    def test_files_keep_insertion_order(self):
        report = ProjectReport()
        for path in ("b/Z.java", "A.java", "m/M.java"):
            report.file(path)
        assert list(report.files) == ["b/Z.java", "A.java", "m/M.java"]
