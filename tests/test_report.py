"""
Unit Tests for the letter grade report writer.
"""

import io

import pytest

from letter_grader.errors import EmptyStoreError, ReportIOError
from letter_grader.records import RecordStore, StudentRecord
from letter_grader.report import ReportConfig, ReportWriter, write_report


def _graded_store(*entries):
    store = RecordStore()
    for name, grade in entries:
        store.append(StudentRecord(name=name, scores=(), grade=grade))
    return store


class TestReportWriter:

    def test_header_when_written_then_count_and_source(self):
        stream = io.StringIO()
        ReportWriter(RecordStore()).write_header(stream, 2, "input.txt")
        assert stream.getvalue() == "Letter grade for 2 students given in input.txt is:\n\n"

    def test_records_when_written_then_sorted_fixed_width(self):
        store = _graded_store(("Bob", "F"), ("Alice", "A"))
        stream = io.StringIO()
        assert ReportWriter(store).write_records(stream) == 2
        assert stream.getvalue() == (
            "Alice" + " " * 15 + "    A\n"
            "Bob" + " " * 17 + "    F\n"
        )
        assert store.names() == ["Alice", "Bob"]

    def test_record_when_name_too_long_then_truncated(self):
        line = ReportWriter(RecordStore()).format_record("A" * 30, "B")
        assert line == "A" * 20 + "    B\n"

    def test_config_when_custom_widths_then_used(self):
        writer = ReportWriter(RecordStore(), ReportConfig(name_width=6, grade_width=2))
        assert writer.format_record("Al", "C") == "Al     C\n"

    def test_header_when_template_variable_unknown_then_raises(self):
        from jinja2.exceptions import UndefinedError

        writer = ReportWriter(RecordStore(), ReportConfig(header_template="{{ missing }}"))
        with pytest.raises(UndefinedError):
            writer.render_header(1, "x")

    def test_init_when_store_missing_then_raises(self):
        with pytest.raises(EmptyStoreError):
            ReportWriter(None)


class TestWriteReport:

    def test_write_when_path_given_then_full_report(self, tmp_path):
        store = _graded_store(("Bob", "F"), ("Alice", "A"))
        path = write_report(tmp_path / "output.txt", store, "input.txt")
        assert path.read_text(encoding="utf-8").splitlines() == [
            "Letter grade for 2 students given in input.txt is:",
            "",
            "Alice                   A",
            "Bob                     F",
        ]

    def test_write_when_directory_missing_then_raises_io_error(self, tmp_path):
        with pytest.raises(ReportIOError):
            write_report(tmp_path / "missing" / "out.txt", RecordStore(), "input.txt")
