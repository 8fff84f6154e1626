"""Runs the grading stages against one input file and one output file."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from .errors import GraderError
from .files import read_student_lines
from .grading import DEFAULT_SCHEME, GradeEngine, GradingScheme
from .logger import RunLogger
from .records import RecordStore
from .report import ReportConfig, write_report
from .statistics import ClassStatistics, format_statistics, summarize

MSG_READ_DONE = "Student data read from input file '{}'"
MSG_GRADING_DONE = "Letter grade has been calculated for all students"
MSG_WRITE_DONE = "Student letter grades written to output file '{}'"


@dataclass
class PipelineResult:
    success: bool
    stage: str
    error: Optional[str] = None
    student_count: int = 0
    grades: List[Dict[str, str]] = field(default_factory=list)
    statistics: Optional[ClassStatistics] = None

    def to_summary(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "stage": self.stage,
            "error": self.error,
            "student_count": self.student_count,
            "grades": [dict(entry) for entry in self.grades],
            "statistics": self.statistics.to_dict() if self.statistics else None,
        }


class GradingPipeline:
    """Read, grade, write and summarize a class roster.

    The pipeline owns the record store for the whole run. It is created when
    ``run`` starts and cleared exactly once when ``run`` finishes, whether or
    not a stage failed. The first failing stage stops the run.
    """

    STAGES = ("read", "grade", "write", "statistics", "teardown")

    def __init__(
        self,
        input_path: Path,
        output_path: Path,
        scheme: GradingScheme = DEFAULT_SCHEME,
        run_logger: Optional[RunLogger] = None,
        report_config: Optional[ReportConfig] = None,
        echo=print,
    ):
        self.input_path = Path(input_path)
        self.output_path = Path(output_path)
        self.scheme = scheme
        self.run_logger = run_logger
        self.logger = run_logger.logger if run_logger else logging.getLogger(__name__)
        self.report_config = report_config
        self.echo = echo

    def run(self) -> PipelineResult:
        store = RecordStore()
        stage = self.STAGES[0]
        result = PipelineResult(success=False, stage=stage)

        try:
            self._read(store)
            result.student_count = len(store)

            stage = "grade"
            self._grade(store)
            result.grades = [{"name": record.name, "grade": record.grade} for record in store]

            stage = "write"
            self._write(store)

            stage = "statistics"
            result.statistics = summarize(store, self.scheme)
            self.echo("\n" + format_statistics(result.statistics))

            result.success = True
        except GraderError as e:
            result.error = str(e)
            self.logger.error(f"Stage '{stage}' failed: {e}")
            self.echo(f"\nERROR! {e}")
        finally:
            store.clear()
            self.logger.debug("Record store torn down")
        result.stage = self.STAGES[-1] if result.success else stage

        if self.run_logger is not None:
            summary = result.to_summary()
            summary["input_file"] = str(self.input_path)
            summary["output_file"] = str(self.output_path)
            self.run_logger.save_run_summary(summary)

        return result

    def _read(self, store: RecordStore) -> None:
        lines: List[str] = read_student_lines(self.input_path)
        self.logger.info(f"Read {len(lines)} lines from {self.input_path}")
        engine = GradeEngine(store, self.scheme, self.logger)
        for line in lines:
            engine.create_student_record(line)
        self.echo(MSG_READ_DONE.format(self.input_path))

    def _grade(self, store: RecordStore) -> None:
        graded = GradeEngine(store, self.scheme, self.logger).compute_all_grades()
        self.logger.info(f"Graded {graded} students")
        self.echo(MSG_GRADING_DONE)

    def _write(self, store: RecordStore) -> None:
        write_report(
            self.output_path,
            store,
            str(self.input_path),
            config=self.report_config,
            logger=self.logger,
        )
        self.echo(MSG_WRITE_DONE.format(self.output_path))
