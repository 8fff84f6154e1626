"""Fixed-width letter grade report."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO, Union

from jinja2 import StrictUndefined, Template

from .errors import ReportIOError
from .records import RecordStore, require_store


@dataclass
class ReportConfig:
    """Header template and column widths of the report file."""

    header_template: str = "Letter grade for {{ count }} students given in {{ source }} is:\n\n"
    name_width: int = 20
    grade_width: int = 5


class ReportWriter:
    def __init__(
        self,
        store: RecordStore,
        config: Optional[ReportConfig] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.store = require_store(store)
        self.config = config or ReportConfig()
        self.logger = logger or logging.getLogger(__name__)

    def render_header(self, student_count: int, source_name: str) -> str:
        # keep_trailing_newline preserves the blank line after the header
        return Template(
            self.config.header_template,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        ).render(count=student_count, source=source_name)

    def format_record(self, name: str, grade: str) -> str:
        name_width = self.config.name_width
        return f"{name[:name_width]:<{name_width}}{grade:>{self.config.grade_width}}\n"

    def write_header(self, stream: TextIO, student_count: int, source_name: str) -> None:
        stream.write(self.render_header(student_count, source_name))

    def write_records(self, stream: TextIO) -> int:
        """Sort the store by name and write one line per record."""
        self.store.sort_by_name()
        for record in self.store:
            stream.write(self.format_record(record.name, record.grade))
        return len(self.store)


def write_report(
    path: Union[str, Path],
    store: RecordStore,
    source_name: str,
    config: Optional[ReportConfig] = None,
    logger: Optional[logging.Logger] = None,
) -> Path:
    """Write the full report for ``store`` to ``path``."""
    path = Path(path)
    writer = ReportWriter(store, config, logger)
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            writer.write_header(f, len(store), source_name)
            written = writer.write_records(f)
    except OSError as e:
        raise ReportIOError(f"Failed to open '{path}' file for write operation: {e}", path) from e
    writer.logger.info(f"Wrote {written} grades to {path}")
    return path
