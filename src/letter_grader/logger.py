import logging
import os
import yaml
from datetime import datetime
from pathlib import Path
from typing import Dict, Any, Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class RunLogger:
    """Console logging for a grading run, plus optional on-disk run artifacts.

    When ``logs_dir`` is given, every run gets its own timestamped directory
    holding the log file and a YAML summary of the run.
    """

    def __init__(self, logs_dir: Optional[Path] = None, name: str = "letter_grader"):
        self.timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        self.logs_dir = Path(logs_dir) if logs_dir else None
        self.run_dir: Optional[Path] = None

        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO))
        self.logger.propagate = False
        formatter = logging.Formatter(LOG_FORMAT)

        self._handlers = []
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        self._add_handler(console_handler)

        if self.logs_dir is not None:
            self.logs_dir.mkdir(parents=True, exist_ok=True)
            self.run_dir = self.logs_dir / f"run_{self.timestamp}"
            self.run_dir.mkdir(exist_ok=True)

            log_file = self.run_dir / f"grader_{self.timestamp}.log"
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(formatter)
            self._add_handler(file_handler)

            self.logger.info(f"Logging initialized. Run directory: {self.run_dir}")
            self.logger.info(f"Log file: {log_file}")

    def _add_handler(self, handler: logging.Handler) -> None:
        self.logger.addHandler(handler)
        self._handlers.append(handler)

    def save_run_summary(self, summary: Dict[str, Any]) -> Optional[Path]:
        if self.run_dir is None:
            return None

        summary_file = self.run_dir / "summary.yaml"
        with open(summary_file, 'w', encoding='utf-8') as f:
            yaml.safe_dump(summary, f, default_flow_style=False, allow_unicode=True, sort_keys=False)

        self.logger.info(f"Run summary saved to: {summary_file}")
        return summary_file

    def close(self) -> None:
        """Detach and close the handlers this run added."""
        for handler in self._handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self._handlers = []
