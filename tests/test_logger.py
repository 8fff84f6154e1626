import logging

import yaml

from letter_grader.logger import RunLogger


class TestRunLogger:

    def test_init_when_no_logs_dir_then_console_only(self):
        run_logger = RunLogger()
        try:
            assert run_logger.run_dir is None
            assert run_logger.save_run_summary({"success": True}) is None
        finally:
            run_logger.close()

    def test_init_when_logs_dir_then_run_directory_and_log_file(self, tmp_path):
        run_logger = RunLogger(tmp_path)
        try:
            run_logger.logger.info("hello")
            assert run_logger.run_dir.parent == tmp_path
            assert run_logger.run_dir.name == f"run_{run_logger.timestamp}"
        finally:
            run_logger.close()

        log_file = run_logger.run_dir / f"grader_{run_logger.timestamp}.log"
        assert "hello" in log_file.read_text(encoding="utf-8")

    def test_save_when_summary_given_then_yaml_written(self, tmp_path):
        run_logger = RunLogger(tmp_path)
        try:
            path = run_logger.save_run_summary({"stage": "grade", "grades": [{"name": "Bob", "grade": "F"}]})
        finally:
            run_logger.close()
        assert yaml.safe_load(path.read_text(encoding="utf-8")) == {
            "stage": "grade",
            "grades": [{"name": "Bob", "grade": "F"}],
        }

    def test_level_when_env_set_then_applied(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        run_logger = RunLogger()
        try:
            assert run_logger.logger.level == logging.DEBUG
        finally:
            run_logger.close()

    def test_close_when_called_then_handlers_removed(self):
        run_logger = RunLogger()
        handlers_before = len(run_logger.logger.handlers)
        run_logger.close()
        assert len(run_logger.logger.handlers) == handlers_before - 1
