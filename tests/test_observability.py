"""
Tests for the Log collaborator and logging setup.
"""

import logging
from pathlib import Path

from mcdev_copado.core.observability.log import Log
from mcdev_copado.core.observability.logging_config import PROGRESS, _parse_level, setup_logging


class TestLog:
    def test_levels(self, log, caplog):
        caplog.set_level(logging.DEBUG)
        log.debug("d")
        log.progress("p")
        log.info("i")
        log.warn("w")

        assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
            (logging.DEBUG, "d"),
            (PROGRESS, "p"),
            (logging.INFO, "i"),
            (logging.WARNING, "w"),
        ]

    def test_progress_level_name(self, log, caplog):
        caplog.set_level(logging.DEBUG)
        log.progress("step")
        assert caplog.records[0].levelname == "PROGRESS"

    def test_error_escalates(self, log, escalations, caplog):
        caplog.set_level(logging.DEBUG)
        log.error("boom")
        assert escalations == ["boom"]
        assert caplog.records[0].levelno == logging.ERROR

    def test_failure_without_escalation(self, log, escalations, caplog):
        caplog.set_level(logging.DEBUG)
        log.failure("3: Command failed", escalate=False)
        assert escalations == []
        assert caplog.records[0].levelno == logging.INFO

    def test_failure_with_escalation(self, log, escalations):
        log.failure("fatal", escalate=True)
        assert escalations == ["fatal"]

    def test_no_hook(self, caplog):
        caplog.set_level(logging.DEBUG)
        log = Log()
        log.error("boom")
        assert log.logger.name == "mcdev_copado"
        assert "boom" in caplog.text


class TestSetupLogging:
    def test_parse_level(self):
        assert _parse_level("debug") == logging.DEBUG
        assert _parse_level("PROGRESS") == PROGRESS
        assert _parse_level("nonsense") == PROGRESS
        assert _parse_level(None) == PROGRESS

    def test_console_handler(self):
        setup_logging(level="INFO")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_progress_console_is_plain(self):
        setup_logging(level="PROGRESS")
        handler = logging.getLogger().handlers[0]
        record = logging.LogRecord("mcdev_copado", PROGRESS, __file__, 1, "Initializing npm", None, None)
        assert handler.formatter.format(record) == "Initializing npm"

    def test_debug_console_is_detailed(self):
        setup_logging(level="DEBUG")
        handler = logging.getLogger().handlers[0]
        record = logging.LogRecord("mcdev_copado", logging.DEBUG, __file__, 42, "cmd", None, None)
        line = handler.formatter.format(record)
        assert "DEBUG" in line
        assert "mcdev_copado:42" in line

    def test_info_console_shows_logger_name(self):
        setup_logging(level="INFO")
        handler = logging.getLogger().handlers[0]
        record = logging.LogRecord("mcdev_copado.tools", logging.INFO, __file__, 1, "hi", None, None)
        assert handler.formatter.format(record).endswith("[mcdev_copado.tools] hi")

    def test_file_handler(self, tmp_path: Path):
        log_file = tmp_path / "run.log"
        setup_logging(level="WARNING", log_file=str(log_file), log_file_level="DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG

        logging.getLogger("mcdev_copado.test").debug("to file only")
        for handler in root.handlers:
            handler.flush()
        assert "to file only" in log_file.read_text(encoding="utf-8")

        for handler in root.handlers:
            handler.close()
