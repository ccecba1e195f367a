# tests/test_logging_config.py

"""Tests for the per-session logging configuration."""

import logging
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from product_dashboard.config.logging_config import (
    ROOT_LOGGER_NAME,
    setup_logging,
)
from product_dashboard.config.settings import Settings


class TestLoggingConfig(unittest.TestCase):
    """Verify logging setup behaviour."""

    def setUp(self) -> None:
        """Start each test with a bare logger and a temporary logs dir."""
        self._clear_handlers()
        self._tmp = tempfile.TemporaryDirectory()
        patcher = patch.object(
            Settings, "LOGS_DIR", Path(self._tmp.name) / "logs"
        )
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self) -> None:
        self._clear_handlers()
        self._tmp.cleanup()

    @staticmethod
    def _clear_handlers() -> None:
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        for handler in list(root_logger.handlers):
            handler.close()
            root_logger.removeHandler(handler)

    def test_setup_creates_log_file(self) -> None:
        log_path = setup_logging()
        self.assertTrue(log_path.exists())

    def test_log_file_naming_convention(self) -> None:
        log_path = setup_logging()
        self.assertRegex(log_path.name, r"^session_\d{8}_\d{6}\.log$")

    def test_log_file_inside_logs_dir(self) -> None:
        log_path = setup_logging()
        self.assertEqual(log_path.parent.name, "logs")

    def test_file_handler_level_debug(self) -> None:
        setup_logging()
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        file_handlers = [
            h
            for h in root_logger.handlers
            if isinstance(h, logging.FileHandler)
        ]
        self.assertEqual(len(file_handlers), 1)
        self.assertEqual(file_handlers[0].level, logging.DEBUG)

    def test_console_level_default_and_override(self) -> None:
        setup_logging(console_level=logging.INFO)
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        stream_handlers = [
            h
            for h in root_logger.handlers
            if isinstance(h, logging.StreamHandler)
            and not isinstance(h, logging.FileHandler)
        ]
        self.assertEqual(len(stream_handlers), 1)
        self.assertEqual(stream_handlers[0].level, logging.INFO)

    def test_repeated_calls_no_duplicate_handlers(self) -> None:
        setup_logging()
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        count_before = len(root_logger.handlers)
        setup_logging()
        self.assertEqual(len(root_logger.handlers), count_before)

    def test_child_loggers_reach_the_file(self) -> None:
        log_path = setup_logging()
        logging.getLogger("product_dashboard.store").info("hello store")
        for handler in logging.getLogger(ROOT_LOGGER_NAME).handlers:
            handler.flush()
        self.assertIn("hello store", log_path.read_text(encoding="utf-8"))


if __name__ == "__main__":
    unittest.main()
