"""
Tests for logging setup.
"""

import logging
from pathlib import Path

from html_metadata.config import LoggingSettings
from html_metadata.utils.logging import ROOT_LOGGER_NAME, get_logger, setup_logging


class TestLogging:
    """Tests for setup_logging and get_logger."""

    def test_get_logger_namespaced(self):
        """Module loggers are children of the package logger."""
        assert get_logger("extraction").name == f"{ROOT_LOGGER_NAME}.extraction"
        assert get_logger("html_metadata.loader").name == "html_metadata.loader"
        assert get_logger().name == ROOT_LOGGER_NAME

    def test_default_level(self):
        """Without settings the package logs warnings and above."""
        logger = setup_logging()

        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1

    def test_level_override(self):
        """An explicit level wins over the settings."""
        logger = setup_logging(LoggingSettings(level="ERROR"), level="debug")

        assert logger.level == logging.DEBUG

    def test_setup_idempotent(self):
        """Repeated setup does not add handlers."""
        setup_logging()
        logger = setup_logging()

        assert len(logger.handlers) == 1

    def test_file_handler(self, temp_dir: Path):
        """A file path adds a rotating file handler."""
        log_file = temp_dir / "logs" / "html-metadata.log"
        settings = LoggingSettings(file_path=str(log_file), log_to_console=False, level="INFO")

        logger = setup_logging(settings)
        get_logger("test").info("hello")
        for handler in logger.handlers:
            handler.flush()

        assert "hello" in log_file.read_text(encoding="utf-8")
