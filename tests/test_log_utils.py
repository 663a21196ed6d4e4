import io
import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from unittest.mock import patch

from rich.logging import RichHandler

from ruby_version_checker import log_utils


def _own_handlers():
    """Handlers attached by log_utils, ignoring any added by the test runner."""
    return [
        handler
        for handler in log_utils.logger.handlers
        if isinstance(handler, (RichHandler, RotatingFileHandler))
    ]


def _console_handler():
    return next(
        handler
        for handler in log_utils.logger.handlers
        if isinstance(handler, RichHandler)
    )


class TestLogUtils:
    """Test suite for log_utils module."""

    def setup_method(self):
        """Reset logger state before each test."""
        for handler in log_utils.logger.handlers[:]:
            log_utils.logger.removeHandler(handler)
            handler.close()

        log_utils._file_handler = None

        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop(log_utils.LOG_LEVEL_ENV_VAR, None)
            log_utils._initialize_logger()

    def teardown_method(self):
        if log_utils._file_handler is not None:
            log_utils.logger.removeHandler(log_utils._file_handler)
            log_utils._file_handler.close()
            log_utils._file_handler = None

    def test_logger_initialization(self):
        """Test that logger is properly initialized."""
        assert log_utils.logger.name == "ruby_version_checker"
        assert not log_utils.logger.propagate
        assert len(_own_handlers()) == 1
        assert isinstance(_own_handlers()[0], RichHandler)
        assert log_utils.logger.level == logging.INFO

    def test_console_handler_writes_to_stderr(self):
        """The report owns stdout, so console logging must use stderr."""
        handler = _console_handler()
        assert handler.console.stderr

    def test_logger_initialization_with_env_var(self):
        """Test logger initialization with environment variable."""
        with patch.dict(os.environ, {"RUBY_VERSION_CHECKER_LOG_LEVEL": "DEBUG"}):
            log_utils._initialize_logger()
            assert log_utils.logger.level == logging.DEBUG
            assert _console_handler().level == logging.DEBUG

    def test_logger_initialization_with_invalid_env_var(self):
        """Test logger initialization with invalid environment variable."""
        with patch.dict(os.environ, {"RUBY_VERSION_CHECKER_LOG_LEVEL": "LOUD"}):
            log_utils._initialize_logger()
            assert log_utils.logger.level == logging.INFO

    def test_set_log_level_valid(self):
        """Test setting valid log levels."""
        log_utils.set_log_level("debug")
        assert log_utils.logger.level == logging.DEBUG

        log_utils.set_log_level("WARNING")
        assert log_utils.logger.level == logging.WARNING
        assert _console_handler().level == logging.WARNING

    def test_set_log_level_invalid(self):
        """Test setting invalid log level."""
        original_level = log_utils.logger.level
        log_utils.set_log_level("INVALID_LEVEL")
        assert log_utils.logger.level == original_level

    def test_rich_handler_keeps_message_only_format(self):
        log_utils.set_log_level("DEBUG")
        assert _console_handler().formatter._fmt == "%(message)s"

        log_utils.set_log_level("INFO")
        assert _console_handler().formatter._fmt == "%(message)s"

    def test_set_log_level_with_non_rich_handler(self):
        """Standard handlers switch between the INFO and DEBUG formats."""
        standard_handler = logging.StreamHandler(io.StringIO())
        log_utils.logger.addHandler(standard_handler)

        try:
            log_utils.set_log_level("INFO")
            assert standard_handler.formatter._fmt == log_utils.INFO_LOG_FORMAT
            assert standard_handler.formatter.datefmt == log_utils.LOG_DATE_FORMAT

            log_utils.set_log_level("DEBUG")
            assert standard_handler.formatter._fmt == log_utils.DEBUG_LOG_FORMAT
        finally:
            log_utils.logger.removeHandler(standard_handler)

    def test_add_file_logging(self, tmp_path):
        """Test adding file logging functionality."""
        log_utils.add_file_logging(tmp_path, "INFO")

        assert len(_own_handlers()) == 2
        assert log_utils._file_handler in log_utils.logger.handlers
        assert (tmp_path / "ruby_version_checker.log").exists()

    def test_add_file_logging_replaces_existing(self, tmp_path):
        """Test that adding file logging replaces existing file handler."""
        log_utils.add_file_logging(tmp_path, "INFO")
        first_handler = log_utils._file_handler

        log_utils.add_file_logging(tmp_path, "DEBUG")

        assert log_utils._file_handler is not first_handler
        assert first_handler not in log_utils.logger.handlers
        assert len(_own_handlers()) == 2
        assert log_utils._file_handler.level == logging.DEBUG

    def test_foreign_handlers_are_left_alone(self, tmp_path):
        foreign_handler = logging.StreamHandler(io.StringIO())
        log_utils.logger.addHandler(foreign_handler)

        try:
            log_utils.add_file_logging(tmp_path, "INFO")
            log_utils.add_file_logging(tmp_path, "INFO")

            assert foreign_handler in log_utils.logger.handlers
            assert len(_own_handlers()) == 2
        finally:
            log_utils.logger.removeHandler(foreign_handler)

    def test_add_file_logging_invalid_level_defaults_to_info(self, tmp_path):
        log_utils.add_file_logging(tmp_path, "chatty")

        assert log_utils._file_handler.level == logging.INFO

    def test_file_logging_creates_directory(self, tmp_path):
        log_dir = Path(tmp_path) / "nested" / "log"

        log_utils.add_file_logging(log_dir, "INFO")

        assert (log_dir / "ruby_version_checker.log").exists()

    def test_rotating_file_handler_configuration(self, tmp_path):
        log_utils.add_file_logging(tmp_path, "INFO")

        handler = log_utils._file_handler
        assert handler.maxBytes == 1024 * 1024
        assert handler.backupCount == 3
        assert handler.encoding == "utf-8"

    def test_file_receives_messages(self, tmp_path):
        log_utils.add_file_logging(tmp_path, "INFO")

        log_utils.logger.info("Checking Ruby releases")
        log_utils._file_handler.flush()

        content = (tmp_path / "ruby_version_checker.log").read_text(encoding="utf-8")
        assert "INFO - Checking Ruby releases" in content
