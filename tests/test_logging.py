"""
Tests for logging setup and the tool call logger
"""

import logging
import logging.handlers

import pytest

from context_seven.config import LogSettings
from context_seven.logging_config import (
    ToolCallLogger,
    setup_logging,
    truncate_result,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_creates_daily_file_handler(self, tmp_path, restore_root_logger):
        """Test console and rolling file handlers."""
        log_dir = tmp_path / "logs"
        settings = LogSettings(LOG_DIR=log_dir, LOG_LEVEL="DEBUG", LOG_TO_FILE=True)

        root = setup_logging(settings)

        file_handlers = [
            h for h in root.handlers
            if isinstance(h, logging.handlers.TimedRotatingFileHandler)
        ]
        assert len(file_handlers) == 1
        assert file_handlers[0].when == "MIDNIGHT"
        assert log_dir.is_dir()
        assert root.level == logging.DEBUG

    def test_console_only(self, tmp_path, restore_root_logger):
        """Test that file logging can be disabled."""
        settings = LogSettings(LOG_DIR=tmp_path / "unused", LOG_TO_FILE=False)

        root = setup_logging(settings)

        assert not any(
            isinstance(h, logging.handlers.TimedRotatingFileHandler)
            for h in root.handlers
        )
        assert not (tmp_path / "unused").exists()


class TestToolCallLogger:
    """Tests for ToolCallLogger."""

    def test_truncate_result(self):
        """Test truncation beyond 500 characters."""
        assert truncate_result("x" * 500) == "x" * 500
        assert truncate_result("x" * 501) == "x" * 500 + "... [truncated]"

    def test_call_logs_json_arguments(self, caplog):
        """Test call-start entries."""
        call_log = ToolCallLogger(logging.getLogger("test.tools"))

        with caplog.at_level(logging.INFO, logger="test.tools"):
            call_log.call("get_library_docs", {"library_id": "/a/b", "tokens": 10000})

        assert 'Tool Call: get_library_docs, Arguments: {"library_id": "/a/b", "tokens": 10000}' in caplog.text

    def test_result_is_truncated(self, caplog):
        """Test that long results are shortened in the log."""
        call_log = ToolCallLogger(logging.getLogger("test.tools"))

        with caplog.at_level(logging.INFO, logger="test.tools"):
            call_log.result("get_library_docs", "y" * 2000)

        assert "y" * 500 + "... [truncated]" in caplog.text
        assert "y" * 501 not in caplog.text

    def test_error_includes_traceback(self, caplog):
        """Test error entries."""
        call_log = ToolCallLogger(logging.getLogger("test.tools"))

        try:
            raise RuntimeError("kaboom")
        except RuntimeError as e:
            with caplog.at_level(logging.ERROR, logger="test.tools"):
                call_log.error("resolve_library_id", "dotnet", e)

        assert "Tool Error: resolve_library_id" in caplog.text
        assert caplog.records[-1].exc_info is not None
