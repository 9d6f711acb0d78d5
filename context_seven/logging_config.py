"""
Context-Seven MCP Server - Logging

Console and daily rolling file logging, plus the tool call logger
shared by all MCP tools.
"""

import json
import logging
import logging.handlers
from datetime import datetime
from typing import Any, List, Optional

from context_seven.config import LogSettings

LOG_FORMAT = "%(asctime)s | %(name)-32s | %(levelname)-8s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "context-seven.log"

MAX_RESULT_LOG_CHARS = 500


def setup_logging(settings: LogSettings) -> logging.Logger:
    """
    Configure root logging for the server process.

    Console output goes to stderr so the stdio transport keeps stdout
    for protocol messages. When enabled, a file handler rotates the log
    at midnight and keeps ``settings.backup_count`` old files.

    Args:
        settings: Logging configuration

    Returns:
        The root logger
    """
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handlers: List[logging.Handler] = [logging.StreamHandler()]

    if settings.to_file:
        settings.directory.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.TimedRotatingFileHandler(
                settings.directory / LOG_FILE_NAME,
                when="midnight",
                backupCount=settings.backup_count,
                encoding="utf-8",
            )
        )

    root = logging.getLogger()
    root.setLevel(getattr(logging, settings.level))
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    # Reduce HTTP client verbosity
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    return root


def log_startup(logger: logging.Logger, settings: LogSettings, server_name: str) -> None:
    """Write the startup banner."""
    logger.info("=" * 50)
    logger.info("%s MCP Server started at %s", server_name, datetime.now().isoformat(sep=" "))
    if settings.to_file:
        logger.info("Logs directory: %s", settings.directory.resolve())
    logger.info("=" * 50)


def truncate_result(text: str, limit: int = MAX_RESULT_LOG_CHARS) -> str:
    """Shorten long tool results for the log."""
    if len(text) > limit:
        return text[:limit] + "... [truncated]"
    return text


class ToolCallLogger:
    """Logs MCP tool calls, results and errors."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("context_seven.tools")

    @staticmethod
    def _serialize(args: Any) -> str:
        try:
            return json.dumps(args, default=str, ensure_ascii=False)
        except (TypeError, ValueError):
            return repr(args)

    def call(self, tool_name: str, args: Any) -> None:
        self.logger.info(
            "Tool Call: %s, Arguments: %s", tool_name, self._serialize(args)
        )

    def result(self, tool_name: str, result: Any) -> None:
        text = "" if result is None else str(result)
        self.logger.info(
            "Tool Result: %s, Result: %s", tool_name, truncate_result(text)
        )

    def error(self, tool_name: str, args: Any, exc: BaseException) -> None:
        self.logger.error(
            "Tool Error: %s, Arguments: %s",
            tool_name,
            self._serialize(args),
            exc_info=exc,
        )
