"""
Structured Logging Configuration

Provides:
- Command context (acting nick, target) carried in context variables
- JSON formatting for log files
- Human-readable console formatting
- Log rotation support
"""

import contextvars
import json
import logging
import logging.handlers
import sys
import traceback
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional, Union

from namedmodes.config.schema import LoggingConfig


nick_var: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "nick", default=None
)
target_var: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "target", default=None
)


class CommandContext:
    """Context manager tagging log records with the acting nick and target."""

    def __init__(self, nick: Optional[str] = None, target: Optional[str] = None):
        self.nick = nick
        self.target = target
        self._tokens = []

    def __enter__(self):
        if self.nick:
            self._tokens.append((nick_var, nick_var.set(self.nick)))
        if self.target:
            self._tokens.append((target_var, target_var.set(self.target)))
        return self

    def __exit__(self, *args):
        for var, token in reversed(self._tokens):
            var.reset(token)
        self._tokens = []


def _context_fields() -> Dict[str, str]:
    fields = {}
    nick = nick_var.get()
    target = target_var.get()
    if nick:
        fields["nick"] = nick
    if target:
        fields["target"] = target
    return fields


def _timestamp(record: logging.LogRecord) -> datetime:
    return datetime.fromtimestamp(record.created, tz=timezone.utc)


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def __init__(self, include_traceback: bool = True, extra_fields: Optional[Dict[str, Any]] = None):
        super().__init__()
        self.include_traceback = include_traceback
        self.extra_fields = extra_fields or {}

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": _timestamp(record).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        log_data.update(_context_fields())
        log_data.update(self.extra_fields)

        if record.exc_info and self.include_traceback:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": traceback.format_exception(*record.exc_info),
            }

        return json.dumps(log_data, default=str)


class StructuredFormatter(logging.Formatter):
    """Human-readable structured formatter for console output."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        level = record.levelname
        if self.use_color and sys.stdout.isatty():
            level = f"{self.COLORS.get(level, '')}{level}{self.RESET}"

        parts = [
            f"[{_timestamp(record).strftime('%Y-%m-%d %H:%M:%S')}]",
            f"[{level}]",
            f"[{record.name}]",
            record.getMessage(),
        ]

        context = _context_fields()
        if context:
            parts.append("[" + ", ".join(f"{k}={v}" for k, v in context.items()) + "]")

        if record.exc_info:
            parts.append("\n" + "".join(traceback.format_exception(*record.exc_info)))

        return " ".join(parts)


def setup_logging(
    level: Union[str, int] = logging.INFO,
    json_format: bool = False,
    log_dir: Optional[Union[str, Path]] = None,
    log_file: str = "namedmodes.log",
    console_output: bool = True,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> logging.Logger:
    """
    Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Use JSON formatting for file logs
        log_dir: Directory for a rotating log file; no file logging if None
        log_file: Name of the log file
        console_output: Enable console output
        max_bytes: Max size of log file before rotation
        backup_count: Number of backup files to keep

    Returns:
        Configured root logger
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if log_dir is not None:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path / log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(JSONFormatter() if json_format else StructuredFormatter(use_color=False))
        root_logger.addHandler(file_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(StructuredFormatter(use_color=True))
        root_logger.addHandler(console_handler)

    return root_logger


def setup_logging_from_config(config: LoggingConfig) -> logging.Logger:
    """Configure logging from the validated `logging` config section."""
    return setup_logging(
        level=config.level,
        json_format=config.json_format,
        log_dir=config.log_dir,
        log_file=config.log_file,
    )
