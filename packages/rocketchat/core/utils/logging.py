"""Logging configuration utilities.

Provides centralized logging configuration with:
- Output to stdout or a file
- Plain text or structured JSON lines
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

_STANDARD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "thread",
        "threadName",
        "taskName",
        "exc_info",
        "exc_text",
        "stack_info",
    }
)


class StructuredJSONFormatter(logging.Formatter):
    """Formatter that outputs one JSON object per record.

    Format:
    {
        "level": "DEBUG",
        "message": "Enqueueing: GET - https://...",
        "timestamp": "2026-01-29T12:00:00.000000+00:00",
        "context": {"logger_name": "...", "url": "...", "tag": "...", ...}
    }

    Fields passed through ``extra=`` (method, url, tag, status_code...) land in
    ``context``.
    """

    def format(self, record: logging.LogRecord) -> str:
        context: dict[str, Any] = {
            "logger_name": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            context["error_type"] = record.exc_info[0].__name__ if record.exc_info[0] else None
            context["error_message"] = str(record.exc_info[1]) if record.exc_info[1] else None
            context["stack_trace"] = record.exc_text or self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRS and not key.startswith("_"):
                context[key] = value

        log_entry = {
            "level": record.levelname,
            "message": record.getMessage(),
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "context": context,
        }
        return json.dumps(log_entry, default=str)


def _suppress_noisy_loggers() -> None:
    """Quiet third-party loggers that log every request."""
    logging.getLogger("httpx").setLevel(logging.ERROR)
    logging.getLogger("httpcore").setLevel(logging.ERROR)
    logging.getLogger("asyncio").setLevel(logging.ERROR)


def configure_logging(
    level: str = "INFO",
    format_string: str | None = None,
    filename: str | None = None,
    structured: bool = False,
) -> None:
    """Configure application-wide logging.

    Can be called multiple times to reconfigure logging (uses force=True).

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Case-insensitive.
        format_string: Format string for text output. Ignored if structured=True.
        filename: Path to log file. If None, logs to stdout.
        structured: Emit JSON lines instead of text.

    Examples:
        >>> configure_logging(level="DEBUG")
        >>> configure_logging(level="INFO", structured=True, filename="client.jsonl")
    """
    handler: logging.Handler
    if filename:
        handler = logging.FileHandler(filename)
    else:
        handler = logging.StreamHandler(sys.stdout)

    formatter: logging.Formatter
    if structured:
        formatter = StructuredJSONFormatter()
    else:
        if format_string is None:
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        formatter = logging.Formatter(format_string)

    handler.setFormatter(formatter)

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[handler],
        force=True,
    )

    _suppress_noisy_loggers()
