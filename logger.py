"""
Structured logging for the matcher.

structlog with ISO timestamps and log level; JSON lines by default,
human-readable console output when LOG_FORMAT=console.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any

import structlog

from config import Config

LOG_LEVEL_VALUE = getattr(logging, Config.LOG_LEVEL, logging.INFO)


def _add_timestamp(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    if "timestamp" not in event_dict:
        event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def configure_structlog(log_format: str | None = None, level: int = LOG_LEVEL_VALUE) -> None:
    """Configure structlog processors and level. Safe to call again to reconfigure."""
    fmt = (log_format or Config.LOG_FORMAT).strip().lower()
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _add_timestamp,
    ]
    if fmt == "console":
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    else:
        processors.append(structlog.processors.JSONRenderer())
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str | None = None) -> Any:
    """Return a bound structlog logger tagged with the calling module name."""
    if name:
        return structlog.get_logger(module=name)
    return structlog.get_logger()
