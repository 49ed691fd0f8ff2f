"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog


def setup_logging(log_level: str = "INFO"):
    """Configure structlog with JSON output to stdout.

    Should be called once by the host application or script.  The library
    modules only obtain loggers; they never configure output themselves.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level!r}")

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.TimeStamper(fmt="iso"),
            render_registry_members,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,
    )


def render_registry_members(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Log numeral registry members by type name instead of bare id.

    ``NumeralSystem.PERSIAN_DIGITS`` would otherwise serialize as ``3``.
    """
    for key, value in event_dict.items():
        type_name = getattr(value, "type_name", None)
        if isinstance(type_name, str):
            event_dict[key] = type_name
    return event_dict


def bind_import_context(source: str, **fields: Any) -> None:
    """Attach *source* (file name, upload id) to every following log line."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(source=source, **fields)


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a bound logger for the given component *name*."""
    return structlog.get_logger(name)
