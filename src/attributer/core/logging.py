"""
Structured logging for the attribute pipeline.

Manifesto:
    Declaration and assignment failures are easiest to diagnose when every
    log line carries the owner type and attribute name as fields rather
    than interpolated text.  The package only hands out loggers; structlog
    is configured when the application calls ``configure_logging()``, never
    on import.

Architecture:
    ::

        configure_logging(level="DEBUG", json_format=False)
            ↓
        structlog processor chain:
          1. TimeStamper (iso)
          2. add_log_level
          3. _add_service_metadata
          4. JSONRenderer (or ConsoleRenderer)

        logger = get_logger(__name__)
        logger.debug("attribute_declared", owner="User", attribute="name")

Examples:
    >>> from attributer.core.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG", json_format=True)
    >>> logger = get_logger(__name__)
    >>> logger.debug("attribute_declared", owner="User", attribute="name")

Tags:
    logging, structlog, observability, attributer

Doc-Types:
    - API Reference
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

_SERVICE_NAME = "attributer"


def _add_service_metadata(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add service-level metadata to all logs."""
    event_dict.setdefault("service.name", _SERVICE_NAME)
    return event_dict


def _resolve_level(level: str) -> int:
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(
    level: str | None = None,
    json_format: bool | None = None,
    service: str | None = None,
    add_timestamp: bool = True,
) -> None:
    """Configure structured logging for the package.

    Arguments left as ``None`` are read from :func:`attributer.core.settings.get_settings`.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: True for JSON, False for console, None for the configured format
            (``auto`` means JSON unless stdout is a tty)
        service: Service name to include in logs
        add_timestamp: Include ISO timestamp in logs
    """
    from attributer.core.settings import get_settings

    global _SERVICE_NAME

    settings = get_settings()
    level = level or settings.log_level
    _SERVICE_NAME = service or settings.service_name

    if json_format is None:
        if settings.log_format == "auto":
            json_format = not sys.stdout.isatty()
        else:
            json_format = settings.log_format == "json"

    numeric_level = _resolve_level(level)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        _add_service_metadata,
    ]

    if add_timestamp:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_format:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger.

    Args:
        name: Logger name (usually __name__)
    """
    return structlog.get_logger(name)


__all__ = [
    "configure_logging",
    "get_logger",
]
