"""
Diagnostic channel for load failures.

Every fetch, parse or record failure is reported as one structured
``structlog`` event. The library never configures logging on import; the
command line (or the host application) calls :func:`configure_logging`.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Optional

import structlog


def configure_logging(level: str = "INFO", fmt: str = "console") -> None:
    """
    Configure structlog rendering for the process.

    Args:
        level: Minimum level name (DEBUG, INFO, WARNING, ...)
        fmt: "json" for machine-readable lines, "console" for human-readable ones
    """
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if fmt == "json":
        processors.append(structlog.processors.JSONRenderer(ensure_ascii=False))
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper(), logging.INFO)),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: Optional[str] = None) -> Any:
    """Get a structlog logger bound to a module name."""
    if name:
        return structlog.get_logger(name)
    return structlog.get_logger()


_logger = get_logger(__name__)


def report_failure(
    event: str,
    operation: str,
    language: Any,
    error: Any,
    source_key: Optional[str] = None,
    **context: Any,
) -> None:
    """
    Emit one warning entry describing a recovered failure.

    Args:
        event: Event name (e.g. "source_unavailable")
        operation: Public operation that hit the failure
        language: Language the operation ran for
        error: Exception or description of what went wrong
        source_key: Source key, when the failure concerns one source
        **context: Extra location details (position, group, reason, ...)
    """
    _logger.warning(
        event,
        operation=operation,
        language=getattr(language, "value", language),
        source_key=source_key,
        error=str(error),
        **context,
    )
