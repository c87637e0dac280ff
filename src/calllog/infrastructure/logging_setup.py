"""Process-wide logging setup for ``logging`` and structlog."""

from __future__ import annotations

import logging
import os

import structlog

from calllog.core.domain.enums import TRACE

log_level_map = {
    "TRACE": TRACE,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "FATAL": logging.CRITICAL,
    "CRITICAL": logging.CRITICAL,
}


def resolve_log_level(name: str | None = None) -> int:
    """Map a level name (default: ``LOGLEVEL`` env var) to a number."""
    loglevel = (name or os.getenv("LOGLEVEL", "INFO")).strip().upper()
    return log_level_map.get(loglevel, logging.INFO)


_STRUCTLOG_LEVELS = (
    logging.NOTSET,
    logging.DEBUG,
    logging.INFO,
    logging.WARNING,
    logging.ERROR,
    logging.CRITICAL,
)


def structlog_filter_level(level: int) -> int:
    """Highest level structlog knows by name that does not exceed ``level``."""
    return max(known for known in _STRUCTLOG_LEVELS if known <= max(level, logging.NOTSET))


def configure_logging(level: int | str | None = None) -> int:
    """Configure ``logging`` and structlog with the same level.

    Returns:
        The numeric level that was applied.
    """
    log_level = level if isinstance(level, int) else resolve_log_level(level)

    logging.basicConfig(level=log_level, format="%(message)s")
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(structlog_filter_level(log_level)),
    )
    return log_level
