"""
Logger handles backed by structlog.

Handles keep structlog's lazy proxy, so a later ``structlog.configure``
still applies to them. A record is admitted when it passes both the
backend's own ``min_level`` and the threshold structlog is configured
with. Records below DEBUG are emitted at DEBUG, the lowest level
structlog knows by name.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog

from calllog.core.domain.enums import LogLevel


def _emit_level(level: int) -> int:
    return max(level, logging.DEBUG)


class StructlogLoggerHandle:
    """Adapts a structlog logger to ``LoggerHandleProtocol``."""

    def __init__(self, name: str, logger: Any, min_level: int) -> None:
        self.name = name
        self.logger = logger
        self.min_level = min_level

    def is_enabled_for(self, level: int) -> bool:
        if level < self.min_level:
            return False
        # Filtering bound loggers answer is_enabled_for, stdlib-backed ones isEnabledFor.
        check = getattr(self.logger, "is_enabled_for", None) or getattr(
            self.logger, "isEnabledFor", None
        )
        if check is None:
            return True
        return bool(check(_emit_level(level)))

    def log(self, level: int, message: str) -> None:
        self.logger.log(_emit_level(level), message)


class StructlogBackend:
    """Creates handles through ``structlog.get_logger``.

    Args:
        min_level: Lowest level admitted by the handles.
    """

    def __init__(self, min_level: LogLevel | str | int = LogLevel.DEBUG) -> None:
        self.min_level = LogLevel.parse(min_level).to_logging_level()

    def get_logger(self, name: str) -> StructlogLoggerHandle:
        logger = structlog.get_logger(name, owner=name)
        return StructlogLoggerHandle(name, logger, self.min_level)
