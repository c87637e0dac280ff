"""Logger handles backed by the standard ``logging`` module."""

from __future__ import annotations

import logging

from calllog.core.domain.enums import TRACE


class StdlibLoggerHandle:
    """Adapts a ``logging.Logger`` to ``LoggerHandleProtocol``."""

    def __init__(self, logger: logging.Logger) -> None:
        self.logger = logger

    @property
    def name(self) -> str:
        return self.logger.name

    def is_enabled_for(self, level: int) -> bool:
        return self.logger.isEnabledFor(level)

    def log(self, level: int, message: str) -> None:
        self.logger.log(level, message)


class StdlibBackend:
    """Creates handles through ``logging.getLogger``.

    Thresholds, handlers and formatting stay with the ``logging``
    configuration of the host process.
    """

    def __init__(self) -> None:
        if logging.getLevelName(TRACE) != "TRACE":
            logging.addLevelName(TRACE, "TRACE")

    def get_logger(self, name: str) -> StdlibLoggerHandle:
        return StdlibLoggerHandle(logging.getLogger(name))
