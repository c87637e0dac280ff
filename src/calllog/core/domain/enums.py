"""
Core Domain Enums

Severity tokens accepted by logging directives and their conversion
to the numeric levels understood by the logging backends.
"""

import logging
from enum import Enum

TRACE = 5


class LogLevel(str, Enum):
    """Severity selected by a logging directive."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    FATAL = "FATAL"

    def to_logging_level(self) -> int:
        """Return the numeric level used by ``logging`` and structlog."""
        return _NUMERIC_LEVELS[self]

    @classmethod
    def parse(cls, token: "LogLevel | str | int") -> "LogLevel":
        """Convert a symbolic token to a level by name.

        Accepts members, case-insensitive names (including the stdlib
        spellings WARNING and CRITICAL) and numeric levels. Anything
        unrecognised resolves to DEBUG.
        """
        if isinstance(token, cls):
            return token
        if isinstance(token, int) and not isinstance(token, bool):
            return _from_number(token)
        if isinstance(token, str):
            name = token.strip().upper()
            if name.isdigit():
                return _from_number(int(name))
            return _ALIASES.get(name, cls.DEBUG)
        return cls.DEBUG


_NUMERIC_LEVELS = {
    LogLevel.TRACE: TRACE,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.FATAL: logging.CRITICAL,
}

_ALIASES = {member.value: member for member in LogLevel}
_ALIASES.update({"WARNING": LogLevel.WARN, "CRITICAL": LogLevel.FATAL})


def _from_number(value: int) -> LogLevel:
    # Highest level whose number does not exceed the given value.
    for level in sorted(LogLevel, key=lambda lvl: _NUMERIC_LEVELS[lvl], reverse=True):
        if value >= _NUMERIC_LEVELS[level]:
            return level
    return LogLevel.TRACE
