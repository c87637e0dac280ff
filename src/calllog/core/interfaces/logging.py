"""
Logging Protocol Interfaces for Core Domain.

Defines the handle and backend contracts the interceptor writes through,
keeping the core independent of a specific logging implementation
(e.g., ``logging`` or structlog).
"""

from typing import Protocol


class LoggerHandleProtocol(Protocol):
    """Per-owner logger handle."""

    def is_enabled_for(self, level: int) -> bool:
        """Whether a record at ``level`` would be emitted."""
        ...

    def log(self, level: int, message: str) -> None:
        """Emit a preformatted message at ``level``."""
        ...


class LoggerBackendProtocol(Protocol):
    """Source of logger handles, keyed by name."""

    def get_logger(self, name: str) -> LoggerHandleProtocol:
        """Return a handle for the given logger name."""
        ...
