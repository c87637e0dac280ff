"""
Core Protocol Interfaces

Contracts for the logging backend the interceptor delegates to. The
application layer depends on these protocols only, so any backend
(``logging``, structlog or a test double) can be injected.

Usage:
    from calllog.core.interfaces import LoggerBackendProtocol

    def build(backend: LoggerBackendProtocol) -> LoggerRegistry:
        return LoggerRegistry(backend)
"""

from calllog.core.interfaces.logging import LoggerBackendProtocol, LoggerHandleProtocol

__all__ = [
    "LoggerBackendProtocol",
    "LoggerHandleProtocol",
]
