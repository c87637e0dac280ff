"""
Infrastructure Layer - Logging Backends

This module provides:
- A backend over the standard ``logging`` module (default)
- A structlog backend with an explicit threshold

Both satisfy ``LoggerBackendProtocol``.
"""

from calllog.infrastructure.backends.stdlib_backend import StdlibBackend, StdlibLoggerHandle
from calllog.infrastructure.backends.structlog_backend import (
    StructlogBackend,
    StructlogLoggerHandle,
)

__all__ = [
    "StdlibBackend",
    "StdlibLoggerHandle",
    "StructlogBackend",
    "StructlogLoggerHandle",
]
