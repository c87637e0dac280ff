"""Logger registry: one logger handle per owning type."""

from __future__ import annotations

import threading
import types
from typing import Any

import structlog

from calllog.core.interfaces.logging import LoggerBackendProtocol, LoggerHandleProtocol

logger = structlog.get_logger(__name__)


def owner_name(owner: Any) -> str:
    """Logger name for an owner: ``module.QualName`` for types, the module
    name for modules, ``str(owner)`` otherwise."""
    if isinstance(owner, type):
        return f"{owner.__module__}.{owner.__qualname__}"
    if isinstance(owner, types.ModuleType):
        return owner.__name__
    return str(owner)


class LoggerRegistry:
    """Caches one handle per owner, created lazily on first lookup.

    Entries are never evicted, so the cache grows with the number of
    distinct instrumented owners, not with call volume. Lookups of cached
    owners take no lock; inserts re-check under the lock so concurrent
    first lookups all receive the same handle.
    """

    def __init__(self, backend: LoggerBackendProtocol) -> None:
        self.backend = backend
        self._lock = threading.Lock()
        self._loggers: dict[Any, LoggerHandleProtocol] = {}

    def get_logger(self, owner: Any) -> LoggerHandleProtocol:
        """Return the handle for ``owner``, creating it on first use."""
        handle = self._loggers.get(owner)
        if handle is not None:
            return handle

        with self._lock:
            handle = self._loggers.get(owner)
            if handle is None:
                name = owner_name(owner)
                handle = self.backend.get_logger(name)
                self._loggers[owner] = handle
                logger.debug("calllog.logger_created", logger_name=name)
        return handle

    def __contains__(self, owner: Any) -> bool:
        return owner in self._loggers

    def __len__(self) -> int:
        return len(self._loggers)
