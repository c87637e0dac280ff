"""Application Layer - Interceptor Factory.

Builds the logging backend, the logger registry and the call interceptor
from configuration. Call once at startup and share the returned
interceptor by reference.
"""

from __future__ import annotations

import structlog

from calllog.application.interceptor import CallInterceptor
from calllog.application.registry import LoggerRegistry
from calllog.core.domain.config_schema import BackendType, CallLogConfig
from calllog.core.domain.errors import ConfigError
from calllog.core.interfaces.logging import LoggerBackendProtocol
from calllog.infrastructure.backends import StdlibBackend, StructlogBackend
from calllog.infrastructure.config_loader import load_config_from_env

logger = structlog.get_logger(__name__)


def create_backend(config: CallLogConfig) -> LoggerBackendProtocol:
    """Instantiate the backend named by the configuration."""
    if config.backend == BackendType.STDLIB:
        return StdlibBackend()
    if config.backend == BackendType.STRUCTLOG:
        return StructlogBackend(min_level=config.min_level)
    raise ConfigError(
        f"Unsupported backend: {config.backend}",
        details={"backend": str(config.backend)},
    )


def build_interceptor(
    config: CallLogConfig | None = None,
    backend: LoggerBackendProtocol | None = None,
) -> CallInterceptor:
    """Create a registry and interceptor.

    Args:
        config: Settings; read from ``CALLLOG_*`` environment variables
            when omitted.
        backend: Explicit backend, overriding ``config.backend``.
    """
    config = config or load_config_from_env()
    backend = backend or create_backend(config)
    registry = LoggerRegistry(backend)

    logger.debug(
        "calllog.interceptor_built",
        backend=type(backend).__name__,
        default_level=config.default_level.value,
    )
    return CallInterceptor(
        registry,
        placeholder=config.placeholder,
        default_level=config.default_level,
    )
