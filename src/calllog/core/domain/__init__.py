"""
Domain Models and Business Logic

This package contains the core domain of the call logging interceptor:
- Severity levels and their conversion to backend levels
- Logging directives and per-call contexts
- Argument and value rendering
- Configuration schema and error types
"""

from calllog.core.domain.enums import LogLevel
from calllog.core.domain.errors import CallLogError, ConfigError
from calllog.core.domain.models import CallContext, LoggingDirective

__all__ = [
    "CallContext",
    "CallLogError",
    "ConfigError",
    "LogLevel",
    "LoggingDirective",
]
