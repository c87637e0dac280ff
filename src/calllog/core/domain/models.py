"""
Core Domain Models

A logging directive is fixed when a callable is wrapped; a call context
is created for every intercepted invocation and dropped after its exit
hook has run.
"""

from dataclasses import dataclass, field
from typing import Any

from calllog.core.domain.enums import LogLevel


@dataclass(frozen=True)
class LoggingDirective:
    """Declarative request to log a callable's entry and exit.

    Attributes:
        level: Severity of both the entry and the exit record.
        returns_value: False for callables without a return value; their
            exit record shows ``void`` instead of the result.
    """

    level: LogLevel = LogLevel.DEBUG
    returns_value: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "level", LogLevel.parse(self.level))

    @property
    def logging_level(self) -> int:
        """Numeric level handed to the backend."""
        return self.level.to_logging_level()


@dataclass(frozen=True)
class CallContext:
    """Everything the hooks know about one intercepted invocation.

    Attributes:
        owner: Runtime type of the target instance, or the defining module
            for free functions. Used as the logger cache key.
        method_name: Declared name of the called function.
        args: Positional argument values in call order, target excluded.
        kwargs: Keyword argument values in call order.
    """

    owner: Any
    method_name: str
    args: tuple[Any, ...] = ()
    kwargs: dict[str, Any] = field(default_factory=dict)
