"""Decorators that route calls through a ``CallInterceptor``.

The interceptor is passed in explicitly, so wrapping happens when the
decorated function is defined and no registry is looked up globally.

Usage:
    interceptor = build_interceptor()

    class Foo:
        @logged_void(interceptor, LogLevel.INFO)
        def bar(self, text: str, count: int) -> None:
            ...

        @logged(interceptor, "DEBUG")
        def compute(self, value: int) -> int:
            return value * value

Applied to an instance method, the logger is the one of the instance's
runtime type and ``self`` is left out of the logged arguments. Applied
to a free function, the logger is the one of the defining module.
"""

from __future__ import annotations

import functools
import inspect
import sys
import types
from typing import Any, Awaitable, Callable, Mapping

import structlog

from calllog.application.interceptor import CallInterceptor
from calllog.core.domain.enums import LogLevel
from calllog.core.domain.errors import ConfigError
from calllog.core.domain.models import CallContext, LoggingDirective

logger = structlog.get_logger(__name__)

LevelToken = LogLevel | str | int


class LoggedFunction:
    """A callable wrapped with entry and exit logging.

    Also a descriptor: looked up through an instance it returns a bound
    function whose calls are logged against the instance's type.
    """

    def __init__(
        self,
        func: Callable[..., Any],
        interceptor: CallInterceptor,
        directive: LoggingDirective,
    ) -> None:
        functools.update_wrapper(self, func)
        self.func = func
        self.interceptor = interceptor
        self.directive = directive
        self.method_name = getattr(func, "__name__", type(func).__name__)
        self.is_coroutine = inspect.iscoroutinefunction(func)
        module_name = getattr(func, "__module__", None)
        self.module_owner = sys.modules.get(module_name, module_name) if module_name else None
        self.defining_class: type | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.defining_class = owner

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if args and self.defining_class is not None and isinstance(args[0], self.defining_class):
            # Called through the class, e.g. Foo.bar(foo, 1).
            instance, *rest = args
            target = types.MethodType(self.func, instance)
            return self._invoke(type(instance), target, tuple(rest), kwargs)
        return self._invoke(self.module_owner, self.func, args, kwargs)

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        target = types.MethodType(self.func, instance)
        runtime_type = type(instance)

        @functools.wraps(self.func)
        def bound(*args: Any, **kwargs: Any) -> Any:
            return self._invoke(runtime_type, target, args, kwargs)

        return bound

    def _invoke(
        self,
        owner: Any,
        target: Callable[..., Any],
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        context = CallContext(owner, self.method_name, args, kwargs)
        if self.is_coroutine:
            return self._invoke_async(context, target, args, kwargs)

        self.interceptor.before_call(context, self.directive)
        try:
            result = target(*args, **kwargs)
        except BaseException as e:
            self.interceptor.after_raise(context, self.directive, e)
            raise
        self.interceptor.after_return(context, self.directive, result)
        return result

    async def _invoke_async(
        self,
        context: CallContext,
        target: Callable[..., Awaitable[Any]],
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        self.interceptor.before_call(context, self.directive)
        try:
            result = await target(*args, **kwargs)
        except BaseException as e:
            self.interceptor.after_raise(context, self.directive, e)
            raise
        self.interceptor.after_return(context, self.directive, result)
        return result

    def __repr__(self) -> str:
        return f"<LoggedFunction {self.method_name} level={self.directive.level.value}>"


def _as_directive(value: LoggingDirective | LevelToken) -> LoggingDirective:
    if isinstance(value, LoggingDirective):
        return value
    return LoggingDirective(level=LogLevel.parse(value))


def _reject_descriptor(func: Any) -> None:
    if isinstance(func, (staticmethod, classmethod)):
        where = getattr(func.__func__, "__qualname__", repr(func))
        raise ConfigError(
            f"{where} is a {type(func).__name__}, not an instance method or function",
            details={"method": where, "kind": type(func).__name__},
        )


def logged(
    interceptor: CallInterceptor,
    level: LevelToken | None = None,
    *,
    returns_value: bool = True,
) -> Callable[[Callable[..., Any]], LoggedFunction]:
    """Decorator logging entry and exit of a value-returning callable.

    Args:
        interceptor: Interceptor whose hooks run around every call.
        level: Severity token (member, name or numeric level). Defaults to
            ``interceptor.default_level``.
        returns_value: Pass False for callables without a return value.

    Raises:
        ConfigError: When applied on top of ``staticmethod``/``classmethod``.
    """
    directive = LoggingDirective(
        level=LogLevel.parse(interceptor.default_level if level is None else level),
        returns_value=returns_value,
    )

    def decorator(func: Callable[..., Any]) -> LoggedFunction:
        _reject_descriptor(func)
        return LoggedFunction(func, interceptor, directive)

    return decorator


def logged_void(
    interceptor: CallInterceptor, level: LevelToken | None = None
) -> Callable[[Callable[..., Any]], LoggedFunction]:
    """Decorator for callables without a return value: exit shows ``[void]``."""
    return logged(interceptor, level, returns_value=False)


def instrument(
    cls: type,
    interceptor: CallInterceptor,
    directives: Mapping[str, LoggingDirective | LevelToken],
) -> type:
    """Wrap the named methods of an existing class in place.

    Args:
        cls: Class whose methods are wrapped.
        interceptor: Interceptor whose hooks run around every call.
        directives: Method name -> directive, or a bare level token for a
            value-returning method.

    Returns:
        The same class, for use as ``instrument(Foo, ...)`` at startup.

    Raises:
        ConfigError: If a method is missing, not callable, or a static or
            class method.
    """
    for name, value in directives.items():
        attr = inspect.getattr_static(cls, name, None)
        if attr is None:
            raise ConfigError(
                f"{cls.__qualname__} has no method {name!r}",
                details={"class": cls.__qualname__, "method": name},
            )
        if isinstance(attr, (staticmethod, classmethod)) or not callable(attr):
            raise ConfigError(
                f"{cls.__qualname__}.{name} is not an instance method",
                details={"class": cls.__qualname__, "method": name},
            )
        if isinstance(attr, LoggedFunction):
            attr = attr.func
        wrapped = LoggedFunction(attr, interceptor, _as_directive(value))
        wrapped.__set_name__(cls, name)
        setattr(cls, name, wrapped)

    logger.debug(
        "calllog.instrumented",
        cls=f"{cls.__module__}.{cls.__qualname__}",
        methods=sorted(directives),
    )
    return cls
