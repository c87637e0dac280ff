"""
Call interceptor.

Emits an "Entering method" record before a wrapped call runs and an
"Exiting method" record after it returns or raises. The hooks are pure
observers: whatever goes wrong while formatting or emitting a record is
reported on the library's own structlog logger and never reaches the
caller of the wrapped function.
"""

from __future__ import annotations

import contextlib
from typing import Any, Callable

import structlog

from calllog.application.registry import LoggerRegistry, owner_name
from calllog.core.domain.enums import LogLevel
from calllog.core.domain.formatting import DEFAULT_PLACEHOLDER, format_args, render_value
from calllog.core.domain.models import CallContext, LoggingDirective

logger = structlog.get_logger(__name__)

VOID = "void"


def entry_message(method_name: str, detail: str) -> str:
    return f"Entering method {method_name}[{detail}]"


def exit_message(method_name: str, detail: str) -> str:
    return f"Exiting method {method_name}[{detail}]"


class CallInterceptor:
    """Entry and exit hooks around wrapped calls.

    The interceptor keeps no per-call state; the only shared state is the
    registry it holds, so one instance can serve any number of threads.

    Args:
        registry: Source of per-owner logger handles.
        placeholder: Text substituted for values that cannot be rendered.
        default_level: Level used by ``logged``/``logged_void`` when the
            decorator names none.
    """

    def __init__(
        self,
        registry: LoggerRegistry,
        *,
        placeholder: str = DEFAULT_PLACEHOLDER,
        default_level: LogLevel | str | int = LogLevel.DEBUG,
    ) -> None:
        self.registry = registry
        self.placeholder = placeholder
        self.default_level = LogLevel.parse(default_level)

    def before_call(self, context: CallContext, directive: LoggingDirective) -> None:
        """Log ``Entering method <name>[<args>]``."""
        self._emit(
            "before_call",
            context,
            directive,
            lambda: entry_message(
                context.method_name,
                format_args(context.args, context.kwargs, placeholder=self.placeholder),
            ),
        )

    def after_return(
        self, context: CallContext, directive: LoggingDirective, result: Any
    ) -> None:
        """Log ``Exiting method <name>[<result>]``, or ``[void]`` for
        callables declared without a return value."""

        def render() -> str:
            if not directive.returns_value:
                return exit_message(context.method_name, VOID)
            # A single result, rendered directly rather than as an argument list.
            return exit_message(context.method_name, render_value(result, self.placeholder))

        self._emit("after_return", context, directive, render)

    def after_raise(
        self, context: CallContext, directive: LoggingDirective, error: BaseException
    ) -> None:
        """Log ``Exiting method <name>[<cause>]``.

        The cause is ``error.__cause__``; an error raised without an
        explicit cause is rendered itself. The error is not touched, the
        wrapper re-raises it after this hook returns.
        """
        self._emit(
            "after_raise",
            context,
            directive,
            lambda: exit_message(
                context.method_name, render_value(failure_cause(error), self.placeholder)
            ),
        )

    def _emit(
        self,
        hook: str,
        context: CallContext,
        directive: LoggingDirective,
        render: Callable[[], str],
    ) -> None:
        try:
            level = directive.logging_level
            handle = self.registry.get_logger(context.owner)
            if not handle.is_enabled_for(level):
                return
            handle.log(level, render())
        except Exception as e:
            _report_hook_failure(hook, context, e)


def failure_cause(error: BaseException) -> BaseException:
    """The error's explicit cause, or the error itself when it has none."""
    cause = error.__cause__
    return error if cause is None else cause


def _report_hook_failure(hook: str, context: CallContext, error: Exception) -> None:
    with contextlib.suppress(Exception):
        logger.warning(
            "calllog.hook_failed",
            hook=hook,
            method=context.method_name,
            owner=owner_name(context.owner),
            error=render_value(error),
        )
