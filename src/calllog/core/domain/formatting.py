"""
Argument and value rendering for call log messages.

Values are shown with their default textual form (``str``), so ``None``
renders as ``None`` and ``"hello"`` renders without quotes. Exceptions
render the way the last line of a traceback shows them, for example
``ValueError: bad state``. Rendering never raises: a value whose
conversion fails is replaced by a placeholder.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

DEFAULT_PLACEHOLDER = "<unprintable>"
ARGUMENT_SEPARATOR = ", "


def render_value(value: Any, placeholder: str = DEFAULT_PLACEHOLDER) -> str:
    """Render a single value with its default textual form."""
    try:
        if isinstance(value, BaseException):
            return render_exception(value)
        return str(value)
    except Exception:
        return placeholder


def render_exception(error: BaseException) -> str:
    """Render an exception as ``QualifiedType: message``."""
    error_type = type(error)
    name = error_type.__qualname__
    if error_type.__module__ not in ("builtins", "__main__"):
        name = f"{error_type.__module__}.{name}"
    text = str(error)
    return f"{name}: {text}" if text else name


def format_args(
    args: Iterable[Any],
    kwargs: Mapping[str, Any] | None = None,
    *,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> str:
    """Join positional then keyword arguments with ``", "``.

    Brackets are left to the caller. Keyword arguments are shown as
    ``name=value`` after the positional ones. No arguments give ``""``.
    """
    parts = [render_value(value, placeholder) for value in args]
    if kwargs:
        parts.extend(
            f"{name}={render_value(value, placeholder)}" for name, value in kwargs.items()
        )
    return ARGUMENT_SEPARATOR.join(parts)
