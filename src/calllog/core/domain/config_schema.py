"""
Configuration Schema Validation

Pydantic model for the interceptor settings. Values usually come from
environment variables or a YAML file, see
``calllog.infrastructure.config_loader``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from calllog.core.domain.enums import LogLevel
from calllog.core.domain.formatting import DEFAULT_PLACEHOLDER


class BackendType(str, Enum):
    """Available logging backends."""

    STDLIB = "stdlib"
    STRUCTLOG = "structlog"


class CallLogConfig(BaseModel):
    """Settings for building a call interceptor."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    backend: BackendType = Field(
        BackendType.STDLIB,
        description="Logging backend the handles are obtained from",
    )
    default_level: LogLevel = Field(
        LogLevel.DEBUG,
        description="Level used when a directive does not name one",
    )
    placeholder: str = Field(
        DEFAULT_PLACEHOLDER,
        min_length=1,
        description="Text shown for values whose conversion fails",
    )
    min_level: LogLevel = Field(
        LogLevel.DEBUG,
        description="Threshold applied by the structlog backend",
    )

    @field_validator("backend", mode="before")
    @classmethod
    def normalize_backend(cls, value: Any) -> Any:
        """Accept backend names in any case."""
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("default_level", "min_level", mode="before")
    @classmethod
    def validate_level(cls, value: Any) -> LogLevel:
        """Resolve level names strictly; unknown names are an error here."""
        if isinstance(value, LogLevel):
            return value
        if isinstance(value, str):
            name = value.strip().upper()
            if name in {"TRACE", "DEBUG", "INFO", "WARN", "WARNING", "ERROR", "FATAL", "CRITICAL"}:
                return LogLevel.parse(name)
        if isinstance(value, int) and not isinstance(value, bool):
            return LogLevel.parse(value)
        raise ValueError(f"Unknown log level: {value!r}")
