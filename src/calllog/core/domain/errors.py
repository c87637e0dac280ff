"""Domain-specific exception types for calllog."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class CallLogError(Exception):
    """Base exception for calllog domain errors."""

    message: str
    code: str = "calllog_error"
    details: Dict[str, Any] | None = None

    def __post_init__(self) -> None:
        super().__init__(self.message)
        if self.details is None:
            self.details = {}


class ConfigError(CallLogError):
    """Error raised for configuration failures."""

    def __init__(self, message: str, *, details: Dict[str, Any] | None = None) -> None:
        super().__init__(message=message, code="config_error", details=details)
