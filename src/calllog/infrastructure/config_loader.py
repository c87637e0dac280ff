"""
Configuration loading for the call interceptor.

Settings come either from ``CALLLOG_*`` environment variables or from a
YAML file whose settings live at the top level or under a ``calllog:``
key. Validation errors surface as ``ConfigError``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

import structlog
import yaml
from pydantic import ValidationError

from calllog.core.domain.config_schema import CallLogConfig
from calllog.core.domain.errors import ConfigError

logger = structlog.get_logger(__name__)

ENV_PREFIX = "CALLLOG_"
ENV_FIELDS = ("backend", "default_level", "placeholder", "min_level")


def _build_config(data: Mapping[str, Any], source: str) -> CallLogConfig:
    try:
        return CallLogConfig(**data)
    except ValidationError as e:
        raise ConfigError(
            f"Invalid calllog configuration in {source}",
            details={"errors": e.errors(include_url=False)},
        ) from e


def load_config_from_env(environ: Mapping[str, str] | None = None) -> CallLogConfig:
    """Build settings from ``CALLLOG_BACKEND``, ``CALLLOG_DEFAULT_LEVEL``,
    ``CALLLOG_PLACEHOLDER`` and ``CALLLOG_MIN_LEVEL``.

    Unset variables keep their defaults.
    """
    env = os.environ if environ is None else environ
    data = {
        name: env[f"{ENV_PREFIX}{name.upper()}"]
        for name in ENV_FIELDS
        if env.get(f"{ENV_PREFIX}{name.upper()}")
    }
    return _build_config(data, "environment")


def load_config(path: str | Path) -> CallLogConfig:
    """Load settings from a YAML file.

    Raises:
        ConfigError: If the file is missing, unreadable or invalid.
    """
    config_file = Path(path)
    if not config_file.is_file():
        raise ConfigError(
            f"Config file not found: {config_file}",
            details={"path": str(config_file)},
        )

    try:
        raw = yaml.safe_load(config_file.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Invalid YAML in {config_file}: {e}",
            details={"path": str(config_file)},
        ) from e

    raw = raw or {}
    if not isinstance(raw, dict):
        raise ConfigError(
            f"Expected a mapping in {config_file}",
            details={"path": str(config_file)},
        )
    section = raw.get("calllog", raw)
    if not isinstance(section, dict):
        raise ConfigError(
            f"Expected a mapping under 'calllog' in {config_file}",
            details={"path": str(config_file)},
        )

    config = _build_config(section, str(config_file))
    logger.debug("calllog.config_loaded", path=str(config_file), backend=config.backend.value)
    return config
