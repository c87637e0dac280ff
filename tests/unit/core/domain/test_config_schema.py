"""Unit tests for CallLogConfig validation."""

import pytest
from pydantic import ValidationError

from calllog.core.domain.config_schema import BackendType, CallLogConfig
from calllog.core.domain.enums import LogLevel


def test_defaults():
    config = CallLogConfig()
    assert config.backend is BackendType.STDLIB
    assert config.default_level is LogLevel.DEBUG
    assert config.min_level is LogLevel.DEBUG
    assert config.placeholder == "<unprintable>"


def test_backend_name_is_case_insensitive():
    assert CallLogConfig(backend="StructLog").backend is BackendType.STRUCTLOG


def test_levels_accept_names_and_numbers():
    config = CallLogConfig(default_level="warning", min_level=20)
    assert config.default_level is LogLevel.WARN
    assert config.min_level is LogLevel.INFO


def test_unknown_level_is_rejected():
    with pytest.raises(ValidationError):
        CallLogConfig(default_level="VERBOSE")


def test_unknown_backend_is_rejected():
    with pytest.raises(ValidationError):
        CallLogConfig(backend="log4j")


def test_extra_keys_are_rejected():
    with pytest.raises(ValidationError):
        CallLogConfig(appenders=["console"])


def test_empty_placeholder_is_rejected():
    with pytest.raises(ValidationError):
        CallLogConfig(placeholder="")
