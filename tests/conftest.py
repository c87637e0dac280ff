"""Test configuration and shared fixtures."""

from __future__ import annotations

import logging

import pytest
import structlog

from calllog.application.interceptor import CallInterceptor
from calllog.application.registry import LoggerRegistry


class RecordingHandle:
    """Logger handle that records emitted messages."""

    def __init__(self, name: str, threshold: int = logging.DEBUG) -> None:
        self.name = name
        self.threshold = threshold
        self.records: list[tuple[int, str]] = []
        self.enabled_checks = 0

    def is_enabled_for(self, level: int) -> bool:
        self.enabled_checks += 1
        return level >= self.threshold

    def log(self, level: int, message: str) -> None:
        self.records.append((level, message))

    @property
    def messages(self) -> list[str]:
        return [message for _, message in self.records]


class RecordingBackend:
    """Backend handing out RecordingHandle instances."""

    def __init__(self, threshold: int = logging.DEBUG) -> None:
        self.threshold = threshold
        self.created: list[RecordingHandle] = []

    def get_logger(self, name: str) -> RecordingHandle:
        handle = RecordingHandle(name, self.threshold)
        self.created.append(handle)
        return handle

    def handle_for(self, name: str) -> RecordingHandle:
        return next(handle for handle in self.created if handle.name == name)


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def registry(backend: RecordingBackend) -> LoggerRegistry:
    return LoggerRegistry(backend)


@pytest.fixture
def interceptor(registry: LoggerRegistry) -> CallInterceptor:
    return CallInterceptor(registry)
