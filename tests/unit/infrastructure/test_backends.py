"""Unit tests for the stdlib and structlog backends."""

import logging

import structlog
from structlog.testing import capture_logs

from calllog.application.decorators import logged
from calllog.application.factory import build_interceptor
from calllog.core.domain.config_schema import CallLogConfig
from calllog.core.domain.enums import TRACE, LogLevel
from calllog.core.interfaces.logging import LoggerBackendProtocol, LoggerHandleProtocol
from calllog.infrastructure.backends import StdlibBackend, StructlogBackend
from calllog.infrastructure.logging_setup import configure_logging


class TestStdlibBackend:
    def test_handle_wraps_named_logger(self):
        handle = StdlibBackend().get_logger("calllog.tests.stdlib")

        assert handle.logger is logging.getLogger("calllog.tests.stdlib")
        assert handle.name == "calllog.tests.stdlib"

    def test_conforms_to_protocols(self):
        backend: LoggerBackendProtocol = StdlibBackend()
        handle: LoggerHandleProtocol = backend.get_logger("calllog.tests.protocol")

        assert callable(handle.is_enabled_for)
        assert callable(handle.log)

    def test_threshold_follows_logger_level(self):
        handle = StdlibBackend().get_logger("calllog.tests.threshold")
        handle.logger.setLevel(logging.WARNING)

        assert handle.is_enabled_for(logging.ERROR)
        assert not handle.is_enabled_for(logging.INFO)

    def test_log_reaches_caplog(self, caplog):
        handle = StdlibBackend().get_logger("calllog.tests.emit")
        caplog.set_level(logging.DEBUG, logger="calllog.tests.emit")

        handle.log(logging.INFO, "Entering method bar[100%]")

        assert [(r.name, r.levelno, r.getMessage()) for r in caplog.records] == [
            ("calllog.tests.emit", logging.INFO, "Entering method bar[100%]")
        ]

    def test_trace_level_is_named(self):
        StdlibBackend()
        assert logging.getLevelName(TRACE) == "TRACE"


class TestStructlogBackend:
    def test_threshold(self):
        handle = StructlogBackend(min_level=LogLevel.INFO).get_logger("svc.Foo")

        assert handle.is_enabled_for(logging.INFO)
        assert handle.is_enabled_for(logging.CRITICAL)
        assert not handle.is_enabled_for(logging.DEBUG)

    def test_log_is_captured(self):
        handle = StructlogBackend().get_logger("svc.Foo")

        with capture_logs() as logs:
            handle.log(logging.WARNING, "Exiting method bar[void]")

        assert logs == [
            {"event": "Exiting method bar[void]", "owner": "svc.Foo", "log_level": "warning"}
        ]

    def test_trace_is_emitted_at_debug(self):
        handle = StructlogBackend(min_level="TRACE").get_logger("svc.Foo")

        assert handle.is_enabled_for(TRACE)
        with capture_logs() as logs:
            handle.log(TRACE, "Entering method bar[]")

        assert logs[0]["log_level"] == "debug"

    def test_global_filtering_still_applies(self):
        structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.ERROR))
        handle = StructlogBackend().get_logger("svc.Foo")

        with capture_logs() as logs:
            handle.log(logging.INFO, "dropped")

        assert logs == []

    def test_threshold_follows_structlog_configuration(self):
        structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING))
        handle = StructlogBackend().get_logger("svc.Foo")

        assert not handle.is_enabled_for(logging.DEBUG)
        assert not handle.is_enabled_for(logging.INFO)
        assert handle.is_enabled_for(logging.WARNING)

    def test_later_configuration_applies_to_existing_handle(self):
        handle = StructlogBackend().get_logger("svc.Foo")
        assert handle.is_enabled_for(logging.INFO)

        structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.ERROR))

        assert not handle.is_enabled_for(logging.INFO)
        with capture_logs() as logs:
            handle.log(logging.ERROR, "kept")

        assert [entry["event"] for entry in logs] == ["kept"]

    def test_own_threshold_still_applies_under_permissive_configuration(self):
        structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG))
        handle = StructlogBackend(min_level="ERROR").get_logger("svc.Foo")

        assert not handle.is_enabled_for(logging.WARNING)


class TestStructlogInterception:
    def test_configured_threshold_skips_rendering(self):
        class Counting:
            renders = 0

            def __str__(self) -> str:
                Counting.renders += 1
                return "counting"

        configure_logging("WARNING")
        interceptor = build_interceptor(CallLogConfig(backend="structlog"))

        @logged(interceptor, LogLevel.DEBUG)
        def quiet(value):
            return value

        with capture_logs() as logs:
            result = quiet(Counting())

        assert isinstance(result, Counting)
        assert Counting.renders == 0
        assert logs == []

    def test_admitted_level_is_emitted(self):
        configure_logging("WARNING")
        interceptor = build_interceptor(CallLogConfig(backend="structlog"))

        @logged(interceptor, LogLevel.ERROR)
        def loud(value):
            return value * 2

        with capture_logs() as logs:
            loud(3)

        assert [entry["event"] for entry in logs] == [
            "Entering method loud[3]",
            "Exiting method loud[6]",
        ]
        assert {entry["log_level"] for entry in logs} == {"error"}
