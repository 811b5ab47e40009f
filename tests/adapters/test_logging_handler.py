from __future__ import annotations

import logging
from typing import Callable, Iterator

import pytest

from lib_syslogger import SeverityLevel, Syslogger, SysloggerHandler, SyslogPriority
from lib_syslogger.adapters.logging_handler import severity_for_record_level
from tests.conftest import RecordingTransport
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


@pytest.mark.parametrize(
    "levelno, expected",
    [
        (logging.NOTSET, SeverityLevel.DEBUG),
        (logging.DEBUG, SeverityLevel.DEBUG),
        (15, SeverityLevel.DEBUG),
        (logging.INFO, SeverityLevel.INFO),
        (logging.WARNING, SeverityLevel.WARN),
        (logging.ERROR, SeverityLevel.ERROR),
        (45, SeverityLevel.ERROR),
        (logging.CRITICAL, SeverityLevel.FATAL),
        (logging.CRITICAL + 1, SeverityLevel.UNKNOWN),
    ],
)
def test_record_levels_round_down(levelno: int, expected: SeverityLevel) -> None:
    assert severity_for_record_level(levelno) is expected


@pytest.fixture
def bridged(logger_factory: Callable[..., Syslogger]) -> Iterator[tuple[logging.Logger, Syslogger, SysloggerHandler]]:
    syslogger = logger_factory("bridge", level=SeverityLevel.DEBUG)
    handler = SysloggerHandler(syslogger)
    std_logger = logging.getLogger("tests.bridge")
    std_logger.setLevel(logging.DEBUG)
    std_logger.propagate = False
    std_logger.addHandler(handler)
    try:
        yield std_logger, syslogger, handler
    finally:
        std_logger.removeHandler(handler)
        std_logger.propagate = True


def test_records_are_forwarded_with_mapped_priority(bridged: tuple[logging.Logger, Syslogger, SysloggerHandler], transport: RecordingTransport) -> None:
    std_logger, _, _ = bridged

    std_logger.warning("disk at %d%%", 95)
    std_logger.critical("down")

    assert transport.lines == [(SyslogPriority.WARNING, "disk at 95%%"), (SyslogPriority.CRIT, "down")]
    assert [ident for ident, _, _ in transport.opens] == ["bridge", "bridge"]


def test_logger_name_can_become_progname(bridged: tuple[logging.Logger, Syslogger, SysloggerHandler], transport: RecordingTransport) -> None:
    std_logger, _, handler = bridged
    handler.use_logger_name = True

    std_logger.info("hello")

    assert transport.opens[0][0] == "tests.bridge"


def test_handler_formatter_is_applied(bridged: tuple[logging.Logger, Syslogger, SysloggerHandler], transport: RecordingTransport) -> None:
    std_logger, _, handler = bridged
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    std_logger.error("failed")

    assert transport.lines == [(SyslogPriority.ERR, "tests.bridge: failed")]


def test_syslogger_threshold_still_applies(bridged: tuple[logging.Logger, Syslogger, SysloggerHandler], transport: RecordingTransport) -> None:
    std_logger, syslogger, _ = bridged
    syslogger.level = SeverityLevel.ERROR

    std_logger.info("filtered by the adapter")

    assert transport.sessions == []


def test_transport_failures_go_through_handle_error(
    logger_factory: Callable[..., Syslogger],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    class BrokenTransport:
        def open(self, ident: str, options: int, facility: int | None):
            raise OSError("no daemon")

    handler = SysloggerHandler(logger_factory("bridge", transport=BrokenTransport()))
    seen: list[logging.LogRecord] = []
    monkeypatch.setattr(handler, "handleError", seen.append)

    record = logging.LogRecord("tests", logging.ERROR, __file__, 1, "boom", None, None)
    handler.handle(record)

    assert [item.getMessage() for item in seen] == ["boom"]


def test_root_handler_does_not_feed_own_diagnostics_back(logger_factory: Callable[..., Syslogger], transport: RecordingTransport) -> None:
    syslogger = logger_factory("app", level=SeverityLevel.DEBUG, max_octets=40)
    handler = SysloggerHandler(syslogger)
    root = logging.getLogger()
    previous_level = root.level
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)
    try:
        logging.getLogger("app").info("x" * 100)
    finally:
        root.removeHandler(handler)
        root.setLevel(previous_level)

    assert transport.lines == [(SyslogPriority.NOTICE, "x" * 40), (SyslogPriority.NOTICE, "x" * 40), (SyslogPriority.NOTICE, "x" * 20)]


def test_package_records_are_skipped(bridged: tuple[logging.Logger, Syslogger, SysloggerHandler], transport: RecordingTransport) -> None:
    _, _, handler = bridged

    handler.handle(logging.LogRecord("lib_syslogger.syslogger", logging.DEBUG, __file__, 1, "split", None, None))
    handler.handle(logging.LogRecord("lib_syslogger_extras", logging.INFO, __file__, 1, "kept", None, None))

    assert transport.lines == [(SyslogPriority.NOTICE, "kept")]
