from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from lib_syslogger import ConsoleTransport, SyslogTransport
from lib_syslogger.application.ports import SessionPort, TransportPort
from lib_syslogger.adapters.console_transport import ConsoleSession
from tests.conftest import RecordedSession, RecordingTransport


class _FakeSession(SessionPort):
    def __init__(self) -> None:
        self.mask = 0
        self.lines: list[tuple[int, str]] = []

    def log(self, priority: int, message: str) -> None:
        self.lines.append((priority, message))


class _FakeTransport(TransportPort):
    def __init__(self) -> None:
        self.session = _FakeSession()

    @contextmanager
    def open(self, ident: str, options: int, facility: int | None) -> Iterator[_FakeSession]:
        yield self.session


def test_fakes_satisfy_protocols() -> None:
    transport = _FakeTransport()

    assert isinstance(transport, TransportPort)
    assert isinstance(transport.session, SessionPort)
    with transport.open("app", 0, None) as session:
        session.log(5, "hello")
    assert transport.session.lines == [(5, "hello")]


def test_shipped_transports_satisfy_transport_port() -> None:
    assert isinstance(SyslogTransport(), TransportPort)
    assert isinstance(ConsoleTransport(), TransportPort)
    assert isinstance(RecordingTransport(), TransportPort)


def test_test_double_session_satisfies_session_port() -> None:
    assert isinstance(RecordedSession("app", 0, None), SessionPort)


def test_console_session_satisfies_session_port() -> None:
    with ConsoleTransport().open("app", 0, None) as session:
        assert isinstance(session, ConsoleSession)
        assert isinstance(session, SessionPort)


def test_objects_without_open_are_not_transports() -> None:
    class NotATransport:
        def log(self, priority: int, message: str) -> None:
            pass

    assert not isinstance(NotATransport(), TransportPort)
