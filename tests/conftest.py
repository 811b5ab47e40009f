from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Iterator

import pytest

from lib_syslogger import Facility, Option, Syslogger


@dataclass
class RecordedSession:
    """Session double capturing every chunk and mask assignment."""

    ident: str
    options: int
    facility: int | None
    lines: list[tuple[int, str]] = field(default_factory=list)
    masks: list[int] = field(default_factory=list)
    closed: bool = False

    @property
    def mask(self) -> int:
        return self.masks[-1] if self.masks else 0

    @mask.setter
    def mask(self, value: int) -> None:
        self.masks.append(value)

    def log(self, priority: int, message: str) -> None:
        self.lines.append((priority, message))


class RecordingTransport:
    """Transport double recording one session per ``open`` call."""

    def __init__(self) -> None:
        self.sessions: list[RecordedSession] = []

    @contextmanager
    def open(self, ident: str, options: int, facility: int | None) -> Iterator[RecordedSession]:
        session = RecordedSession(ident, options, facility)
        self.sessions.append(session)
        try:
            yield session
        finally:
            session.closed = True

    @property
    def opens(self) -> list[tuple[str, int, int | None]]:
        return [(session.ident, session.options, session.facility) for session in self.sessions]

    @property
    def lines(self) -> list[tuple[int, str]]:
        return [line for session in self.sessions for line in session.lines]


def message_only(label: str, timestamp: object, progname: str, message: str) -> str:
    return message


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def logger_factory(transport: RecordingTransport) -> Callable[..., Syslogger]:
    """Return a builder for loggers wired to the recording transport."""

    def _build(*args: object, **kwargs: object) -> Syslogger:
        kwargs.setdefault("transport", transport)
        kwargs.setdefault("formatter", message_only)
        return Syslogger(*args, **kwargs)  # type: ignore[arg-type]

    return _build


@pytest.fixture
def app_logger(logger_factory: Callable[..., Syslogger]) -> Syslogger:
    """``my_app`` logger on the user facility with the PID option."""

    return logger_factory("my_app", Option.PID, Facility.USER)
