"""Transport port describing the syslog connection contract.

Purpose
-------
Define the only boundary the adapter talks to: open a session with an
identifier, options, and facility, then log already-prepared chunks on it.

Contents
--------
* :class:`SessionPort` - a live session accepting chunks and a priority mask.
* :class:`TransportPort` - factory opening one session per emitted call.

System Role
-----------
Lets :class:`~lib_syslogger.Syslogger` depend on a narrow protocol so the real
``syslog`` module, the Rich console, and test doubles are interchangeable.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol, runtime_checkable


@runtime_checkable
class SessionPort(Protocol):
    """Write prepared chunks to an open syslog session."""

    mask: int

    def log(self, priority: int, message: str) -> None:
        """Transmit ``message`` at ``priority``."""


@runtime_checkable
class TransportPort(Protocol):
    """Open syslog sessions.

    Examples
    --------
    >>> from contextlib import contextmanager
    >>> class Recorder:
    ...     def __init__(self):
    ...         self.lines = []
    ...         self.mask = 0
    ...     def log(self, priority, message):
    ...         self.lines.append((priority, message))
    ...     @contextmanager
    ...     def open(self, ident, options, facility):
    ...         yield self
    >>> isinstance(Recorder(), TransportPort)
    True
    """

    def open(self, ident: str, options: int, facility: int | None) -> AbstractContextManager[SessionPort]:
        """Return a context manager yielding a session for one leveled call."""


__all__ = ["SessionPort", "TransportPort"]
