"""Rich-powered console transport for dry runs and demos.

Purpose
-------
Show exactly what would reach syslog (identifier, facility, priority, and each
chunk) without touching the host's logging daemon.

Contents
--------
* :data:`_STYLE_MAP` - priority-to-style mapping.
* :class:`ConsoleSession` / :class:`ConsoleTransport`.

System Role
-----------
Used by ``lib_syslogger send --dry-run`` and handy in development shells.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Mapping

from rich.console import Console
from rich.markup import escape

from lib_syslogger.application.ports.transport import SessionPort, TransportPort
from lib_syslogger.domain.priorities import Facility, SyslogPriority, log_upto

_STYLE_MAP: Mapping[SyslogPriority, str] = {
    SyslogPriority.EMERG: "bold white on red",
    SyslogPriority.ALERT: "bold magenta",
    SyslogPriority.CRIT: "bold red",
    SyslogPriority.ERR: "red",
    SyslogPriority.WARNING: "yellow",
    SyslogPriority.NOTICE: "cyan",
    SyslogPriority.INFO: "white",
    SyslogPriority.DEBUG: "dim",
}

#: Default Rich styles keyed by :class:`SyslogPriority`.


def _facility_name(facility: int | None) -> str:
    if facility is None:
        return "default"
    try:
        return Facility(facility).name.lower()
    except ValueError:
        return str(facility)


class ConsoleSession(SessionPort):
    """Print chunks allowed by the current mask."""

    def __init__(self, console: Console, ident: str, facility: int | None, *, colorize: bool) -> None:
        self._console = console
        self._prefix = f"{ident}[{_facility_name(facility)}]"
        self._colorize = colorize
        self.mask = log_upto(SyslogPriority.DEBUG)

    def log(self, priority: int, message: str) -> None:
        """Render ``message`` unless the mask filters ``priority`` out."""
        if not self.mask & (1 << int(priority)):
            return
        level = SyslogPriority(priority)
        style = _STYLE_MAP.get(level, "") if self._colorize else ""
        self._console.print(f"{escape(self._prefix)} {level.name}: {escape(message)}", style=style, highlight=False, soft_wrap=True)


class ConsoleTransport(TransportPort):
    """Render sessions on a Rich console.

    Examples
    --------
    >>> from io import StringIO
    >>> console = Console(file=StringIO(), record=True, width=120)
    >>> with ConsoleTransport(console=console).open("app", 1, 128) as session:
    ...     session.log(4, "disk almost full")
    >>> console.export_text().strip()
    'app[local0] WARNING: disk almost full'
    """

    def __init__(self, *, console: Console | None = None, force_color: bool = False, no_color: bool = False) -> None:
        """Configure the console with colour overrides."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color, no_color=no_color, stderr=False)
        self._colorize = not no_color

    @contextmanager
    def open(self, ident: str, options: int, facility: int | None) -> Iterator[ConsoleSession]:
        """Yield a console session; ``options`` has no console equivalent."""
        yield ConsoleSession(self._console, ident, facility, colorize=self._colorize)


__all__ = ["ConsoleSession", "ConsoleTransport"]
