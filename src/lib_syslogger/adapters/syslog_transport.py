"""Syslog transport backed by the standard library :mod:`syslog` module.

Purpose
-------
Implement :class:`TransportPort` on top of ``openlog``/``syslog``/``closelog``
so the adapter reaches the host's syslog daemon.

Contents
--------
* :class:`SyslogSession` - :class:`SessionPort` forwarding to the module.
* :class:`SyslogTransport` - opens one session per leveled call.

System Role
-----------
Default transport of :class:`~lib_syslogger.Syslogger`. The :mod:`syslog`
module is process-global; callers logging from several threads serialise
access themselves.
"""

from __future__ import annotations

from contextlib import contextmanager
from types import ModuleType
from typing import Any, Iterator

from lib_syslogger.application.ports.transport import SessionPort, TransportPort


def _default_module() -> ModuleType:  # pragma: no cover - depends on platform
    """Import :mod:`syslog`, raising if the platform lacks it."""
    try:
        import syslog
    except ImportError as exc:  # pragma: no cover - executed only on Windows
        raise RuntimeError("the syslog module is not available on this platform") from exc
    return syslog


class SyslogSession(SessionPort):
    """Session bound to the process-wide syslog connection."""

    def __init__(self, module: Any) -> None:
        self._module = module
        self._mask: int | None = None

    @property
    def mask(self) -> int:
        """Return the last mask installed through this session (0 when unset)."""
        return self._mask or 0

    @mask.setter
    def mask(self, value: int) -> None:
        self._module.setlogmask(int(value))
        self._mask = int(value)

    def log(self, priority: int, message: str) -> None:
        """Send ``message`` through ``syslog.syslog``."""
        self._module.syslog(int(priority), message)


class SyslogTransport(TransportPort):
    """Open sessions with ``syslog.openlog`` and close them on exit."""

    def __init__(self, *, module: Any | None = None) -> None:
        """Use ``module`` in place of :mod:`syslog` when supplied."""
        self._module = module

    @contextmanager
    def open(self, ident: str, options: int, facility: int | None) -> Iterator[SyslogSession]:
        """Yield a session configured with ``ident``, ``options`` and ``facility``.

        Examples
        --------
        >>> class FakeSyslog:
        ...     def __init__(self):
        ...         self.calls = []
        ...     def __getattr__(self, name):
        ...         return lambda *args: self.calls.append((name,) + args)
        >>> fake = FakeSyslog()
        >>> with SyslogTransport(module=fake).open("app", 1, None) as session:
        ...     session.log(5, "hello")
        >>> fake.calls
        [('openlog', 'app', 1), ('syslog', 5, 'hello'), ('closelog',)]
        """
        module = self._module if self._module is not None else _default_module()
        if facility is None:
            module.openlog(ident, int(options))
        else:
            module.openlog(ident, int(options), int(facility))
        try:
            yield SyslogSession(module)
        finally:
            module.closelog()


__all__ = ["SyslogSession", "SyslogTransport"]
