"""Syslog vocabulary: priorities, facilities, and ``openlog`` option flags.

Purpose
-------
Provide portable mirrors of the POSIX ``syslog`` constants so the domain layer
can talk about priorities and facilities without importing :mod:`syslog`,
which does not exist on Windows.

Contents
--------
* :class:`SyslogPriority` - the eight RFC 5424 severities.
* :class:`Facility` - the facility selector passed to ``openlog``.
* :class:`Option` - ``openlog`` option bitmask.
* :func:`log_upto` - equivalent of ``syslog.LOG_UPTO``.

System Role
-----------
Consumed by :mod:`lib_syslogger.domain.levels` for the severity mapping and by
the transports, configuration parser, and CLI.
"""

from __future__ import annotations

from enum import IntEnum, IntFlag


class SyslogPriority(IntEnum):
    """Numeric syslog priorities, most severe first."""

    EMERG = 0
    ALERT = 1
    CRIT = 2
    ERR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7


class Facility(IntEnum):
    """Syslog facilities with their encoded (already shifted) values."""

    KERN = 0
    USER = 8
    MAIL = 16
    DAEMON = 24
    AUTH = 32
    SYSLOG = 40
    LPR = 48
    NEWS = 56
    UUCP = 64
    CRON = 72
    AUTHPRIV = 80
    LOCAL0 = 128
    LOCAL1 = 136
    LOCAL2 = 144
    LOCAL3 = 152
    LOCAL4 = 160
    LOCAL5 = 168
    LOCAL6 = 176
    LOCAL7 = 184

    @classmethod
    def from_name(cls, name: str) -> "Facility":
        """Resolve ``"local0"``, ``"LOG_DAEMON"`` and similar spellings.

        Examples
        --------
        >>> Facility.from_name("local0") is Facility.LOCAL0
        True
        >>> Facility.from_name("LOG_USER") is Facility.USER
        True
        """
        normalized = name.strip().upper()
        if normalized.startswith("LOG_"):
            normalized = normalized[4:]
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown syslog facility: {name!r}") from exc


class Option(IntFlag):
    """Flags accepted by ``openlog``."""

    PID = 0x01
    CONS = 0x02
    ODELAY = 0x04
    NDELAY = 0x08
    NOWAIT = 0x10
    PERROR = 0x20

    @classmethod
    def from_names(cls, names: str) -> "Option":
        """Parse a comma separated list such as ``"pid,cons"``.

        Examples
        --------
        >>> Option.from_names("pid, cons") == Option.PID | Option.CONS
        True
        >>> Option.from_names("") == Option(0)
        True
        """
        result = cls(0)
        for raw in names.split(","):
            normalized = raw.strip().upper()
            if not normalized:
                continue
            if normalized.startswith("LOG_"):
                normalized = normalized[4:]
            try:
                result |= cls[normalized]
            except KeyError as exc:
                raise ValueError(f"Unknown syslog option: {raw.strip()!r}") from exc
        return result


DEFAULT_OPTIONS = Option.PID | Option.CONS


def log_upto(priority: int) -> int:
    """Return the mask enabling every priority up to and including ``priority``.

    Examples
    --------
    >>> log_upto(SyslogPriority.DEBUG)
    255
    >>> log_upto(SyslogPriority.ERR)
    15
    """
    return (1 << (int(priority) + 1)) - 1


__all__ = ["DEFAULT_OPTIONS", "Facility", "Option", "SyslogPriority", "log_upto"]
