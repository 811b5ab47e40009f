"""Severity levels understood by :class:`~lib_syslogger.Syslogger`.

Purpose
-------
Model the six leveled-logging tiers and translate them into syslog priorities
through one fixed table, so every leveled call shares a single code path.

Contents
--------
* :class:`SeverityLevel` enum with label, priority, and coercion helpers.
* ``_PRIORITY_TABLE`` / ``_LABEL_TABLE`` constants.

System Role
-----------
The façade validates its threshold with :meth:`SeverityLevel.coerce`; the
configuration layer and the CLI parse user text with
:meth:`SeverityLevel.from_name`.
"""

from __future__ import annotations

from enum import IntEnum

from .errors import InvalidLevel
from .priorities import SyslogPriority


class SeverityLevel(IntEnum):
    """Ordered severity tiers; a message passes when its level >= threshold."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4
    UNKNOWN = 5

    @property
    def label(self) -> str:
        """Return the label handed to formatters (``"ANY"`` for UNKNOWN)."""

        return _LABEL_TABLE[self]

    @property
    def priority(self) -> SyslogPriority:
        """Return the syslog priority used when transmitting at this level."""

        return _PRIORITY_TABLE[self]

    @classmethod
    def from_name(cls, name: str) -> "SeverityLevel":
        """Resolve a case-insensitive level name.

        Examples
        --------
        >>> SeverityLevel.from_name("Warn") is SeverityLevel.WARN
        True
        >>> SeverityLevel.from_name("version")
        Traceback (most recent call last):
        ...
        lib_syslogger.domain.errors.InvalidLevel: Unknown log level: 'version'
        """
        if not isinstance(name, str):
            raise InvalidLevel(f"Log level name must be a string, got {type(name).__name__}")
        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise InvalidLevel(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_numeric(cls, value: int) -> "SeverityLevel":
        """Return the member whose value equals ``value``."""

        try:
            return cls(value)
        except ValueError as exc:
            raise InvalidLevel(f"Unsupported log level numeric: {value}") from exc

    @classmethod
    def coerce(cls, value: object) -> "SeverityLevel":
        """Resolve a threshold assignment.

        Only members and plain integers are accepted; text has to go through
        :meth:`from_name` explicitly.

        Examples
        --------
        >>> SeverityLevel.coerce(SeverityLevel.ERROR) is SeverityLevel.ERROR
        True
        >>> SeverityLevel.coerce(2) is SeverityLevel.WARN
        True
        >>> SeverityLevel.coerce("warn")
        Traceback (most recent call last):
        ...
        lib_syslogger.domain.errors.InvalidLevel: Invalid log level: 'warn'
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.from_numeric(value)
        raise InvalidLevel(f"Invalid log level: {value!r}")


_PRIORITY_TABLE = {
    SeverityLevel.DEBUG: SyslogPriority.DEBUG,
    SeverityLevel.INFO: SyslogPriority.NOTICE,
    SeverityLevel.WARN: SyslogPriority.WARNING,
    SeverityLevel.ERROR: SyslogPriority.ERR,
    SeverityLevel.FATAL: SyslogPriority.CRIT,
    SeverityLevel.UNKNOWN: SyslogPriority.ALERT,
}
#: Map :class:`SeverityLevel` to syslog numeric priorities.

_LABEL_TABLE = {
    SeverityLevel.DEBUG: "DEBUG",
    SeverityLevel.INFO: "INFO",
    SeverityLevel.WARN: "WARN",
    SeverityLevel.ERROR: "ERROR",
    SeverityLevel.FATAL: "FATAL",
    SeverityLevel.UNKNOWN: "ANY",
}


__all__ = ["SeverityLevel"]
