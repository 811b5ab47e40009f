"""Public package surface: the syslog-backed leveled logger.

``import lib_syslogger`` exposes :class:`Syslogger` together with the level,
priority, and facility vocabulary and the transports it ships with.
"""

from __future__ import annotations

from .adapters import ConsoleTransport, SyslogTransport, SysloggerHandler
from .domain import (
    DEFAULT_MAX_OCTETS,
    DEFAULT_OPTIONS,
    Facility,
    InvalidLevel,
    Option,
    SeverityLevel,
    SyslogPriority,
    default_formatter,
)
from .syslogger import Syslogger

__all__ = [
    "DEFAULT_MAX_OCTETS",
    "DEFAULT_OPTIONS",
    "ConsoleTransport",
    "Facility",
    "InvalidLevel",
    "Option",
    "SeverityLevel",
    "SyslogPriority",
    "SyslogTransport",
    "Syslogger",
    "SysloggerHandler",
    "default_formatter",
]
