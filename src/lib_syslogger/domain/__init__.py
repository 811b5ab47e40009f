"""Domain entities and value objects used by the syslog adapter."""

from __future__ import annotations

from .errors import InvalidLevel
from .formatting import Formatter, default_formatter
from .levels import SeverityLevel
from .message import DEFAULT_MAX_OCTETS, clean, resolve_message, split_octets
from .priorities import DEFAULT_OPTIONS, Facility, Option, SyslogPriority, log_upto
from .tags import TagStack

__all__ = [
    "DEFAULT_MAX_OCTETS",
    "DEFAULT_OPTIONS",
    "Facility",
    "Formatter",
    "InvalidLevel",
    "Option",
    "SeverityLevel",
    "SyslogPriority",
    "TagStack",
    "clean",
    "default_formatter",
    "log_upto",
    "resolve_message",
    "split_octets",
]
