"""Concrete transports and bridges for the syslog adapter."""

from __future__ import annotations

from .console_transport import ConsoleTransport
from .logging_handler import SysloggerHandler, severity_for_record_level
from .syslog_transport import SyslogTransport

__all__ = ["ConsoleTransport", "SyslogTransport", "SysloggerHandler", "severity_for_record_level"]
