"""Bridge from the stdlib :mod:`logging` module to a :class:`Syslogger`.

Purpose
-------
Let applications that already log through :mod:`logging` reuse the adapter's
chunking, escaping and priority mapping by installing one handler.

Contents
--------
* :func:`severity_for_record_level` - stdlib level number to severity.
* :class:`SysloggerHandler` - :class:`logging.Handler` implementation.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lib_syslogger.domain.levels import SeverityLevel

if TYPE_CHECKING:
    from lib_syslogger.syslogger import Syslogger


_PACKAGE_LOGGER = "lib_syslogger"

_THRESHOLDS = (
    (logging.CRITICAL, SeverityLevel.FATAL),
    (logging.ERROR, SeverityLevel.ERROR),
    (logging.WARNING, SeverityLevel.WARN),
    (logging.INFO, SeverityLevel.INFO),
)


def severity_for_record_level(levelno: int) -> SeverityLevel:
    """Round ``levelno`` down to the nearest tier.

    Examples
    --------
    >>> severity_for_record_level(logging.WARNING) is SeverityLevel.WARN
    True
    >>> severity_for_record_level(25) is SeverityLevel.INFO
    True
    >>> severity_for_record_level(60) is SeverityLevel.UNKNOWN
    True
    """
    if levelno > logging.CRITICAL:
        return SeverityLevel.UNKNOWN
    for threshold, severity in _THRESHOLDS:
        if levelno >= threshold:
            return severity
    return SeverityLevel.DEBUG


class SysloggerHandler(logging.Handler):
    """Forward log records to a :class:`Syslogger`.

    Records from the ``lib_syslogger`` loggers themselves are skipped, since
    forwarding them would log again from inside :meth:`Syslogger.add`.
    """

    def __init__(self, syslogger: "Syslogger", level: int = logging.NOTSET, *, use_logger_name: bool = False) -> None:
        super().__init__(level)
        self.syslogger = syslogger
        self.use_logger_name = use_logger_name

    def emit(self, record: logging.LogRecord) -> None:
        if record.name.partition(".")[0] == _PACKAGE_LOGGER:
            return
        try:
            message = self.format(record)
            progname = record.name if self.use_logger_name else None
            self.syslogger.add(severity_for_record_level(record.levelno), message, progname)
        except RecursionError:  # pragma: no cover - mirrors logging.StreamHandler
            raise
        except Exception:
            self.handleError(record)


__all__ = ["SysloggerHandler", "severity_for_record_level"]
