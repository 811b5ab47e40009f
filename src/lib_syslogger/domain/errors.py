"""Exceptions raised by the domain layer."""

from __future__ import annotations


class InvalidLevel(ValueError):
    """Raised when a value cannot be resolved to a :class:`SeverityLevel`.

    Examples
    --------
    >>> raise InvalidLevel("foo")
    Traceback (most recent call last):
    ...
    lib_syslogger.domain.errors.InvalidLevel: foo
    """


__all__ = ["InvalidLevel"]
