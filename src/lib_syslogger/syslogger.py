"""Leveled logger that writes every message to syslog.

Purpose
-------
Offer the familiar ``debug``/``info``/``warn``/``error``/``fatal`` surface,
level predicates, and a pluggable formatter while routing output through a
syslog transport instead of a file or stream.

Contents
--------
* :class:`Syslogger` - the adapter façade.

System Role
-----------
Composition point of the package: it owns the configuration (identifier,
options, facility, threshold, chunk size, formatter), runs the message
pipeline from :mod:`lib_syslogger.domain.message`, and drives a
:class:`~lib_syslogger.application.ports.TransportPort`.

Every emitted call opens the transport once, because ``ident`` may change
between calls. Nothing is locked: the transport is assumed safe to call
repeatedly, and callers sharing one process-wide syslog connection across
threads serialise access themselves.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable
from contextlib import contextmanager
from datetime import datetime
from typing import TYPE_CHECKING, Any, Iterator

from .adapters.syslog_transport import SyslogTransport
from .application.ports import TransportPort
from .domain import (
    DEFAULT_MAX_OCTETS,
    DEFAULT_OPTIONS,
    Facility,
    Formatter,
    InvalidLevel,
    Option,
    SeverityLevel,
    TagStack,
    clean,
    default_formatter,
    log_upto,
    resolve_message,
    split_octets,
)

if TYPE_CHECKING:
    from .config import SysloggerSettings

LOGGER = logging.getLogger(__name__)

Block = Callable[[], object]


def _default_ident() -> str:
    """Return the program invocation name used when no ident is supplied."""
    argv0 = sys.argv[0] if sys.argv else ""
    return os.path.basename(argv0) or "python"


class Syslogger:
    """Leveled logging façade over a syslog transport.

    Parameters
    ----------
    ident:
        Identifier prepended by syslog to each line; defaults to the program
        invocation name. Changing :attr:`ident` affects the next call.
    options:
        ``openlog`` option flags; defaults to ``PID | CONS``.
    facility:
        Facility selector; ``None`` leaves the platform default in place.
    level:
        Initial threshold (a :class:`SeverityLevel` or its integer value).
    max_octets:
        Largest chunk, in UTF-8 octets, handed to the transport.
    formatter:
        Callable ``(label, timestamp, progname, message) -> str``.
    transport:
        Collaborator opening sessions; defaults to :class:`SyslogTransport`.
    mirror_mask:
        When ``True`` every session's priority mask is set to match the
        threshold.
    clock:
        Zero-argument callable returning the timestamp passed to formatters.

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
    >>> transport = Recorder()
    >>> logger = Syslogger("my_app", transport=transport, formatter=lambda *args: args[3])
    >>> logger.warn("disk at 95%")
    1
    >>> transport.lines
    [(<SyslogPriority.WARNING: 4>, 'disk at 95%%')]
    >>> logger.debug(block=lambda: 1 / 0)
    0
    """

    def __init__(
        self,
        ident: str | None = None,
        options: int = DEFAULT_OPTIONS,
        facility: int | None = None,
        *,
        level: SeverityLevel | int = SeverityLevel.INFO,
        max_octets: int = DEFAULT_MAX_OCTETS,
        formatter: Formatter | None = None,
        transport: TransportPort | None = None,
        mirror_mask: bool = True,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._ident = ident if ident is not None else _default_ident()
        self._options = Option(options)
        self._facility = Facility(facility) if facility is not None else None
        self._level = SeverityLevel.coerce(level)
        self._max_octets = self._validate_max_octets(max_octets)
        self._formatter: Formatter = default_formatter
        self.formatter = formatter
        self._transport: TransportPort = transport if transport is not None else SyslogTransport()
        self.mirror_mask = mirror_mask
        self._clock = clock or datetime.now
        self._tags = TagStack()

    @classmethod
    def from_settings(cls, settings: "SysloggerSettings", *, transport: TransportPort | None = None, **overrides: Any) -> "Syslogger":
        """Build a logger from :class:`~lib_syslogger.config.SysloggerSettings`."""

        kwargs: dict[str, Any] = {
            "ident": settings.ident,
            "options": settings.options,
            "facility": settings.facility,
            "level": settings.level,
            "max_octets": settings.max_octets,
            "transport": transport,
        }
        kwargs.update(overrides)
        return cls(**kwargs)

    # ------------------------------------------------------------------
    # configuration
    # ------------------------------------------------------------------

    @property
    def ident(self) -> str:
        return self._ident

    @ident.setter
    def ident(self, value: str | None) -> None:
        """Set the identifier; ``None`` restores the program name."""
        self._ident = str(value) if value is not None else _default_ident()

    @property
    def options(self) -> Option:
        return self._options

    @property
    def facility(self) -> Facility | None:
        return self._facility

    @property
    def level(self) -> SeverityLevel:
        """Return the current threshold."""
        return self._level

    @level.setter
    def level(self, value: SeverityLevel | int) -> None:
        """Set the threshold; the previous value stays in place on failure.

        Raises
        ------
        InvalidLevel
            When ``value`` is neither a :class:`SeverityLevel` nor the integer
            value of one. Strings are rejected; convert them with
            :meth:`SeverityLevel.from_name`.
        """
        resolved = SeverityLevel.coerce(value)
        if resolved is not self._level:
            LOGGER.debug("syslogger %s threshold %s -> %s", self._ident, self._level.name, resolved.name)
        self._level = resolved

    @property
    def max_octets(self) -> int:
        return self._max_octets

    @max_octets.setter
    def max_octets(self, value: int) -> None:
        self._max_octets = self._validate_max_octets(value)

    @property
    def formatter(self) -> Formatter:
        """Return the active formatter (the very object that was assigned)."""
        return self._formatter

    @formatter.setter
    def formatter(self, value: Formatter | None) -> None:
        if value is None:
            self._formatter = default_formatter
            return
        if not callable(value):
            raise TypeError(f"formatter must be callable, got {type(value).__name__}")
        self._formatter = value

    @staticmethod
    def _validate_max_octets(value: int) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"max_octets must be a positive integer, got {value!r}")
        if value <= 0:
            raise ValueError(f"max_octets must be a positive integer, got {value!r}")
        return value

    # ------------------------------------------------------------------
    # level predicates
    # ------------------------------------------------------------------

    def is_enabled_for(self, level: SeverityLevel | int) -> bool:
        """Return ``True`` when messages at ``level`` pass the threshold."""
        return self._level <= level

    def is_debug(self) -> bool:
        return self.is_enabled_for(SeverityLevel.DEBUG)

    def is_info(self) -> bool:
        return self.is_enabled_for(SeverityLevel.INFO)

    def is_warn(self) -> bool:
        return self.is_enabled_for(SeverityLevel.WARN)

    def is_error(self) -> bool:
        return self.is_enabled_for(SeverityLevel.ERROR)

    def is_fatal(self) -> bool:
        return self.is_enabled_for(SeverityLevel.FATAL)

    # ------------------------------------------------------------------
    # leveled calls
    # ------------------------------------------------------------------

    def debug(self, message: object = None, *, block: Block | None = None, progname: str | None = None) -> int:
        """Log ``message`` (or the value of ``block``) at ``DEBUG``.

        See :meth:`add` for argument and return semantics.
        """
        return self.add(SeverityLevel.DEBUG, message, progname, block)

    def info(self, message: object = None, *, block: Block | None = None, progname: str | None = None) -> int:
        """Log at ``INFO``; see :meth:`add`."""
        return self.add(SeverityLevel.INFO, message, progname, block)

    def warn(self, message: object = None, *, block: Block | None = None, progname: str | None = None) -> int:
        """Log at ``WARN``; see :meth:`add`."""
        return self.add(SeverityLevel.WARN, message, progname, block)

    def error(self, message: object = None, *, block: Block | None = None, progname: str | None = None) -> int:
        """Log at ``ERROR``; see :meth:`add`."""
        return self.add(SeverityLevel.ERROR, message, progname, block)

    def fatal(self, message: object = None, *, block: Block | None = None, progname: str | None = None) -> int:
        """Log at ``FATAL``; see :meth:`add`."""
        return self.add(SeverityLevel.FATAL, message, progname, block)

    def unknown(self, message: object = None, *, block: Block | None = None, progname: str | None = None) -> int:
        """Log at ``UNKNOWN``, the catch-all tier; see :meth:`add`."""
        return self.add(SeverityLevel.UNKNOWN, message, progname, block)

    def add(
        self,
        severity: SeverityLevel | int | None,
        message: object = None,
        progname: str | None = None,
        block: Block | None = None,
    ) -> int:
        """Run the message pipeline for one call.

        Parameters
        ----------
        severity:
            Level of the message. ``None`` and values outside the level table
            are logged as :attr:`SeverityLevel.UNKNOWN`.
        message:
            Explicit message; wins over ``block`` when not ``None``.
        progname:
            Identifier override for this call. When both ``message`` and
            ``block`` are absent it is taken as the message instead, and the
            logger's own :attr:`ident` is used.
        block:
            Zero-argument callable producing the message, evaluated only when
            ``severity`` passes the threshold.

        Returns
        -------
        int
            Number of chunks handed to the transport; ``0`` when the level is
            filtered out.

        Notes
        -----
        Missing message, block and progname never raise: an empty string is
        sent. Transport errors propagate unchanged.
        """
        level = self._resolve_severity(severity)
        if level < self._level:
            return 0
        if message is None and block is None and progname is not None:
            message, progname = progname, None
        ident = progname if progname is not None else self._ident

        text = clean(self._tags.prefix() + resolve_message(message, block))
        # The formatter output is chunked as one syslog format string: a lone
        # "%" it adds itself pairs with the next character.
        rendered = resolve_message(self._formatter(level.label, self._clock(), ident, text))
        chunks = split_octets(rendered, self._max_octets)
        if len(chunks) > 1:
            LOGGER.debug("syslogger %s split %d octets into %d chunks", ident, len(rendered.encode("utf-8", "replace")), len(chunks))

        with self._transport.open(ident, self._options, self._facility) as session:
            if self.mirror_mask:
                session.mask = log_upto(self._level.priority)
            for chunk in chunks:
                session.log(level.priority, chunk)
        return len(chunks)

    log = add

    @staticmethod
    def _resolve_severity(severity: SeverityLevel | int | None) -> SeverityLevel:
        if severity is None:
            return SeverityLevel.UNKNOWN
        try:
            return SeverityLevel.coerce(severity)
        except InvalidLevel:
            LOGGER.debug("syslogger treating severity %r as UNKNOWN", severity)
            return SeverityLevel.UNKNOWN

    # ------------------------------------------------------------------
    # writable-sink compatibility
    # ------------------------------------------------------------------

    def __lshift__(self, message: object) -> "Syslogger":
        self.add(SeverityLevel.INFO, message)
        return self

    def write(self, message: object) -> int:
        """Log ``message`` at ``INFO`` and return its length, like a text stream.

        Whitespace-only writes, such as the line end ``print`` sends on its
        own, are counted but not logged.
        """
        if isinstance(message, str) and not message.strip():
            return len(message)
        self.add(SeverityLevel.INFO, message)
        return len(message) if isinstance(message, str) else 0

    def flush(self) -> None:
        """Nothing is buffered; present for file-like callers."""

    # ------------------------------------------------------------------
    # tagged logging
    # ------------------------------------------------------------------

    @contextmanager
    def tagged(self, *tags: object) -> Iterator["Syslogger"]:
        """Prefix every message logged inside the block with ``[tag]``.

        Examples
        --------
        >>> logger = Syslogger("app")
        >>> with logger.tagged("req-42"):
        ...     logger.current_tags
        ('req-42',)
        >>> logger.current_tags
        ()
        """
        with self._tags.scoped(*tags):
            yield self

    def push_tags(self, *tags: object) -> tuple[str, ...]:
        return self._tags.push(*tags)

    def pop_tags(self, count: int = 1) -> tuple[str, ...]:
        return self._tags.pop(count)

    def clear_tags(self) -> None:
        self._tags.clear()

    @property
    def current_tags(self) -> tuple[str, ...]:
        return self._tags.current()

    def __repr__(self) -> str:
        facility = self._facility.name if self._facility is not None else None
        return f"Syslogger(ident={self._ident!r}, level={self._level.name}, facility={facility}, max_octets={self._max_octets})"


__all__ = ["Syslogger"]
