"""Message preparation: resolution, sanitising, and octet-bounded chunking.

Purpose
-------
Turn whatever the caller handed to a leveled call into text that is safe to
pass to ``syslog(3)`` and that fits the configured transmission unit.

Contents
--------
* :func:`resolve_message` - pick the explicit message, the lazy block, or ``""``.
* :func:`clean` - strip, drop ANSI colour codes, double ``%``.
* :func:`split_octets` - split text into ordered chunks of at most N octets.

System Role
-----------
Pure helpers used by :meth:`lib_syslogger.Syslogger.add`; they never touch the
transport and never raise for ``None`` input.
"""

from __future__ import annotations

import re
from collections.abc import Callable

DEFAULT_MAX_OCTETS = 1024
#: Default upper bound, in UTF-8 octets, for a single transmitted chunk.

_ANSI_COLOUR_RE = re.compile(r"\x1b\[[^m]*m")
_UNIT_RE = re.compile(r"%%|.", re.DOTALL)


def resolve_message(message: object = None, block: Callable[[], object] | None = None) -> str:
    """Return the text to log, evaluating ``block`` only when needed.

    Examples
    --------
    >>> resolve_message("explicit", lambda: "lazy")
    'explicit'
    >>> resolve_message(None, lambda: "lazy")
    'lazy'
    >>> resolve_message(None, None)
    ''
    """
    if message is None and block is not None:
        message = block()
    if message is None:
        return ""
    return message if isinstance(message, str) else str(message)


def clean(text: str) -> str:
    """Strip surrounding whitespace, drop colour codes, and escape ``%``.

    Examples
    --------
    >>> clean("%me%ssage%")
    '%%me%%ssage%%'
    >>> clean("\\n\\nmessage  ")
    'message'
    >>> clean("\\x1b[31mred\\x1b[0m")
    'red'
    """
    text = _ANSI_COLOUR_RE.sub("", text.strip())
    return text.replace("%", "%%")


def split_octets(text: str, max_octets: int) -> list[str]:
    """Split ``text`` into ordered chunks of at most ``max_octets`` UTF-8 octets.

    Escaped ``%%`` pairs and multibyte characters are indivisible: when a
    boundary would fall inside one, the chunk ends before it. A single unit
    wider than ``max_octets`` travels alone. Empty input yields one empty
    chunk so the caller always transmits something.

    Examples
    --------
    >>> split_octets("a" * 6, 3)
    ['aaa', 'aaa']
    >>> split_octets("aa%%b", 3)
    ['aa', '%%b']
    >>> split_octets("", 10)
    ['']
    """
    if max_octets <= 0:
        raise ValueError("max_octets must be positive")
    if len(text.encode("utf-8", "replace")) <= max_octets:
        return [text]

    chunks: list[str] = []
    current: list[str] = []
    size = 0
    for unit in _UNIT_RE.findall(text):
        width = len(unit.encode("utf-8", "replace"))
        if current and size + width > max_octets:
            chunks.append("".join(current))
            current = []
            size = 0
        current.append(unit)
        size += width
    if current:
        chunks.append("".join(current))
    return chunks


__all__ = ["DEFAULT_MAX_OCTETS", "clean", "resolve_message", "split_octets"]
