"""Tag stacks built atop one shared :mod:`contextvars` variable.

Purpose
-------
Let callers scope short labels (request ids, job names) to a block of code so
every message logged inside it is prefixed with ``[tag]``.

Contents
--------
* :data:`_TAGS` - process-wide context variable holding every stack.
* :class:`TagStack` - per-logger view with push/pop/scoped helpers.

System Role
-----------
Owned by each :class:`~lib_syslogger.Syslogger`; threads and asyncio tasks see
their own stacks because the storage is a :class:`contextvars.ContextVar`.
All stacks share :data:`_TAGS`, an immutable mapping from stack key to tags
that is replaced on every change, so creating loggers never adds variables
to a thread's context. Empty stacks are removed from the mapping.
"""

from __future__ import annotations

import contextvars
import itertools
from contextlib import contextmanager
from types import MappingProxyType
from typing import Iterator, Mapping

_EMPTY: Mapping[int, tuple[str, ...]] = MappingProxyType({})

_TAGS: contextvars.ContextVar[Mapping[int, tuple[str, ...]]] = contextvars.ContextVar("lib_syslogger_tags", default=_EMPTY)

_KEYS = itertools.count()


class TagStack:
    """Manage tags bound to the current execution flow.

    Examples
    --------
    >>> stack = TagStack()
    >>> with stack.scoped("req-1", "web"):
    ...     stack.prefix()
    '[req-1] [web] '
    >>> stack.current()
    ()
    """

    def __init__(self) -> None:
        self._key = next(_KEYS)

    def _set(self, tags: tuple[str, ...]) -> None:
        stacks = dict(_TAGS.get())
        if tags:
            stacks[self._key] = tags
        else:
            stacks.pop(self._key, None)
        _TAGS.set(MappingProxyType(stacks))

    def current(self) -> tuple[str, ...]:
        """Return the tags bound to the current scope."""

        return _TAGS.get().get(self._key, ())

    def push(self, *tags: object) -> tuple[str, ...]:
        """Append non-blank ``tags`` and return the ones actually pushed."""

        cleaned = tuple(text for text in (str(tag).strip() for tag in tags if tag is not None) if text)
        if cleaned:
            self._set(self.current() + cleaned)
        return cleaned

    def pop(self, count: int = 1) -> tuple[str, ...]:
        """Remove and return the ``count`` most recent tags."""

        if count <= 0:
            return ()
        stack = self.current()
        popped = stack[-count:]
        if popped:
            self._set(stack[: len(stack) - len(popped)])
        return popped

    def clear(self) -> None:
        """Remove every tag from the current scope."""

        if self.current():
            self._set(())

    @contextmanager
    def scoped(self, *tags: object) -> Iterator[tuple[str, ...]]:
        """Push ``tags`` for the duration of the ``with`` block.

        Only this stack is restored on exit; changes other stacks made inside
        the block stay in place.
        """

        previous = self.current()
        self.push(*tags)
        try:
            yield self.current()
        finally:
            self._set(previous)

    def prefix(self) -> str:
        """Return the ``"[a] [b] "`` prefix for the current tags."""

        return "".join(f"[{tag}] " for tag in self.current())


__all__ = ["TagStack"]
