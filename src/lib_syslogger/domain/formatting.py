"""Default message formatter.

A formatter is any callable ``(label, timestamp, progname, message) -> str``.
The default renders the conventional single-line layout::

    W, [2026-10-17T09:30:00.123456 #4242]  WARN -- my_app: disk almost full
"""

from __future__ import annotations

import os
from collections.abc import Callable
from datetime import datetime

Formatter = Callable[[str, datetime, str, str], object]


def default_formatter(label: str, timestamp: datetime, progname: str, message: str) -> str:
    """Render one log line.

    Examples
    --------
    >>> from datetime import datetime
    >>> line = default_formatter("WARN", datetime(2026, 10, 17, 9, 30), "my_app", "disk almost full")
    >>> line.startswith("W, [2026-10-17T09:30:00.000000 #")
    True
    >>> line.endswith("]  WARN -- my_app: disk almost full")
    True
    """
    initial = label[:1] or "?"
    stamp = timestamp.strftime("%Y-%m-%dT%H:%M:%S.%f")
    return f"{initial}, [{stamp} #{os.getpid()}] {label:>5} -- {progname}: {message}"


__all__ = ["Formatter", "default_formatter"]
