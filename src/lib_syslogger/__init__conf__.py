"""Static package metadata surfaced by the CLI banner."""

from __future__ import annotations

from typing import Callable

name = "lib_syslogger"
title = "Leveled logger that writes to the system syslog"
version = "0.1.0"
homepage = "https://github.com/bitranox/lib_syslogger"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "lib_syslogger"


def print_info(writer: Callable[[str], object] = print) -> None:
    """Emit the metadata banner through ``writer``.

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0].startswith("\\nInfo for lib_syslogger:")
    True
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    body = "".join(f"    {label:<{pad}} = {value}\n" for label, value in fields)
    writer(f"\nInfo for {name}:\n\n{body}")


__all__ = ["author", "author_email", "homepage", "name", "print_info", "shell_command", "title", "version"]
