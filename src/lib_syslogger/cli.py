"""Command line interface built on rich-click.

Purpose
-------
Let operators send a message to syslog from a shell, inspect the severity to
priority table, and preview output with ``--dry-run`` before touching the
daemon.

Contents
--------
* :func:`cli` - root group (``--traceback``, ``--use-dotenv``, ``--version``).
* ``info`` / ``levels`` / ``send`` sub-commands.
* :func:`summary_info` - metadata banner shared with ``python -m``.
* :func:`main` - entry point wrapping :func:`lib_cli_exit_tools.run_cli`.
"""

from __future__ import annotations

import os
from typing import Sequence

import lib_cli_exit_tools
import rich_click as click
from click.core import ParameterSource
from rich.console import Console
from rich.table import Table

from . import __init__conf__
from . import config as config_module
from .adapters import ConsoleTransport
from .domain import Facility, SeverityLevel
from .syslogger import Syslogger

CLICK_CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

_LEVEL_CHOICES = [level.name.lower() for level in SeverityLevel]
_FACILITY_CHOICES = [facility.name.lower() for facility in Facility]


def summary_info() -> str:
    """Return the metadata banner as a single string.

    Examples
    --------
    >>> "Info for lib_syslogger" in summary_info()
    True
    """
    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


@click.group(help=__init__conf__.title, context_settings=CLICK_CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--traceback/--no-traceback", default=False, help="Show full Python traceback on errors.")
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load environment variables from the nearest .env (also enabled by {config_module.DOTENV_ENV_VAR}=1).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Root command storing global flags and loading ``.env`` on request."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not ParameterSource.DEFAULT:
        explicit = use_dotenv
    env_toggle = os.getenv(config_module.DOTENV_ENV_VAR)
    if config_module.should_use_dotenv(explicit=explicit, env_value=env_toggle):
        config_module.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("levels", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_levels() -> None:
    """Show which syslog priority each severity is sent at."""

    table = Table(title="Severity to syslog priority")
    table.add_column("severity")
    table.add_column("label")
    table.add_column("priority")
    table.add_column("value", justify="right")
    for level in SeverityLevel:
        table.add_row(level.name.lower(), level.label, level.priority.name, str(int(level.priority)))
    Console().print(table)


@cli.command("send", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("message", nargs=-1, required=True)
@click.option("--level", "level_name", type=click.Choice(_LEVEL_CHOICES, case_sensitive=False), default=None, help="Severity of the message (default: info).")
@click.option("--ident", default=None, help="Identifier attached by syslog (default: SYSLOGGER_IDENT or program name).")
@click.option("--facility", "facility_name", type=click.Choice(_FACILITY_CHOICES, case_sensitive=False), default=None, help="Syslog facility.")
@click.option("--max-octets", type=click.IntRange(min=1), default=None, help="Split messages longer than this many octets.")
@click.option("--threshold", "threshold_name", type=click.Choice(_LEVEL_CHOICES, case_sensitive=False), default=None, help="Logger threshold (default: SYSLOGGER_LEVEL or info).")
@click.option("--dry-run", is_flag=True, default=False, help="Print to the console instead of syslog.")
def cli_send(
    message: tuple[str, ...],
    level_name: str | None,
    ident: str | None,
    facility_name: str | None,
    max_octets: int | None,
    threshold_name: str | None,
    dry_run: bool,
) -> None:
    """Send MESSAGE to syslog through :class:`Syslogger`."""

    settings = config_module.settings_from_env()
    overrides: dict[str, object] = {}
    if ident is not None:
        overrides["ident"] = ident
    if facility_name is not None:
        overrides["facility"] = Facility.from_name(facility_name)
    if max_octets is not None:
        overrides["max_octets"] = max_octets
    if threshold_name is not None:
        overrides["level"] = SeverityLevel.from_name(threshold_name)

    transport = ConsoleTransport() if dry_run else None
    logger = Syslogger.from_settings(settings, transport=transport, **overrides)
    severity = SeverityLevel.from_name(level_name) if level_name is not None else SeverityLevel.INFO
    sent = logger.add(severity, " ".join(message))
    if sent == 0:
        click.echo(f"suppressed: {severity.name.lower()} is below threshold {logger.level.name.lower()}", err=True)
    else:
        click.echo(f"sent {sent} chunk{'s' if sent != 1 else ''}", err=True)


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI and return its exit code.

    Traceback preferences on :data:`lib_cli_exit_tools.config` are restored on
    exit so embedding callers keep their own settings.
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main", "summary_info"]
