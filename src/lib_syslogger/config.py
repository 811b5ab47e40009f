"""Environment-driven configuration and optional ``.env`` loading.

Purpose
-------
Read the adapter defaults from ``SYSLOGGER_*`` environment variables and,
on request, populate the environment from the nearest ``.env`` file first.

Contents
--------
* :data:`DOTENV_ENV_VAR` - environment toggle for ``.env`` loading.
* :func:`should_use_dotenv` / :func:`enable_dotenv` - dotenv helpers.
* :class:`SysloggerSettings` / :func:`settings_from_env` - typed settings.

System Role
-----------
Consumed by the CLI and by :meth:`lib_syslogger.Syslogger.from_settings`.
Explicit constructor arguments always win over the environment; existing
environment variables always win over ``.env`` entries.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

from .domain import DEFAULT_MAX_OCTETS, DEFAULT_OPTIONS, Facility, InvalidLevel, Option, SeverityLevel

DOTENV_ENV_VAR = "SYSLOGGER_USE_DOTENV"

IDENT_ENV_VAR = "SYSLOGGER_IDENT"
FACILITY_ENV_VAR = "SYSLOGGER_FACILITY"
OPTIONS_ENV_VAR = "SYSLOGGER_OPTIONS"
LEVEL_ENV_VAR = "SYSLOGGER_LEVEL"
MAX_OCTETS_ENV_VAR = "SYSLOGGER_MAX_OCTETS"

_TRUTHY = {"1", "true", "yes", "on"}

_DOTENV_LOADED: Path | None = None
_DOTENV_ATTEMPTED = False


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is enabled.

    An explicit CLI flag wins; otherwise the toggle variable decides.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    >>> should_use_dotenv()
    False
    """
    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` without overriding existing variables.

    The search walks upward from the current working directory. Loading
    happens at most once per process; later calls return the path loaded the
    first time.
    """
    global _DOTENV_LOADED, _DOTENV_ATTEMPTED
    if _DOTENV_ATTEMPTED:
        return _DOTENV_LOADED
    _DOTENV_ATTEMPTED = True

    found = find_dotenv(usecwd=True)
    if not found:
        return None
    path = Path(found).resolve()
    load_dotenv(path, override=False)
    _DOTENV_LOADED = path
    return path


def _reset_dotenv_state_for_testing() -> None:
    """Forget previous ``.env`` loads so tests can exercise them again."""

    global _DOTENV_LOADED, _DOTENV_ATTEMPTED
    _DOTENV_LOADED = None
    _DOTENV_ATTEMPTED = False


@dataclass(frozen=True)
class SysloggerSettings:
    """Adapter defaults resolved from the environment."""

    ident: str | None = None
    options: Option = DEFAULT_OPTIONS
    facility: Facility | None = None
    level: SeverityLevel = SeverityLevel.INFO
    max_octets: int = DEFAULT_MAX_OCTETS


def settings_from_env(environ: Mapping[str, str] | None = None) -> SysloggerSettings:
    """Build :class:`SysloggerSettings` from ``SYSLOGGER_*`` variables.

    Raises
    ------
    ValueError
        When a variable holds an unparseable value; the message names the
        variable. :class:`InvalidLevel` is a :class:`ValueError`.

    Examples
    --------
    >>> settings = settings_from_env({"SYSLOGGER_LEVEL": "warn", "SYSLOGGER_FACILITY": "local3"})
    >>> settings.level.name, settings.facility.name
    ('WARN', 'LOCAL3')
    >>> settings_from_env({"SYSLOGGER_MAX_OCTETS": "0"})
    Traceback (most recent call last):
    ...
    ValueError: SYSLOGGER_MAX_OCTETS must be positive
    """
    env = os.environ if environ is None else environ

    ident = _clean(env.get(IDENT_ENV_VAR))

    facility: Facility | None = None
    raw_facility = _clean(env.get(FACILITY_ENV_VAR))
    if raw_facility is not None:
        try:
            facility = Facility.from_name(raw_facility)
        except ValueError as exc:
            raise ValueError(f"{FACILITY_ENV_VAR}: {exc}") from exc

    options = DEFAULT_OPTIONS
    raw_options = env.get(OPTIONS_ENV_VAR)
    if raw_options is not None:
        try:
            options = Option.from_names(raw_options)
        except ValueError as exc:
            raise ValueError(f"{OPTIONS_ENV_VAR}: {exc}") from exc

    level = SeverityLevel.INFO
    raw_level = _clean(env.get(LEVEL_ENV_VAR))
    if raw_level is not None:
        try:
            level = SeverityLevel.from_name(raw_level)
        except InvalidLevel as exc:
            raise InvalidLevel(f"{LEVEL_ENV_VAR}: {exc}") from exc

    max_octets = DEFAULT_MAX_OCTETS
    raw_max = _clean(env.get(MAX_OCTETS_ENV_VAR))
    if raw_max is not None:
        try:
            max_octets = int(raw_max)
        except ValueError as exc:
            raise ValueError(f"{MAX_OCTETS_ENV_VAR} must be an integer") from exc
        if max_octets <= 0:
            raise ValueError(f"{MAX_OCTETS_ENV_VAR} must be positive")

    return SysloggerSettings(ident=ident, options=options, facility=facility, level=level, max_octets=max_octets)


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


__all__ = [
    "DOTENV_ENV_VAR",
    "FACILITY_ENV_VAR",
    "IDENT_ENV_VAR",
    "LEVEL_ENV_VAR",
    "MAX_OCTETS_ENV_VAR",
    "OPTIONS_ENV_VAR",
    "SysloggerSettings",
    "enable_dotenv",
    "settings_from_env",
    "should_use_dotenv",
]
