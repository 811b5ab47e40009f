"""Protocols describing the collaborators of the syslog adapter."""

from __future__ import annotations

from .transport import SessionPort, TransportPort

__all__ = ["SessionPort", "TransportPort"]
