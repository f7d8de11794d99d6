"""Minimal debug logging switched on and off at run time."""

from __future__ import annotations

import sys

_debugging = False


def set_debugging(enabled: bool) -> None:
    """Turn debug output on or off."""
    global _debugging
    _debugging = bool(enabled)


def debug(format: str, *args: object) -> None:
    """Write a %-formatted message to standard output when debugging is on."""
    if not _debugging:
        return
    message = format % args if args else format
    sys.stdout.write(message)