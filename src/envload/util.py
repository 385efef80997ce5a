# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared utilities."""

from __future__ import annotations

_SHELL_SPECIAL = " \t\n'\"\\$`!#&|;(){}<>*?~"


def mask(value: str) -> str:
    """Hide most of *value* for display, keeping three characters at each end."""
    if len(value) <= 6:
        return "****"
    return value[:3] + "****" + value[-3:]


def shell_escape(value: str) -> str:
    """Escape for Unix sh: single-quote wrapped, internal ' -> '\\''."""
    if not value or any(c in _SHELL_SPECIAL for c in value):
        return "'" + value.replace("'", "'\\''") + "'"
    return value


def powershell_escape(value: str) -> str:
    """Escape for a PowerShell single-quoted string: ' -> ''."""
    return value.replace("'", "''")


def parse_bool(value: str) -> bool:
    """Interpret ``1``/``true``/``yes``/``on`` (any case) as True."""
    return value.strip().lower() in ("1", "true", "yes", "on")
