# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Scan .env text into raw key-value pairs.

Handles:
  - blank lines and ``#`` comment lines
  - values with ``=`` in them (only the first ``=`` splits)
  - inline comments after unquoted values
  - inline comments after a quoted value (``#`` inside the quotes is kept)

Values are stored raw; quotes, escapes and ``$VAR`` references are handled
by :mod:`envload.resolve`.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from envload.errors import EmptyKeyError, MalformedLineError, SourceOpenError, SourceReadError

_QUOTES = ("'", '"')


def strip_inline_comment(value: str) -> str:
    """Remove a trailing ``# comment`` from *value*, keeping ``#`` inside quotes."""
    value = value.strip()
    if not value or "#" not in value:
        return value

    quote = value[0]
    if quote in _QUOTES:
        # Everything after the last matching quote is a comment.
        for i in range(len(value) - 1, 0, -1):
            if value[i] == quote:
                return value[: i + 1]
        return value

    return value[: value.index("#")].rstrip()


def scan_lines(lines: Iterable[str], into: dict[str, str] | None = None) -> dict[str, str]:
    """Scan *lines* into a dict of key to raw (comment-stripped) value.

    Later assignments of the same key overwrite earlier ones.  Raises
    :class:`MalformedLineError` for a line without ``=`` and
    :class:`EmptyKeyError` for a line like ``=value``.
    """
    result: dict[str, str] = {} if into is None else into
    line_number = 0
    try:
        for raw_line in lines:
            line_number += 1
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue

            key, sep, value = line.partition("=")
            if not sep:
                raise MalformedLineError(line_number, line)

            key = key.strip()
            if not key:
                raise EmptyKeyError(line_number, line)

            result[key] = strip_inline_comment(value)
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(
            f"error reading after line {line_number}: {e}",
            line_number=line_number + 1,
        ) from e
    return result


def read_env_file(path: str | Path, encoding: str = "utf-8") -> dict[str, str]:
    """Open *path* and return its raw key-value pairs (see :func:`scan_lines`).

    Lines end at ``\\n`` only; a lone ``\\r`` stays part of the value.
    """
    try:
        f = open(path, encoding=encoding, newline="\n")
    except (OSError, LookupError) as e:
        # LookupError: unknown encoding name
        raise SourceOpenError(str(path), getattr(e, "strerror", None) or str(e)) from e
    with f:
        return scan_lines(f)


def format_env_value(value: str) -> str:
    """Format *value* for a .env file so that parsing it gives *value* back."""
    if not value:
        return '""'
    if value.isalnum() or all(c.isalnum() or c in "_-./:@,+" for c in value):
        return value
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("$", "\\$")
    )
    return f'"{escaped}"'


def format_env_lines(values: dict[str, str]) -> list[str]:
    """Return ``KEY=value`` lines, sorted by key, suitable for writing a .env file."""
    return [f"{key}={format_env_value(value)}" for key, value in sorted(values.items())]
