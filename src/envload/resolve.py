# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Resolve raw .env values: quoting, escape sequences, and ``$VAR`` expansion."""

from __future__ import annotations

import enum
import re

from envload.errors import EnvloadError, InvalidEscapeSequenceError, TrailingBackslashError


class QuoteStyle(enum.Enum):
    """How a raw value is quoted."""

    DOUBLE = "double"
    SINGLE = "single"
    NONE = "none"


def classify_quotes(value: str) -> QuoteStyle:
    """Return the quoting style of *value* from its first and last characters."""
    if len(value) >= 2 and value[0] == value[-1]:
        if value[0] == '"':
            return QuoteStyle.DOUBLE
        if value[0] == "'":
            return QuoteStyle.SINGLE
    return QuoteStyle.NONE


def strip_quotes(value: str) -> str:
    """Remove one pair of matching surrounding quotes, if present."""
    if classify_quotes(value) is QuoteStyle.NONE:
        return value
    return value[1:-1]


_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "'": "'",
    "\\": "\\",
    # Left as-is so expand_variables() can tell it from a reference.
    "$": "\\$",
}


def decode_escapes(value: str) -> str:
    """Decode backslash escapes in the inner text of a double-quoted value.

    ``\\$`` is kept as the two characters ``\\$``; :func:`expand_variables`
    turns it into a literal dollar sign.
    """
    if "\\" not in value:
        return value

    out: list[str] = []
    i = 0
    n = len(value)
    while i < n:
        c = value[i]
        if c != "\\":
            out.append(c)
            i += 1
            continue
        if i == n - 1:
            raise TrailingBackslashError()
        i += 1
        decoded = _ESCAPES.get(value[i])
        if decoded is None:
            raise InvalidEscapeSequenceError(value[i], i)
        out.append(decoded)
        i += 1
    return "".join(out)


# $NAME, ${NAME}, or a single special character such as $$ or $1.
_SPECIAL = r"[*#$@!?\-0-9]"
_REFERENCE_RE = re.compile(
    rf"""
    \$
    (?:
        \{{(?P<braced>[^}}]*)\}}   # ${{NAME}}, ${{}} is bad syntax
      | (?P<special>{_SPECIAL})     # $$, $1, $?, ...
      | (?P<name>[A-Za-z0-9_]+)     # $NAME
      | (?P<unclosed>\{{)           # ${{ without a closing brace
    )
    """,
    re.VERBOSE,
)


def expand_variables(value: str, values: dict[str, str]) -> str:
    """Substitute ``$NAME`` and ``${NAME}`` in *value* from *values*.

    Undefined names expand to ``""``.  Referenced values are used as they are
    currently stored (surrounding quotes stripped) and are not expanded again.
    ``\\$`` produces a literal ``$``.
    """
    if "$" not in value:
        return value

    value = value.replace("\\$", "$$")

    def _lookup(m: re.Match[str]) -> str:
        name = m.group("braced")
        if name is None:
            name = m.group("special") or m.group("name")
        if not name:
            # ${} or an unterminated ${
            return ""
        if name == "$":
            return "$"
        if name in values:
            return strip_quotes(values[name])
        return ""

    return _REFERENCE_RE.sub(_lookup, value)


def resolve_value(raw: str, values: dict[str, str]) -> str:
    """Resolve one raw value against the current *values*."""
    style = classify_quotes(raw)
    if style is QuoteStyle.SINGLE:
        return strip_quotes(raw)
    if style is QuoteStyle.DOUBLE:
        return expand_variables(decode_escapes(strip_quotes(raw)), values)
    return expand_variables(raw, values)


def resolve_values(values: dict[str, str]) -> dict[str, str]:
    """Resolve every raw value in *values* in place and return it.

    Keys are resolved in the mapping's iteration order, treated as unordered:
    a reference to a key that has not been resolved yet sees that key's raw
    value, so chains of references are not guaranteed to resolve fully.
    """
    for key, raw in values.items():
        try:
            values[key] = resolve_value(raw, values)
        except EnvloadError as e:
            e.with_context(key=key, raw_value=raw)
            raise
    return values
