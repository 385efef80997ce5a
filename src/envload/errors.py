# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Exception types raised while reading, resolving, and loading .env files.

Every error carries optional context (file name, line number, key and raw
value).  Context is attached with :meth:`EnvloadError.with_context` as the
error travels outward, so callers can still catch the specific type.
"""

from __future__ import annotations


class EnvloadError(Exception):
    """Base class for all envload errors."""

    def __init__(
        self,
        message: str,
        *,
        filename: str | None = None,
        line_number: int | None = None,
        line: str | None = None,
        key: str | None = None,
        raw_value: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.filename = filename
        self.line_number = line_number
        self.line = line
        self.key = key
        self.raw_value = raw_value

    def with_context(self, **context: object) -> EnvloadError:
        """Fill in any context fields that are still unset and return ``self``."""
        for name, value in context.items():
            if getattr(self, name, None) is None:
                setattr(self, name, value)
        return self

    def __str__(self) -> str:
        # Raw text is embedded with repr() so it is never interpreted as a format string.
        prefix = ""
        if self.filename is not None:
            prefix = f"{self.filename}:"
            if self.line_number is not None:
                prefix += f"{self.line_number}:"
            prefix += " "
        elif self.line_number is not None:
            prefix = f"line {self.line_number}: "
        if self.key is not None:
            if self.raw_value is not None:
                prefix += f"{self.key}={self.raw_value!r}: "
            else:
                prefix += f"{self.key}: "
        return prefix + self.message


class SourceOpenError(EnvloadError):
    """The .env source could not be opened."""

    def __init__(self, filename: str, reason: str = "") -> None:
        message = "could not open file"
        if reason:
            message += f": {reason}"
        super().__init__(message, filename=filename)


class SourceReadError(EnvloadError):
    """Reading from an already-open source failed."""


class MalformedLineError(EnvloadError):
    """A non-blank, non-comment line has no ``=`` separator."""

    def __init__(self, line_number: int, line: str) -> None:
        super().__init__(
            f"{line!r} key defined without \"=\" separator or value",
            line_number=line_number,
            line=line,
        )


class EmptyKeyError(EnvloadError):
    """A line's key is empty after trimming (e.g. ``=VALUE``)."""

    def __init__(self, line_number: int, line: str) -> None:
        super().__init__(
            f"{line!r} value defined without key",
            line_number=line_number,
            line=line,
        )


class EscapeSequenceError(EnvloadError):
    """Base class for errors decoding a double-quoted value."""


class TrailingBackslashError(EscapeSequenceError):
    """A double-quoted value ends with an incomplete ``\\`` escape."""

    def __init__(self) -> None:
        super().__init__('string ends with an incomplete escape sequence "\\" (trailing backslash)')


class InvalidEscapeSequenceError(EscapeSequenceError):
    """An unrecognized character follows a backslash."""

    def __init__(self, char: str, position: int) -> None:
        sequence = "\\" + char
        super().__init__(f"invalid escape sequence {sequence!r} at position {position}")
        self.char = char
        self.position = position


class TooManyArgumentsError(EnvloadError, TypeError):
    """More than one override flag was passed to :func:`envload.load`."""

    def __init__(self, count: int) -> None:
        super().__init__(f"too many arguments in call to load: expected at most 1 override flag, got {count}")
        self.count = count


class EnvironmentSetError(EnvloadError):
    """The environment store rejected a ``set`` operation."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"failed to set environment variable: {reason}", key=key)
