# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""envload -- parse .env files (quotes, escapes, ``$VAR`` expansion) and load them into the environment."""

from envload.errors import (
    EmptyKeyError,
    EnvironmentSetError,
    EnvloadError,
    EscapeSequenceError,
    InvalidEscapeSequenceError,
    MalformedLineError,
    SourceOpenError,
    SourceReadError,
    TooManyArgumentsError,
    TrailingBackslashError,
)
from envload.resolve import QuoteStyle
from envload.sdk import apply_values, dotenv_values, load, load_dotenv, parse, parse_stream
from envload.store import EnvironmentStore
from envload.stores import MemoryEnvironment, OsEnvironment

__all__ = [
    "__version__",
    "parse",
    "parse_stream",
    "load",
    "apply_values",
    "load_dotenv",
    "dotenv_values",
    "QuoteStyle",
    "EnvironmentStore",
    "MemoryEnvironment",
    "OsEnvironment",
    "EnvloadError",
    "SourceOpenError",
    "SourceReadError",
    "MalformedLineError",
    "EmptyKeyError",
    "EscapeSequenceError",
    "TrailingBackslashError",
    "InvalidEscapeSequenceError",
    "TooManyArgumentsError",
    "EnvironmentSetError",
]
__version__ = "0.1.0"
