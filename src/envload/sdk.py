# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Parse .env files and load them into an environment store (python-dotenv style)."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from envload.config import EnvloadConfig, apply_env_overrides, load_config
from envload.env_file import read_env_file, scan_lines
from envload.errors import EnvloadError, TooManyArgumentsError
from envload.resolve import resolve_values
from envload.store import EnvironmentStore
from envload.stores import OsEnvironment, get_store_class


def parse(filename: str | Path, encoding: str = "utf-8") -> dict[str, str]:
    """Read *filename* and return its fully resolved key-value pairs.

    Errors carry the file name (and line number or key, where known).  No
    partial result is returned on failure.
    """
    try:
        return resolve_values(read_env_file(filename, encoding=encoding))
    except EnvloadError as e:
        e.with_context(filename=str(filename))
        raise


def parse_stream(lines: Iterable[str], name: str = "<stream>") -> dict[str, str]:
    """Like :func:`parse`, for an open file, ``StringIO`` or any iterable of lines."""
    try:
        return resolve_values(scan_lines(lines))
    except EnvloadError as e:
        e.with_context(filename=name)
        raise


def apply_values(
    values: dict[str, str],
    environ: EnvironmentStore,
    override: bool = False,
) -> list[str]:
    """Set *values* in *environ* and return the keys that were set.

    With ``override=False`` keys already present in *environ* are left alone.
    """
    applied: list[str] = []
    for key, value in values.items():
        if not override and environ.get(key) is not None:
            continue
        environ.set(key, value)
        applied.append(key)
    return applied


def load(
    filename: str | Path,
    *override: bool,
    environ: EnvironmentStore | None = None,
    encoding: str = "utf-8",
) -> bool:
    """Parse *filename* and load the result into *environ* (default ``os.environ``).

    Parameters
    ----------
    filename : str or Path
        The .env file to read.
    *override : bool
        At most one flag.  If True, overwrite keys already present in
        *environ*; if False or omitted, only set keys that are missing.
    environ : EnvironmentStore, optional
        Where to load values.  Defaults to :class:`OsEnvironment`.  The
        process environment is global state and nothing here locks it.
    encoding : str, default "utf-8"
        Text encoding of the file.

    Returns
    -------
    bool
        True if at least one variable was set, False otherwise.

    Raises
    ------
    TooManyArgumentsError
        More than one override flag was given.  Raised before the file is opened.
    EnvironmentSetError
        The store rejected a value.
    """
    if len(override) > 1:
        raise TooManyArgumentsError(len(override))

    values = parse(filename, encoding=encoding)
    store = OsEnvironment() if environ is None else environ
    try:
        applied = apply_values(values, store, override=bool(override and override[0]))
    except EnvloadError as e:
        e.with_context(filename=str(filename))
        raise
    return bool(applied)


def _resolve_config(config: EnvloadConfig | None) -> EnvloadConfig:
    return config if config is not None else apply_env_overrides(load_config())


def dotenv_values(
    path: str | Path | None = None,
    config: EnvloadConfig | None = None,
) -> dict[str, str]:
    """Return resolved values without modifying any environment.

    With no *path*, reads every file listed in the config (``.env`` by
    default).  Files that do not exist are skipped; later files win.
    """
    cfg = _resolve_config(config)
    if path is not None:
        return parse(path, encoding=cfg.encoding)
    merged: dict[str, str] = {}
    for p in cfg.resolve_files():
        if p.is_file():
            merged.update(parse(p, encoding=cfg.encoding))
    return merged


def load_dotenv(
    path: str | Path | None = None,
    override: bool | None = None,
    environ: EnvironmentStore | None = None,
    config: EnvloadConfig | None = None,
) -> bool:
    """Load .env values into *environ* using config defaults.

    *override* and the store default to ``ENVLOAD_OVERRIDE`` /
    ``ENVLOAD_STORE``, then ``.envload.toml``, then ``False`` / ``"os"``.

    Examples
    --------
    >>> from envload import load_dotenv
    >>> load_dotenv()  # .env (or the configured files) into os.environ
    True
    >>> load_dotenv(".env.local", override=True)
    True
    """
    cfg = _resolve_config(config)
    values = dotenv_values(path, config=cfg)
    if not values:
        return False
    store = environ if environ is not None else get_store_class(cfg.store)()
    do_override = cfg.override if override is None else override
    return bool(apply_values(values, store, override=do_override))
