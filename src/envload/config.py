# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

""".envload.toml configuration loading.

Searches upward from cwd for ``.envload.toml``; ``ENVLOAD_*`` environment
variables take precedence over the file.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from envload.util import parse_bool

CONFIG_FILENAME = ".envload.toml"


@dataclass
class EnvloadConfig:
    """Resolved configuration for the current invocation."""

    files: list[str] = field(default_factory=lambda: [".env"])
    override: bool = False
    encoding: str = "utf-8"
    store: str = "os"
    config_path: Path | None = None

    def resolve_files(self) -> list[Path]:
        """Return :attr:`files` as paths, relative ones taken from the config file's directory."""
        base = self.config_path.parent if self.config_path is not None else None
        out: list[Path] = []
        for name in self.files:
            p = Path(name).expanduser()
            if base is not None and not p.is_absolute():
                p = base / p
            out.append(p)
        return out


def find_config_file(start: Path | None = None) -> Path | None:
    """Walk upward from *start* (default cwd) looking for ``.envload.toml``."""
    cur = (start or Path.cwd()).resolve()
    while True:
        candidate = cur / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if cur.parent == cur:
            return None
        cur = cur.parent


def _as_file_list(value: Any) -> list[str]:
    if isinstance(value, str):
        return [value]
    return [str(v) for v in value]


def load_config(path: Path | None = None) -> EnvloadConfig:
    """Load and return config.  Returns defaults if no file found."""
    if path is None:
        path = find_config_file()
    if path is None:
        return EnvloadConfig()

    raw: dict[str, Any] = tomllib.loads(path.read_text())
    section = raw.get("envload", {})

    return EnvloadConfig(
        files=_as_file_list(section.get("files", [".env"])),
        override=bool(section.get("override", False)),
        encoding=section.get("encoding", "utf-8"),
        store=section.get("store", "os"),
        config_path=path,
    )


def apply_env_overrides(cfg: EnvloadConfig, environ: dict[str, str] | None = None) -> EnvloadConfig:
    """Overlay ``ENVLOAD_FILE``, ``ENVLOAD_OVERRIDE`` and ``ENVLOAD_STORE`` onto *cfg*."""
    env = os.environ if environ is None else environ
    files = env.get("ENVLOAD_FILE")
    if files:
        cfg.files = [f.strip() for f in files.split(",") if f.strip()]
        # Paths from the environment are relative to cwd, not the config file.
        cfg.config_path = None
    override = env.get("ENVLOAD_OVERRIDE")
    if override is not None:
        cfg.override = parse_bool(override)
    store = env.get("ENVLOAD_STORE")
    if store:
        cfg.store = store
    return cfg
