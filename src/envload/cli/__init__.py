# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""envload CLI -- inspect, validate, and run commands with .env files.

The CLI is split into per-command modules under this package.  The ``cli``
click group and shared helpers (``console``, ``_read_values``, etc.) live
here so every command module can import them.
"""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.style import Style
from rich.text import Text

from envload import __version__
from envload.config import apply_env_overrides, load_config
from envload.errors import EnvloadError
from envload.sdk import parse
from envload.stores import get_service_entries
from envload.util import mask

try:
    import yaml
    HAS_YAML = True
except ImportError:
    HAS_YAML = False

console = Console(stderr=True)


def _doc_link(url: str, label: str = "Doc Link") -> Text:
    """Rich Text with an OSC 8 hyperlink for terminal clickability."""
    return Text(label, style=Style(link=url))


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _files(ctx: click.Context) -> list[Path]:
    """Return the .env files for this invocation.

    Files given with ``--file`` must exist; configured defaults that are
    missing are skipped.
    """
    if ctx.obj["files"]:
        return [Path(f) for f in ctx.obj["files"]]
    return [p for p in ctx.obj["config"].resolve_files() if p.is_file()]


def _read_values(ctx: click.Context) -> dict[str, str]:
    """Parse every file for this invocation, later files winning."""
    encoding = ctx.obj["encoding"]
    merged: dict[str, str] = {}
    for path in _files(ctx):
        try:
            values = parse(path, encoding=encoding)
        except EnvloadError as e:
            raise click.ClickException(str(e))
        if ctx.obj["verbose"]:
            console.print(f"[dim]Read {len(values)} variable(s) from {path}[/dim]", soft_wrap=True)
        merged.update(values)
    return merged


# ---------------------------------------------------------------------------
# Top-level click group
# ---------------------------------------------------------------------------

@click.group()
@click.option(
    "--file", "-f", "files", multiple=True, type=click.Path(dir_okay=False),
    help="The .env file to read (repeatable; later files win). Default: ENVLOAD_FILE or config, else .env.",
)
@click.option("--encoding", default=None, help="Text encoding of the .env files (default: utf-8).")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.version_option(__version__)
@click.pass_context
def cli(
    ctx: click.Context,
    files: tuple[str, ...],
    encoding: str | None,
    verbose: bool,
) -> None:
    """Parse .env files and load them into the environment."""
    cfg = apply_env_overrides(load_config())
    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg
    ctx.obj["files"] = list(files)
    ctx.obj["encoding"] = encoding or cfg.encoding
    ctx.obj["verbose"] = verbose


# ---------------------------------------------------------------------------
# Register all command modules (import triggers @cli.command registration)
# ---------------------------------------------------------------------------

from envload.cli import (  # noqa: E402, F401
    check_cmd,
    get_cmd,
    list_cmd,
    run_cmd,
    show_cmd,
    stores_cmd,
)
