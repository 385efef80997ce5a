# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envload run`` -- run a command with the .env values in its environment."""

from __future__ import annotations

import os
import subprocess

import click
from rich.markup import escape

from envload.cli import _read_values, cli, console
from envload.errors import EnvloadError
from envload.sdk import apply_values
from envload.stores import MemoryEnvironment


@cli.command(context_settings={"ignore_unknown_options": True})
@click.option(
    "--override/--no-override", default=None,
    help="Overwrite variables already set in the environment. Default: ENVLOAD_OVERRIDE or config, else no.",
)
@click.argument("command", nargs=-1, required=True, type=click.UNPROCESSED)
@click.pass_context
def run(ctx: click.Context, override: bool | None, command: tuple[str, ...]) -> None:
    """Run COMMAND with the .env values added to its environment.

    The current process environment is copied; the child sees the merged
    result.  Use ``--`` before the command if it takes options:
    envload -f .env.test run -- pytest -x
    """
    values = _read_values(ctx)
    do_override = ctx.obj["config"].override if override is None else override

    env = MemoryEnvironment(dict(os.environ))
    try:
        applied = apply_values(values, env, override=do_override)
    except EnvloadError as e:
        raise click.ClickException(str(e))

    if ctx.obj["verbose"]:
        for key in sorted(values):
            state = "set" if key in applied else "kept existing"
            console.print(f"[dim]{escape(key)}: {state}[/dim]", soft_wrap=True)

    try:
        result = subprocess.run(list(command), env=env.data)
    except FileNotFoundError:
        raise click.ClickException(f"Command not found: {command[0]}")
    except OSError as e:
        raise click.ClickException(f"Cannot run {command[0]}: {e.strerror or e}")
    ctx.exit(result.returncode)
