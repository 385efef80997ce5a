# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envload check`` command."""

from __future__ import annotations

import click
from rich.markup import escape

from envload.cli import _files, cli, console
from envload.errors import EnvloadError
from envload.sdk import parse


@cli.command()
@click.pass_context
def check(ctx: click.Context) -> None:
    """Validate the .env files, reporting the first error in each."""
    paths = _files(ctx)
    if not paths:
        console.print("[yellow]No .env files to check.[/yellow]")
        return
    failed = 0
    for path in paths:
        try:
            values = parse(path, encoding=ctx.obj["encoding"])
        except EnvloadError as e:
            failed += 1
            console.print(f"[red]FAIL[/red] {escape(str(e))}", soft_wrap=True)
            continue
        console.print(f"[green]OK[/green]   {escape(str(path))} ({len(values)} variable(s))", soft_wrap=True)
    if failed:
        ctx.exit(1)
