# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envload list`` command."""

from __future__ import annotations

import click
from rich.table import Table

from envload.cli import _files, _read_values, cli, console, mask


@cli.command("list")
@click.option("--reveal", is_flag=True, help="Show values instead of masking them.")
@click.pass_context
def list_keys(ctx: click.Context, reveal: bool) -> None:
    """List resolved keys with masked values."""
    values = _read_values(ctx)
    if not values:
        console.print("[yellow]No variables found.[/yellow]")
        return
    names = ", ".join(str(p) for p in _files(ctx))
    table = Table(title=f"Variables ({names})")
    table.add_column("Key", style="cyan")
    table.add_column("Value" if reveal else "Value (masked)", style="dim")
    for key in sorted(values):
        value = values[key]
        if not value:
            shown = "(empty)"
        else:
            shown = value if reveal else mask(value)
        table.add_row(key, shown)
    console.print(table)
