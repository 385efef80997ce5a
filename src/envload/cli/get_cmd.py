# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envload get`` command."""

from __future__ import annotations

import click

from envload.cli import _read_values, cli


@cli.command()
@click.argument("key")
@click.pass_context
def get(ctx: click.Context, key: str) -> None:
    """Print a single resolved value."""
    values = _read_values(ctx)
    if key not in values:
        raise click.ClickException(f"Key '{key}' not found.")
    click.echo(values[key])
