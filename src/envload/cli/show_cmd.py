# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envload show`` command."""

from __future__ import annotations

import json
from pathlib import Path

import click

from envload.cli import HAS_YAML, _read_values, cli, console
from envload.env_file import format_env_lines
from envload.util import powershell_escape, shell_escape

if HAS_YAML:
    import yaml


def _format_lines(pairs: dict[str, str], fmt: str) -> list[str]:
    if fmt == "dotenv":
        return format_env_lines(pairs)
    lines: list[str] = []
    for key, value in sorted(pairs.items()):
        if fmt == "unix":
            lines.append(f"export {key}={shell_escape(value)}")
        else:
            lines.append(f"$env:{key} = '{powershell_escape(value)}'")
    return lines


def _render(pairs: dict[str, str], fmt: str) -> str:
    if fmt == "json":
        return json.dumps(pairs, indent=2, sort_keys=True) + "\n"
    if fmt == "yaml":
        if not HAS_YAML:
            raise click.ClickException("PyYAML is not installed. Install with: pip install envload[yaml]")
        return yaml.safe_dump(pairs, default_flow_style=False, sort_keys=True)
    lines = _format_lines(pairs, fmt)
    return "\n".join(lines) + "\n" if lines else ""


@cli.command("show")
@click.option(
    "--format", "fmt",
    type=click.Choice(["dotenv", "unix", "win", "json", "yaml"]),
    default="dotenv",
    help="Output format: dotenv (default, KEY=value), unix (export KEY=value), win (PowerShell), json, yaml.",
)
@click.option(
    "--output", "-o",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="Output file path (default: stdout).",
)
@click.pass_context
def show(ctx: click.Context, fmt: str, output: str | None) -> None:
    """Print the resolved values of the .env files.

    The dotenv format re-quotes and re-escapes values so the output parses
    back to the same values.  Use --format unix for shell sourcing:
    eval "$(envload show --format unix)".
    """
    pairs = _read_values(ctx)
    text = _render(pairs, fmt)

    if output:
        Path(output).write_text(text, encoding=ctx.obj["encoding"])
        console.print(f"[green]Wrote {len(pairs)} variable(s) to {output}[/green]")
    else:
        click.echo(text, nl=False)
