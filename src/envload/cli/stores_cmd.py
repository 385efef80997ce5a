# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envload stores`` command."""

from __future__ import annotations

from rich.table import Table

from envload.cli import _doc_link, cli, console, get_service_entries


@cli.command()
def stores() -> None:
    """List the environment stores values can be loaded into."""
    table = Table(title="Environment stores")
    table.add_column("Store", style="cyan")
    table.add_column("Description", style="white")
    table.add_column("Documentation", style="dim")
    for _entry_name, store_cls in get_service_entries():
        for short_name, display_name, doc_url in store_cls.get_service_rows():
            doc_cell = _doc_link(doc_url) if doc_url else ""
            table.add_row(short_name, display_name, doc_cell)
    console.print(table)
