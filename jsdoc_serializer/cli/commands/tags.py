"""Tag grammar listing command."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from jsdoc_serializer.codegen.grammar import DEFAULT_GRAMMAR

console = Console()


@click.command("tags")
def tags_command() -> None:
    """List the documentation tags the compiler understands."""
    table = Table(title="Supported Tags")
    table.add_column("Tag", style="cyan")
    table.add_column("Aliases")
    table.add_column("Node")
    table.add_column("Description")

    for rule in DEFAULT_GRAMMAR.list_rules():
        table.add_row(
            f"@{rule['tag']}",
            ", ".join(f"@{alias}" for alias in rule["aliases"]) or "-",
            rule["kind"],
            rule["description"],
        )

    console.print(table)
