"""Show the GNOME Terminal to Ghostty mapping table."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from ghosttify.config.settings import get_mapping_path
from ghosttify.mapping.table import MappingEffect, classify_entry, load_mapping_table
from ghosttify.utils.cli import handle_cli_errors
from ghosttify.utils.output import console, print_json

_EFFECT_STYLES = {
    MappingEffect.RENAME: "green",
    MappingEffect.IDENTITY: "dim",
    MappingEffect.DROP: "red",
}


def _mapping_table(title: str, entries) -> Table:
    table = Table(title=title, box=None, title_justify="left", title_style="bold")
    table.add_column("GNOME", style="bold")
    table.add_column("Ghostty")
    table.add_column("Effect")

    for source in sorted(entries):
        target = entries[source]
        effect = classify_entry(source, target)
        style = _EFFECT_STYLES[effect]
        shown = target if effect is not MappingEffect.DROP else "(unsupported)"
        table.add_row(escape(source), escape(shown), f"[{style}]{effect.value}[/{style}]")
    return table


@handle_cli_errors("loading the mapping table")
def mappings(
    keys: bool = typer.Option(False, "--keys", "-k", help="Only show the key table"),
    actions: bool = typer.Option(False, "--actions", help="Only show the action table"),
    mapping: Optional[Path] = typer.Option(
        None, "--mapping", "-m", help="YAML mapping table to show instead of the default"
    ),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
):
    """Show how GNOME keys and actions map to Ghostty."""
    table = load_mapping_table(mapping)
    show_keys = keys or not actions
    show_actions = actions or not keys

    if json_output:
        data = {}
        if show_keys:
            data["keys"] = dict(sorted(table.keys.items()))
        if show_actions:
            data["actions"] = dict(sorted(table.actions.items()))
        print_json(data)
        return

    console.print(f"[dim]Mapping table: {escape(str(get_mapping_path(mapping)))}[/dim]\n")
    if show_keys:
        console.print(_mapping_table(f"Keys ({len(table.keys)})", table.keys))
        console.print()
    if show_actions:
        console.print(_mapping_table(f"Actions ({len(table.actions)})", table.actions))
        console.print()
