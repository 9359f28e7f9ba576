"""Shared console output utilities."""

import json
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ghosttify.models import ShortcutSet, sorted_shortcuts

# Shared console instance for all CLI output
console = Console()


def print_json(data: Any) -> None:
    """Print data as formatted JSON to stdout.

    Paths and other non-serializable values are converted to strings.
    """
    print(json.dumps(data, indent=2, default=str))


def shortcut_table(title: str, shortcuts: ShortcutSet, style: Optional[str] = None) -> Table:
    """Build a Binding/Action table, sorted by action."""
    table = Table(title=title, box=None, title_justify="left", title_style=style or "bold")
    table.add_column("Binding", style="bright_cyan")
    table.add_column("Action", style="magenta")

    for action, binding in sorted_shortcuts(shortcuts):
        table.add_row(escape(binding), escape(action))

    return table


def print_shortcuts(title: str, shortcuts: ShortcutSet, style: Optional[str] = None) -> None:
    """Print a shortcut listing, or a dim note when there is nothing to show."""
    if not shortcuts:
        console.print(f"[dim]{title}: none[/dim]\n")
        return
    console.print(shortcut_table(f"{title} ({len(shortcuts)})", shortcuts, style))
    console.print()
