"""Show where ghosttify reads and writes, and its environment settings."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from ghosttify.config.constants import GHOSTTY_ROOT_CONFIG, OVERRIDE_FILE_NAME
from ghosttify.config.settings import (
    get_env_info,
    get_ghostty_config_dir,
    get_mapping_path,
    validate_all_env_vars,
)
from ghosttify.utils.output import console, print_json


def info(
    config_dir: Optional[Path] = typer.Option(
        None, "--config-dir", "-d", help="Ghostty configuration directory"
    ),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
):
    """Show resolved paths and GHOSTTIFY_* environment variables."""
    ghostty_dir = get_ghostty_config_dir(config_dir)
    paths = {
        "config_dir": ghostty_dir,
        "root_config": ghostty_dir / GHOSTTY_ROOT_CONFIG,
        "override_file": ghostty_dir / OVERRIDE_FILE_NAME,
        "mapping_table": get_mapping_path(),
    }
    env = get_env_info()
    errors = validate_all_env_vars()

    if json_output:
        print_json({"paths": paths, "environment": env, "errors": errors})
        return

    table = Table(show_header=False, box=None)
    table.add_column("Item", style="dim")
    table.add_column("Path", style="bold")
    table.add_column("Exists")
    for name, path in paths.items():
        exists = "[green]yes[/green]" if Path(path).exists() else "[yellow]no[/yellow]"
        table.add_row(name.replace("_", " "), escape(str(path)), exists)
    console.print(table)
    console.print()

    env_table = Table(title="Environment", box=None, title_justify="left", title_style="bold")
    env_table.add_column("Variable", style="bold")
    env_table.add_column("Value")
    env_table.add_column("Description", style="dim")
    for name, details in env.items():
        if details["is_set"]:
            value = escape(details["value"])
        else:
            value = f"[dim]{escape(str(details['default']))} (default)[/dim]"
        env_table.add_row(name, value, details["description"])
    console.print(env_table)

    for error in errors:
        console.print(f"[red]{escape(error)}[/red]")
    if errors:
        raise typer.Exit(1)
