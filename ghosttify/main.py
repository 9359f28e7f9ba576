#!/usr/bin/env python3
"""
Main CLI entry point for ghosttify
"""

from pathlib import Path
from typing import Optional

import typer

from ghosttify import __version__
from ghosttify.commands.convert import convert
from ghosttify.commands.info import info
from ghosttify.commands.mappings import mappings
from ghosttify.config.settings import get_env_var
from ghosttify.utils.logging import setup_logging


def version():
    """Show ghosttify version"""
    typer.echo(f"ghosttify version {__version__}")


def main(
    ctx: typer.Context,
    apply: bool = typer.Option(
        False, "--apply", "-a", help="Write the changes (default: preview only)"
    ),
    avoid_conflict: bool = typer.Option(
        False,
        "--avoid-conflict",
        "-c",
        help="Skip shortcuts whose action or keys are already bound in Ghostty",
    ),
    show_gnome: bool = typer.Option(
        False, "--show-gnome", "-g", help="Show the translated GNOME Terminal shortcuts"
    ),
    show_ghostty: bool = typer.Option(
        False, "--show-ghostty", "-G", help="Show the Ghostty shortcuts currently in effect"
    ),
    show_files: bool = typer.Option(
        False, "--show-files", help="Show the Ghostty config files in load order"
    ),
    show_untranslated: bool = typer.Option(
        False, "--show-untranslated", help="Show GNOME shortcuts with no Ghostty equivalent"
    ),
    config_dir: Optional[Path] = typer.Option(
        None,
        "--config-dir",
        "-d",
        envvar="GHOSTTIFY_CONFIG_DIR",
        help="Ghostty configuration directory",
    ),
    mapping: Optional[Path] = typer.Option(
        None,
        "--mapping",
        "-m",
        envvar="GHOSTTIFY_MAPPING_FILE",
        help="YAML mapping table to use instead of the bundled one",
    ),
    dump_file: Optional[Path] = typer.Option(
        None, "--dump-file", help="Read a saved `dconf dump /org/gnome/terminal/` instead"
    ),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
):
    """
    ghosttify - carry GNOME Terminal shortcuts over to Ghostty

    Reads GNOME Terminal's shortcuts from dconf, translates them to Ghostty
    keybinds and adds them to a separate `gnome-shortcuts` file included from
    your Ghostty config. Without --apply nothing is written.

    [bold]Examples:[/bold]

    Preview the result:
        [cyan]ghosttify --show-gnome[/cyan]

    Write it, keeping your existing Ghostty bindings:
        [cyan]ghosttify --apply --avoid-conflict[/cyan]
    """
    if verbose and quiet:
        typer.echo("Error: --verbose and --quiet are mutually exclusive", err=True)
        raise typer.Exit(1)

    setup_logging(
        verbose=verbose,
        quiet=quiet,
        level=get_env_var("GHOSTTIFY_LOG_LEVEL", validate=False),
    )

    if ctx.invoked_subcommand is not None:
        return

    convert(
        apply=apply,
        avoid_conflict=avoid_conflict,
        show_gnome=show_gnome,
        show_ghostty=show_ghostty,
        show_files=show_files,
        show_untranslated=show_untranslated,
        config_dir=config_dir,
        mapping=mapping,
        dump_file=dump_file,
        json_output=json_output,
    )


def create_app() -> typer.Typer:
    """Create and configure the main CLI application"""
    app = typer.Typer(rich_markup_mode="rich", add_completion=False)
    app.callback(invoke_without_command=True)(main)

    app.command()(mappings)
    app.command()(info)
    app.command()(version)

    return app


# Create the app instance
app = create_app()


def run():
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    run()
