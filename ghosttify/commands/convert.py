"""The default ghosttify command: convert and merge GNOME Terminal shortcuts."""

from pathlib import Path
from typing import Optional

from rich.markup import escape

from ghosttify.config.settings import get_ghostty_config_dir
from ghosttify.mapping.table import load_mapping_table
from ghosttify.pipeline import Pipeline, PipelineResult
from ghosttify.utils.cli import handle_cli_errors
from ghosttify.utils.output import console, print_json, print_shortcuts


@handle_cli_errors("converting shortcuts")
def convert(
    apply: bool = False,
    avoid_conflict: bool = False,
    show_gnome: bool = False,
    show_ghostty: bool = False,
    show_files: bool = False,
    show_untranslated: bool = False,
    config_dir: Optional[Path] = None,
    mapping: Optional[Path] = None,
    dump_file: Optional[Path] = None,
    json_output: bool = False,
) -> PipelineResult:
    """Run the pipeline and report what happened."""
    pipeline = Pipeline(
        config_dir=get_ghostty_config_dir(config_dir),
        table=load_mapping_table(mapping),
        dump_file=dump_file,
    )
    result = pipeline.run(apply=apply, avoid_conflict=avoid_conflict)

    if json_output:
        print_json(result.to_dict())
        return result

    if show_files:
        _show_files(result)
    if show_gnome:
        print_shortcuts("GNOME Terminal shortcuts (translated)", result.translation.shortcuts)
    if show_untranslated:
        _show_untranslated(result)
    if show_ghostty:
        print_shortcuts("Ghostty shortcuts in effect", result.effective)

    _show_summary(result)
    return result


def _show_files(result: PipelineResult) -> None:
    if not result.tree.nodes:
        console.print(f"[yellow]No Ghostty config at {escape(str(result.tree.root))}[/yellow]\n")
        return

    console.print("[bold]Ghostty config files[/bold] (in load order)")
    for index, node in enumerate(result.tree.nodes, 1):
        note = "" if node.readable else " [red](unreadable)[/red]"
        console.print(f"  {index}. {escape(str(node.path))}{note}")
    console.print()


def _show_untranslated(result: PipelineResult) -> None:
    untranslated = result.translation.untranslated
    if not untranslated:
        console.print("[dim]Every GNOME Terminal shortcut has a Ghostty equivalent[/dim]\n")
        return

    console.print(f"[bold]Without a Ghostty equivalent ({len(untranslated)})[/bold]")
    for action in untranslated:
        console.print(f"  {escape(action)} [dim]= {escape(result.source[action])}[/dim]")
    console.print()


def _show_summary(result: PipelineResult) -> None:
    merge = result.merge
    override = escape(str(merge.override_path))

    if result.applied:
        if merge.include_added:
            console.print(f"[green]Included {override} from the Ghostty config[/green]")
        print_shortcuts(f"Written to {override}", merge.written, "bold green")
    else:
        if merge.include_added:
            console.print(f"[cyan]Would include {override} from the Ghostty config[/cyan]")
        print_shortcuts("Would write", merge.written, "bold cyan")

    if merge.skipped:
        print_shortcuts("Skipped (conflicts with existing bindings)", merge.skipped, "bold yellow")
    if merge.unchanged:
        console.print(f"[dim]{len(merge.unchanged)} shortcut(s) already present in {override}[/dim]")

    if not result.applied and merge.written:
        console.print("\nRun with [bold]--apply[/bold] to write these changes.")
