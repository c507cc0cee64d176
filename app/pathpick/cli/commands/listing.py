"""Directory listing command.

Lists a directory the way the picker would present it: hidden and
symlinked entries follow the visibility toggles, typed filter text
narrows by name, and each entry is marked selectable or not.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from pathpick.cli.types import OutputFormat, load_config_or_exit, resolve_mode
from pathpick.core.matching import default_filter
from pathpick.entries.models import PathEntry
from pathpick.entries.resolver import PathResolutionError
from pathpick.lister.directory import DirectoryLister
from pathpick.selection.models import SelectionMode
from pathpick.utils.formatting import (
    console,
    create_entry_table,
    format_entry_row,
    print_error,
    print_info,
    print_warning,
)


def ls(
    directory: Annotated[
        Path | None,
        typer.Argument(help="Directory to list (default: configured start path or cwd)."),
    ] = None,
    mode: Annotated[
        str | None,
        typer.Option("--mode", "-m", help="Selection mode, e.g. 'dir' or 'file:rs,dir'."),
    ] = None,
    hidden: Annotated[
        bool | None,
        typer.Option("--hidden/--no-hidden", help="Show hidden (dot) files."),
    ] = None,
    symlinks: Annotated[
        bool | None,
        typer.Option("--symlinks/--no-symlinks", help="Show entries reached through symlinks."),
    ] = None,
    filter_text: Annotated[
        str | None,
        typer.Option("--filter", "-F", help="Keep entries whose name contains this text."),
    ] = None,
    selectable_only: Annotated[
        bool,
        typer.Option("--selectable-only", "-s", help="Only show selectable entries."),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """List a directory as picker entries."""
    config = load_config_or_exit()
    selection_mode = resolve_mode(mode, config)
    target = directory or config.start_path or Path.cwd()

    lister = DirectoryLister(
        show_hidden=config.show_hidden if hidden is None else hidden,
        show_symlinks=config.show_symlinks if symlinks is None else symlinks,
    )
    try:
        listing = lister.list(target)
    except PathResolutionError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    for failure in listing.failures:
        print_warning(str(failure))

    entries = list(listing.entries)
    if filter_text:
        entries = [entry for entry in entries if default_filter(filter_text, entry)]
    if selectable_only:
        entries = [entry for entry in entries if entry.is_selectable(selection_mode)]

    if output_format == OutputFormat.JSON:
        _print_json(entries, selection_mode)
        return

    if not entries:
        print_info(f"No entries to show in {target}.")
        return

    _print_table(target, entries, selection_mode)


def _print_table(directory: Path, entries: list[PathEntry], mode: SelectionMode) -> None:
    """Display entries as a Rich table with a selectability summary."""
    table = create_entry_table(title=str(directory))
    selectable_count = 0
    for entry in entries:
        selectable = entry.is_selectable(mode)
        selectable_count += selectable
        table.add_row(*format_entry_row(entry, selectable))

    console.print(table)
    console.print(f"\n[dim]{len(entries)} entries ({selectable_count} selectable)[/dim]")


def _print_json(entries: list[PathEntry], mode: SelectionMode) -> None:
    """Display entries as JSON."""
    data = [
        {
            "path": str(entry.resolved_path),
            "kind": entry.kind.value,
            "symlink": str(entry.symlink_path) if entry.symlink_path is not None else None,
            "selectable": entry.is_selectable(mode),
            "display": str(entry),
        }
        for entry in entries
    ]
    console.print_json(json.dumps(data))
