"""Non-interactive pick command.

Validates a selection the way the picker validates its default paths
and prints the final answer with the default formatter.
"""

from pathlib import Path
from typing import Annotated

import typer

from pathpick.cli.types import load_config_or_exit, resolve_mode
from pathpick.core.matching import default_formatter
from pathpick.entries.resolver import PathResolutionError
from pathpick.lister.directory import collect_defaults
from pathpick.utils.formatting import print_error


def pick(
    paths: Annotated[
        list[Path],
        typer.Argument(help="Paths to select, in order."),
    ],
    mode: Annotated[
        str | None,
        typer.Option("--mode", "-m", help="Selection mode, e.g. 'dir' or 'file:rs,dir'."),
    ] = None,
    multiple: Annotated[
        bool | None,
        typer.Option("--multiple/--single", help="Allow selecting more than one path."),
    ] = None,
) -> None:
    """Select paths and print the formatted answer.

    Paths that resolve to the same target are selected once. The answer
    lists resolved paths separated by ", " in the given order.
    """
    config = load_config_or_exit()
    selection_mode = resolve_mode(mode, config)
    select_multiple = config.select_multiple if multiple is None else multiple

    try:
        entries = collect_defaults(paths)
    except PathResolutionError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    rejected = [entry for entry in entries if not entry.is_selectable(selection_mode)]
    if rejected:
        for entry in rejected:
            print_error(f"Not selectable: {entry}")
        raise typer.Exit(code=1)

    if len(entries) > 1 and not select_multiple:
        print_error(f"{len(entries)} paths given but multiple selection is off (use --multiple).")
        raise typer.Exit(code=1)

    typer.echo(default_formatter(entries))
