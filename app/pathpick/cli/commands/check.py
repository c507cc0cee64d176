"""Selectability check command.

Resolves each given path into an entry and reports whether it may be
selected under the active selection mode.
"""

from pathlib import Path
from typing import Annotated

import typer

from pathpick.cli.types import load_config_or_exit, resolve_mode
from pathpick.entries.resolver import PathResolutionError, make_entry
from pathpick.utils.formatting import (
    console,
    create_entry_table,
    format_entry_row,
    print_error,
    print_success,
    print_warning,
)


def check(
    paths: Annotated[
        list[Path],
        typer.Argument(help="Paths to check."),
    ],
    mode: Annotated[
        str | None,
        typer.Option("--mode", "-m", help="Selection mode, e.g. 'dir' or 'file:rs,dir'."),
    ] = None,
) -> None:
    """Check whether paths are selectable.

    Exits with code 1 if any path cannot be resolved or is not selectable.
    """
    config = load_config_or_exit()
    selection_mode = resolve_mode(mode, config)

    table = create_entry_table(title="Selectability")
    failed = 0
    rejected = 0

    for path in paths:
        try:
            entry = make_entry(path)
        except PathResolutionError as e:
            print_error(str(e))
            failed += 1
            continue

        selectable = entry.is_selectable(selection_mode)
        if not selectable:
            rejected += 1
        table.add_row(*format_entry_row(entry, selectable))

    if table.row_count:
        console.print(table)

    if failed or rejected:
        print_warning(f"{rejected} not selectable, {failed} unresolvable")
        raise typer.Exit(code=1)

    print_success(f"All {len(paths)} path(s) selectable.")
