"""Picker configuration commands.

Provides commands to show the effective picker configuration and to
write a default configuration file.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from pathpick.cli.types import load_config_or_exit
from pathpick.configs.picker import PickerConfig, PickerConfigError, save_picker_config
from pathpick.core.paths import get_picker_config_path
from pathpick.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or initialize picker configuration.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective picker configuration."""
    config = load_config_or_exit()
    config_path = get_picker_config_path()

    table = Table(
        title="Picker Configuration",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Setting", style="bold")
    table.add_column("Value")

    for key, value in config.model_dump(mode="json").items():
        shown = "-" if value in (None, []) else str(value)
        table.add_row(key, escape(shown))

    console.print(table)
    source = config_path if config_path.exists() else "built-in defaults"
    console.print(f"\n[dim]Source: {source}[/dim]")


@app.command()
def init(
    path: Annotated[
        Path | None,
        typer.Option("--path", "-p", help="Write to this file instead of the default location."),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a picker config file with default settings."""
    config_path = path or get_picker_config_path()

    if config_path.exists() and not force:
        print_info(f"Config already exists: {config_path} (use --force to overwrite)")
        raise typer.Exit(code=0)

    try:
        saved = save_picker_config(PickerConfig(), config_path)
    except PickerConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Picker config written to {saved}")
