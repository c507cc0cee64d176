"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pathpick.core.theme import get_theme
from pathpick.entries.models import EntryKind, PathEntry


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def create_entry_table(title: str) -> Table:
    """Create a pre-configured table for displaying path entries.

    Args:
        title: Table title.

    Returns:
        Rich Table with selection marker, entry and kind columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    # Selection marker column: icon only, no header text
    table.add_column("", width=2, justify="center")
    table.add_column("Entry", overflow="fold")
    table.add_column("Kind", style="muted", width=10)
    return table


def format_entry_row(entry: PathEntry, selectable: bool) -> tuple[str, str, str]:
    """Format a path entry as a table row with proper styling.

    Selectable entries get a filled circle, others an empty one. The
    entry column shows the entry's display form.

    Args:
        entry: The entry to format.
        selectable: Whether the entry passes the active selection mode.

    Returns:
        Tuple of (icon, display, kind) with Rich markup.
    """
    if selectable:
        icon = "[selectable]●[/]"  # Filled circle
    else:
        icon = "[unselectable]○[/]"  # Empty circle

    if entry.is_symlink:
        style = "entry.symlink"
    elif entry.kind == EntryKind.DIRECTORY:
        style = "entry.directory"
    elif entry.kind == EntryKind.FILE:
        style = "entry.file"
    else:
        style = "entry.other"

    return (icon, f"[{style}]{escape(str(entry))}[/]", entry.kind.value)


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
