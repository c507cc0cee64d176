"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum

import typer

from pathpick.configs.picker import PickerConfig, PickerConfigError, load_or_default_config
from pathpick.selection.models import SelectionMode
from pathpick.selection.parser import SelectionModeError, parse_selection_mode
from pathpick.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options for listing commands."""

    TABLE = "table"
    JSON = "json"


def load_config_or_exit() -> PickerConfig:
    """Load the picker config, exiting with code 1 if it is invalid.

    Returns:
        The stored PickerConfig, or defaults when no file exists.
    """
    try:
        return load_or_default_config()
    except PickerConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def resolve_mode(mode_text: str | None, config: PickerConfig) -> SelectionMode:
    """Get the selection mode from the command line or the config.

    Args:
        mode_text: Value of the --mode option, if given.
        config: Picker config supplying the default mode.

    Returns:
        Parsed SelectionMode.
    """
    if mode_text is None:
        return config.mode
    try:
        return parse_selection_mode(mode_text)
    except SelectionModeError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
