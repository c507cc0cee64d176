"""Picker configuration and settings.

This module provides the configuration model and I/O functions for the
path picker's named toggles and defaults.

Configuration is stored in ~/.config/pathpick/picker.toml
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from pathpick.core.paths import get_picker_config_path
from pathpick.selection.models import SelectionMode
from pathpick.selection.parser import (
    SelectionModeError,
    format_selection_mode,
    parse_selection_mode,
)

logger = logging.getLogger(__name__)

DEFAULT_SELECTION_MODE_TEXT = "dir"
DEFAULT_SHOW_HIDDEN = False
DEFAULT_SHOW_SYMLINKS = False
DEFAULT_SELECT_MULTIPLE = False
DEFAULT_KEEP_FILTER = True
DEFAULT_PAGE_SIZE = 7
DEFAULT_VIM_MODE = False
DEFAULT_DIVIDER = "-----"
DEFAULT_HELP_MESSAGE = (
    "↑↓ to move, space to select one, "
    "→ to navigate to path, ← to navigate up, "
    "shift+→ to select all, shift+← to clear, "
    "type to filter"
)


class PickerConfig(BaseModel):
    """Configuration for a path picker session.

    Attributes:
        start_path: Directory the picker opens in (None = current directory).
        default_paths: Paths pre-selected when the picker opens.
        selection_mode: Selection mode text, e.g. "dir" or "file:rs,dir".
        show_hidden: Whether hidden (dot) files are listed.
        show_symlinks: Whether entries reached through symlinks are listed.
        select_multiple: Whether more than one path may be selected.
        keep_filter: Whether typed filter text survives a selection.
        page_size: Number of entries shown per page.
        vim_mode: Whether hjkl navigation is enabled.
        divider: Divider shown after current-directory entries.
        help_message: Help text shown under the prompt (None = hidden).
    """

    model_config = ConfigDict(extra="forbid")

    start_path: Annotated[
        Path | None,
        Field(description="Starting directory"),
    ] = None
    default_paths: Annotated[
        list[Path],
        Field(default_factory=list, description="Pre-selected paths"),
    ]
    selection_mode: Annotated[
        str,
        Field(description="Selection mode text"),
    ] = DEFAULT_SELECTION_MODE_TEXT
    show_hidden: bool = DEFAULT_SHOW_HIDDEN
    show_symlinks: bool = DEFAULT_SHOW_SYMLINKS
    select_multiple: bool = DEFAULT_SELECT_MULTIPLE
    keep_filter: bool = DEFAULT_KEEP_FILTER
    page_size: Annotated[
        int,
        Field(ge=1, description="Entries per page"),
    ] = DEFAULT_PAGE_SIZE
    vim_mode: bool = DEFAULT_VIM_MODE
    divider: str = DEFAULT_DIVIDER
    help_message: str | None = DEFAULT_HELP_MESSAGE

    @field_validator("selection_mode")
    @classmethod
    def validate_selection_mode(cls, v: str) -> str:
        """Normalize selection mode text through the parser."""
        try:
            return format_selection_mode(parse_selection_mode(v))
        except SelectionModeError as e:
            raise ValueError(str(e)) from e

    @field_validator("help_message")
    @classmethod
    def validate_help_message(cls, v: str | None) -> str | None:
        """Treat an empty help message as no help message."""
        return v or None

    @property
    def mode(self) -> SelectionMode:
        """Get the parsed selection mode."""
        return parse_selection_mode(self.selection_mode)


class PickerConfigError(Exception):
    """Base exception for picker configuration errors."""


class PickerConfigNotFoundError(PickerConfigError):
    """Raised when the picker config file is not found."""


class PickerConfigParseError(PickerConfigError):
    """Raised when the picker config file cannot be parsed."""


def load_picker_config(path: Path | None = None) -> PickerConfig:
    """Load picker configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated PickerConfig object.

    Raises:
        PickerConfigNotFoundError: If the config file doesn't exist.
        PickerConfigParseError: If the TOML syntax is invalid.
        PickerConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_picker_config_path()

    if not config_path.exists():
        raise PickerConfigNotFoundError(f"Picker config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise PickerConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise PickerConfigError(f"Failed to read picker config: {e}") from e

    try:
        return PickerConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise PickerConfigError(f"Invalid picker config content: {e}") from e


def load_or_default_config(path: Path | None = None) -> PickerConfig:
    """Load picker configuration, falling back to defaults if absent.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        The stored PickerConfig, or a default one when no file exists.

    Raises:
        PickerConfigError: If a file exists but is invalid.
    """
    try:
        return load_picker_config(path)
    except PickerConfigNotFoundError:
        logger.debug("No picker config found, using defaults")
        return PickerConfig()


def save_picker_config(config: PickerConfig, path: Path | None = None) -> Path:
    """Save picker configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The PickerConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        PickerConfigError: If the file cannot be written.
    """
    config_path = path or get_picker_config_path()
    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise PickerConfigError(f"Failed to write picker config: {e}") from e

    return config_path


def _config_to_dict(config: PickerConfig) -> dict[str, object]:
    """Convert PickerConfig to a dictionary for TOML serialization.

    Only includes values that differ from the defaults; TOML has no null,
    so an unset help message is written as an empty string.

    Args:
        config: The PickerConfig to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    dumped = config.model_dump(mode="json", exclude_defaults=True)
    result: dict[str, object] = {"selection_mode": config.selection_mode}
    for key, value in dumped.items():
        if value is None:
            if key == "help_message":
                result[key] = ""
            continue
        result[key] = value
    return result
