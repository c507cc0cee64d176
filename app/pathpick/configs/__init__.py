"""Picker configuration module.

This module provides the PickerConfig model with its documented
default constants, and TOML load/save functions.
"""

from pathpick.configs.picker import (
    DEFAULT_DIVIDER,
    DEFAULT_HELP_MESSAGE,
    DEFAULT_KEEP_FILTER,
    DEFAULT_PAGE_SIZE,
    DEFAULT_SELECT_MULTIPLE,
    DEFAULT_SELECTION_MODE_TEXT,
    DEFAULT_SHOW_HIDDEN,
    DEFAULT_SHOW_SYMLINKS,
    DEFAULT_VIM_MODE,
    PickerConfig,
    PickerConfigError,
    PickerConfigNotFoundError,
    PickerConfigParseError,
    load_or_default_config,
    load_picker_config,
    save_picker_config,
)

__all__ = [
    "DEFAULT_DIVIDER",
    "DEFAULT_HELP_MESSAGE",
    "DEFAULT_KEEP_FILTER",
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_SELECTION_MODE_TEXT",
    "DEFAULT_SELECT_MULTIPLE",
    "DEFAULT_SHOW_HIDDEN",
    "DEFAULT_SHOW_SYMLINKS",
    "DEFAULT_VIM_MODE",
    "PickerConfig",
    "PickerConfigError",
    "PickerConfigNotFoundError",
    "PickerConfigParseError",
    "load_or_default_config",
    "load_picker_config",
    "save_picker_config",
]
