"""Selection policy module.

This module provides the recursive selection mode union, its text
syntax, and the selectability predicate.
"""

from pathpick.selection.evaluator import is_selectable
from pathpick.selection.models import (
    DEFAULT_SELECTION_MODE,
    DirectoryMode,
    FileMode,
    MultipleMode,
    SelectionMode,
)
from pathpick.selection.parser import SelectionModeError, format_selection_mode, parse_selection_mode

__all__ = [
    "DEFAULT_SELECTION_MODE",
    "DirectoryMode",
    "FileMode",
    "MultipleMode",
    "SelectionMode",
    "SelectionModeError",
    "format_selection_mode",
    "is_selectable",
    "parse_selection_mode",
]
