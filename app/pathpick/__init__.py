"""pathpick - selection policies and path entries for filesystem pickers."""

from pathpick.core.matching import default_filter, default_formatter, is_hidden
from pathpick.entries.models import EntryKind, PathEntry
from pathpick.entries.resolver import PathResolutionError, make_entry
from pathpick.selection.evaluator import is_selectable
from pathpick.selection.models import DirectoryMode, FileMode, MultipleMode, SelectionMode

__version__ = "0.1.0"

__all__ = [
    "DirectoryMode",
    "EntryKind",
    "FileMode",
    "MultipleMode",
    "PathEntry",
    "PathResolutionError",
    "SelectionMode",
    "__version__",
    "default_filter",
    "default_formatter",
    "is_hidden",
    "is_selectable",
    "make_entry",
]
