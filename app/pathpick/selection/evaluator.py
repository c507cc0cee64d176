"""Selectability evaluation.

Combines a selection mode with a path entry into a yes/no answer.
The evaluation is pure: it reads only the entry's cached kind and
path, never the filesystem.
"""

from typing import TYPE_CHECKING

from pathpick.selection.models import DirectoryMode, FileMode, MultipleMode, SelectionMode

if TYPE_CHECKING:
    from pathpick.entries.models import PathEntry


def is_selectable(entry: "PathEntry", mode: SelectionMode) -> bool:
    """Check whether an entry may be selected under the given mode.

    Args:
        entry: The path entry to test.
        mode: Selection mode describing acceptable targets.

    Returns:
        True if the entry is acceptable, False otherwise. Entries that are
        neither directories nor regular files are never selectable.
    """
    match mode:
        case DirectoryMode():
            return entry.is_dir
        case FileMode(extension=None):
            return entry.is_file
        case FileMode(extension=extension):
            if not entry.is_file or entry.extension is None:
                return False
            return _ascii_casefold(entry.extension) == _ascii_casefold(extension)
        case MultipleMode(modes=modes):
            return any(is_selectable(entry, submode) for submode in modes)
        case _:
            return False


def _ascii_casefold(text: str) -> str:
    # str.lower() also folds non-ASCII letters; only A-Z are folded here
    return text.translate(_ASCII_LOWER)


_ASCII_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")
