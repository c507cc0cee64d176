"""Default filter, formatter, and hidden-file predicate.

These are the behaviors a picker uses unless the caller overrides them:
narrowing the visible entries as the user types, rendering the final
answer, and deciding whether a name counts as hidden.
"""

import os
from collections.abc import Iterable
from pathlib import PurePath

PathLike = str | os.PathLike[str]

ANSWER_SEPARATOR = ", "


def _final_segment(path: PathLike) -> str:
    # A trailing ".." names no file
    name = PurePath(path).name
    return "" if name == ".." else name


def default_filter(text: str, path: PathLike) -> bool:
    """Check whether the final path segment contains the typed text.

    Only the file or directory name takes part in the match; parent
    segments are ignored. Both sides are lower-cased with str.lower(),
    no further Unicode normalization is applied.

    Args:
        text: Text typed by the user.
        path: PathEntry (matched on its resolved path) or any path-like.

    Returns:
        True if the lower-cased name contains the lower-cased text.
    """
    return text.lower() in _final_segment(path).lower()


def default_formatter(selected: Iterable[PathLike]) -> str:
    """Render selected paths as the prompt's final answer.

    Each item is shown as plain path text (the resolved path for
    entries, without symlink or directory decoration), joined by ", "
    in selection order.

    Args:
        selected: Selected entries or paths, in the order they were picked.

    Returns:
        Comma-separated path text; empty string for no selection.
    """
    return ANSWER_SEPARATOR.join(os.fspath(item) for item in selected)


def is_hidden(path: PathLike) -> bool:
    """Test whether a path names a hidden file by the leading-dot rule.

    Only POSIX-like platforms use this convention; elsewhere the
    predicate is always False. Platform hidden attributes (Windows,
    macOS Finder flags, GNOME .hidden lists) are not consulted.

    Args:
        path: Path to test.

    Returns:
        True on POSIX when the final segment starts with ".".
    """
    if os.name != "posix":
        return False
    return _final_segment(path).startswith(".")
