"""Directory listing for the picker.

Enumerates the children of one directory, applies the show-hidden and
show-symlinks toggles, and converts each child into a PathEntry. Entry
construction failures are either recorded and skipped or propagated,
depending on ``skip_errors``.
"""

import logging
import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from pathpick.core.matching import is_hidden
from pathpick.entries.models import PathEntry
from pathpick.entries.resolver import PathResolutionError, make_entry
from pathpick.selection.models import SelectionMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DirectoryListing:
    """Result of listing one directory.

    Attributes:
        directory: The directory that was listed.
        entries: Visible entries, directories first, each group by name.
        failures: Children that could not be resolved and were skipped.
    """

    directory: Path
    entries: tuple[PathEntry, ...]
    failures: tuple[PathResolutionError, ...] = ()

    def selectable(self, mode: SelectionMode) -> list[PathEntry]:
        """Get the entries selectable under a mode, in listing order."""
        return [entry for entry in self.entries if entry.is_selectable(mode)]


class DirectoryLister:
    """Lists directory children as path entries.

    Args:
        show_hidden: If True, keep names starting with "." (POSIX only).
        show_symlinks: If True, keep entries built from symbolic links.
        skip_errors: If True, record unresolvable children in
            ``failures`` and continue; otherwise raise the first failure.
    """

    def __init__(
        self,
        *,
        show_hidden: bool = False,
        show_symlinks: bool = False,
        skip_errors: bool = True,
    ) -> None:
        self._show_hidden = show_hidden
        self._show_symlinks = show_symlinks
        self._skip_errors = skip_errors

    def list(self, directory: str | os.PathLike[str]) -> DirectoryListing:
        """List the visible children of a directory.

        Args:
            directory: Directory to enumerate.

        Returns:
            DirectoryListing with sorted entries and skipped failures.

        Raises:
            PathResolutionError: If the directory itself cannot be read, or a
                child fails to resolve while ``skip_errors`` is False.
        """
        root = Path(directory)
        try:
            children = list(root.iterdir())
        except OSError as e:
            raise PathResolutionError(root, e.strerror or str(e), e.errno) from e

        entries: list[PathEntry] = []
        failures: list[PathResolutionError] = []

        for child in children:
            if not self._show_hidden and is_hidden(child):
                continue
            if not self._show_symlinks and child.is_symlink():
                continue

            try:
                entry = make_entry(child)
            except PathResolutionError as e:
                if not self._skip_errors:
                    raise
                logger.warning("Skipping unresolvable entry: %s", e)
                failures.append(e)
                continue

            entries.append(entry)

        return DirectoryListing(
            directory=root,
            entries=tuple(sort_entries(entries)),
            failures=tuple(failures),
        )


def sort_entries(entries: Iterable[PathEntry]) -> list[PathEntry]:
    """Sort entries with directories first, then by case-folded name.

    The name is the one the user sees in the listing: the link name for
    symlinks, the resolved name otherwise.
    """

    def key(entry: PathEntry) -> tuple[bool, str]:
        shown = entry.symlink_path if entry.symlink_path is not None else entry.resolved_path
        return (not entry.is_dir, shown.name.casefold())

    return sorted(entries, key=key)


def collect_defaults(paths: Sequence[str | os.PathLike[str]]) -> list[PathEntry]:
    """Build entries for user-supplied default paths.

    Paths reaching the same canonical target produce equal entries; only
    the first of those is kept, preserving the given order.

    Args:
        paths: Default paths in the order the caller supplied them.

    Returns:
        Unique entries in first-seen order.

    Raises:
        PathResolutionError: If any default path cannot be resolved.
    """
    seen: set[PathEntry] = set()
    result: list[PathEntry] = []
    for path in paths:
        entry = make_entry(path)
        if entry in seen:
            logger.debug("Dropping duplicate default path: %s", path)
            continue
        seen.add(entry)
        result.append(entry)
    return result
