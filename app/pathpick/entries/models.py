"""Path entry domain models.

A PathEntry is an immutable snapshot of one filesystem path taken when a
directory is listed. Symbolic links are stored by their resolved target,
with the original link path kept only for display.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from pathpick.selection.evaluator import is_selectable
from pathpick.selection.models import SelectionMode


class EntryKind(str, Enum):
    """Kind of the filesystem object a path entry points at.

    Attributes:
        DIRECTORY: Directory.
        FILE: Regular file.
        OTHER: Anything else (device node, FIFO, socket).
    """

    DIRECTORY = "directory"
    FILE = "file"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class PathEntry:
    """Represents a filesystem path offered to the picker.

    Equality and hashing use only ``resolved_path``, so a symlink and its
    target compare equal.

    Attributes:
        resolved_path: Canonical target for symlinks, otherwise the
            original path unchanged.
        kind: Classification taken from the target's metadata.
        symlink_path: Original link path when the source was a symlink.
    """

    resolved_path: Path
    kind: EntryKind = field(compare=False)
    symlink_path: Path | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Coerce path-like values to Path."""
        object.__setattr__(self, "resolved_path", Path(self.resolved_path))
        if self.symlink_path is not None:
            object.__setattr__(self, "symlink_path", Path(self.symlink_path))

    def __str__(self) -> str:
        path = os.fspath(self.resolved_path)
        if self.symlink_path is not None:
            return f"{os.fspath(self.symlink_path)} -> {path}"
        if self.is_dir:
            return f"(dir) {path}"
        return path

    def __fspath__(self) -> str:
        return os.fspath(self.resolved_path)

    @property
    def name(self) -> str:
        """Final path segment of the resolved path."""
        return self.resolved_path.name

    @property
    def extension(self) -> str | None:
        """Extension of the final segment without the dot, if any."""
        suffix = self.resolved_path.suffix
        return suffix[1:] or None

    @property
    def is_dir(self) -> bool:
        return self.kind == EntryKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind == EntryKind.FILE

    @property
    def is_symlink(self) -> bool:
        """True if the entry was built from a symbolic link."""
        return self.symlink_path is not None

    def is_selectable(self, mode: SelectionMode) -> bool:
        """Check this entry against a selection mode."""
        return is_selectable(self, mode)
