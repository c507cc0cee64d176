"""Selection policy models.

A selection mode describes which filesystem entries a picker user may
choose. Modes form a small recursive union:

- FileMode: regular files, optionally restricted to one extension.
- DirectoryMode: directories.
- MultipleMode: anything accepted by at least one of its member modes.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FileMode:
    """Accepts regular files.

    Attributes:
        extension: Required extension, compared ASCII case-insensitively.
            Leading dots are stripped, so FileMode(".rs") and FileMode("rs")
            are the same mode. None accepts any regular file.
    """

    extension: str | None = None

    def __post_init__(self) -> None:
        """Normalize the extension by stripping leading dots."""
        if self.extension is not None:
            stripped = self.extension.lstrip(".")
            if not stripped:
                msg = f"Invalid file extension: {self.extension!r}"
                raise ValueError(msg)
            object.__setattr__(self, "extension", stripped)


@dataclass(frozen=True, slots=True)
class DirectoryMode:
    """Accepts directories."""


@dataclass(frozen=True, slots=True)
class MultipleMode:
    """Accepts entries matched by any member mode.

    An empty MultipleMode matches nothing.

    Attributes:
        modes: Member modes; may themselves be MultipleMode.
    """

    modes: tuple["SelectionMode", ...] = ()

    def __post_init__(self) -> None:
        """Store members as a tuple so the mode stays hashable."""
        object.__setattr__(self, "modes", tuple(self.modes))


SelectionMode = FileMode | DirectoryMode | MultipleMode

DEFAULT_SELECTION_MODE: SelectionMode = DirectoryMode()
