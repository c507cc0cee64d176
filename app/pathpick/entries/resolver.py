"""Path entry construction.

Turns a raw path into a PathEntry, resolving symbolic link chains to
their canonical target. Any metadata or resolution failure is raised as
PathResolutionError; nothing is retried or silently skipped here.
"""

import errno
import logging
import os
import stat
from pathlib import Path

from pathpick.entries.models import EntryKind, PathEntry

logger = logging.getLogger(__name__)


class PathResolutionError(Exception):
    """Raised when a path's metadata or symlink chain cannot be resolved.

    Attributes:
        path: The path that failed to resolve.
        errno: OS error number when known (ENOENT, EACCES, ELOOP, ...).
    """

    def __init__(self, path: str | os.PathLike[str], reason: str, errno: int | None = None):
        self.path = Path(path)
        self.errno = errno
        super().__init__(f"Cannot resolve {self.path}: {reason}")


def make_entry(path: str | os.PathLike[str]) -> PathEntry:
    """Build a PathEntry for a filesystem path.

    Symbolic links are followed to their final target: the entry stores
    the canonical target as ``resolved_path`` and the link itself as
    ``symlink_path``. Other paths are stored unchanged.

    Args:
        path: Path to inspect.

    Returns:
        Immutable PathEntry for the path.

    Raises:
        PathResolutionError: If the path or its link target is missing,
            unreadable, or part of a symlink cycle.
    """
    if os.fspath(path) == "":
        raise PathResolutionError(path, "empty path", errno.ENOENT)
    source = Path(path)

    try:
        source_stat = os.lstat(source)
    except OSError as e:
        raise PathResolutionError(source, e.strerror or str(e), e.errno) from e

    if not stat.S_ISLNK(source_stat.st_mode):
        return PathEntry(resolved_path=source, kind=_classify(source_stat.st_mode))

    try:
        target = source.resolve(strict=True)
        target_stat = os.stat(target)
    except RuntimeError as e:
        # Python < 3.13 reports symlink loops as RuntimeError
        raise PathResolutionError(source, "symlink loop", errno.ELOOP) from e
    except OSError as e:
        raise PathResolutionError(source, e.strerror or str(e), e.errno) from e

    logger.debug("Resolved symlink %s -> %s", source, target)
    return PathEntry(resolved_path=target, kind=_classify(target_stat.st_mode), symlink_path=source)


def _classify(mode: int) -> EntryKind:
    """Map a stat mode to an EntryKind."""
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryKind.FILE
    return EntryKind.OTHER
