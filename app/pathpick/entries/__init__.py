"""Path entry module.

This module provides the immutable PathEntry value, its kind
classification, and construction from raw filesystem paths.
"""

from pathpick.entries.models import EntryKind, PathEntry
from pathpick.entries.resolver import PathResolutionError, make_entry

__all__ = [
    "EntryKind",
    "PathEntry",
    "PathResolutionError",
    "make_entry",
]
