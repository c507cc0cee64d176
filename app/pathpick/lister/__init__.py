"""Directory listing module.

This module enumerates directory children into path entries, applying
the hidden-file and symlink visibility toggles.
"""

from pathpick.lister.directory import (
    DirectoryLister,
    DirectoryListing,
    collect_defaults,
    sort_entries,
)

__all__ = [
    "DirectoryLister",
    "DirectoryListing",
    "collect_defaults",
    "sort_entries",
]
