"""Core behaviors shared by pickers: matching, paths, and theming."""

from pathpick.core.matching import ANSWER_SEPARATOR, default_filter, default_formatter, is_hidden

__all__ = [
    "ANSWER_SEPARATOR",
    "default_filter",
    "default_formatter",
    "is_hidden",
]
