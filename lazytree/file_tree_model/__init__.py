"""Filesystem-side model: entries, ordering, listing, and visibility.

Nothing here knows about nodes or rendering; the branch assembler in
``lazytree.tree_model`` consumes these helpers.
"""

from __future__ import annotations

from .fs import Scanner, Visibility, list_directory, scan_directory
from .sorting import (
    DEFAULT_SORT_MODE,
    Comparator,
    SortMode,
    alphabetic_ascending,
    alphabetic_descending,
    comparator_for,
    mod_time_ascending,
    mod_time_descending,
    parse_sort_mode,
    size_ascending,
    size_descending,
    sort_entries,
)
from .types import DirectoryListing, Entry
from .visibility import (
    GitIgnoreMatcher,
    VisibilityFilter,
    build_visibility_filter,
    clear_ignore_matcher_cache,
    get_ignore_matcher,
)

__all__ = [
    "Entry",
    "DirectoryListing",
    "Scanner",
    "Visibility",
    "scan_directory",
    "list_directory",
    "Comparator",
    "SortMode",
    "DEFAULT_SORT_MODE",
    "alphabetic_ascending",
    "alphabetic_descending",
    "size_ascending",
    "size_descending",
    "mod_time_ascending",
    "mod_time_descending",
    "parse_sort_mode",
    "comparator_for",
    "sort_entries",
    "GitIgnoreMatcher",
    "VisibilityFilter",
    "build_visibility_filter",
    "clear_ignore_matcher_cache",
    "get_ignore_matcher",
]
