"""Ordering predicates for directory entries.

Each predicate answers "does ``a`` sort before ``b``" and is a strict weak
ordering. Size and modification-time ties fall back to ascending name so the
result never depends on the order ``os.scandir`` happened to yield.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum
from functools import cmp_to_key

from ..errors import ConfigurationError
from .types import Entry

Comparator = Callable[[Entry, Entry], bool]


class SortMode(str, Enum):
    """Configurable entry orderings."""

    ALPHABETIC_ASC = "alphabetic-asc"
    ALPHABETIC_DESC = "alphabetic-desc"
    SIZE_ASC = "size-asc"
    SIZE_DESC = "size-desc"
    MOD_TIME_ASC = "mod-time-asc"
    MOD_TIME_DESC = "mod-time-desc"


DEFAULT_SORT_MODE = SortMode.ALPHABETIC_ASC


def _name_key(entry: Entry) -> tuple[str, str]:
    return entry.name.casefold(), entry.name


def alphabetic_ascending(a: Entry, b: Entry) -> bool:
    return _name_key(a) < _name_key(b)


def alphabetic_descending(a: Entry, b: Entry) -> bool:
    return _name_key(b) < _name_key(a)


def size_ascending(a: Entry, b: Entry) -> bool:
    if a.size != b.size:
        return a.size < b.size
    return alphabetic_ascending(a, b)


def size_descending(a: Entry, b: Entry) -> bool:
    if a.size != b.size:
        return a.size > b.size
    return alphabetic_ascending(a, b)


def mod_time_ascending(a: Entry, b: Entry) -> bool:
    if a.mtime_ns != b.mtime_ns:
        return a.mtime_ns < b.mtime_ns
    return alphabetic_ascending(a, b)


def mod_time_descending(a: Entry, b: Entry) -> bool:
    if a.mtime_ns != b.mtime_ns:
        return a.mtime_ns > b.mtime_ns
    return alphabetic_ascending(a, b)


_COMPARATORS: dict[SortMode, Comparator] = {
    SortMode.ALPHABETIC_ASC: alphabetic_ascending,
    SortMode.ALPHABETIC_DESC: alphabetic_descending,
    SortMode.SIZE_ASC: size_ascending,
    SortMode.SIZE_DESC: size_descending,
    SortMode.MOD_TIME_ASC: mod_time_ascending,
    SortMode.MOD_TIME_DESC: mod_time_descending,
}


def parse_sort_mode(value: SortMode | str) -> SortMode:
    """Return the ``SortMode`` for ``value`` or raise ``ConfigurationError``."""
    if isinstance(value, SortMode):
        return value
    try:
        return SortMode(str(value).strip().lower())
    except ValueError:
        raise ConfigurationError("sort mode", value) from None


def comparator_for(mode: SortMode | str) -> Comparator:
    """Return the ordering predicate configured by ``mode``."""
    return _COMPARATORS[parse_sort_mode(mode)]


def sort_entries(entries: Iterable[Entry], comparator: Comparator) -> list[Entry]:
    """Stable-sort ``entries`` with a "sorts before" predicate."""

    def compare(a: Entry, b: Entry) -> int:
        if comparator(a, b):
            return -1
        if comparator(b, a):
            return 1
        return 0

    return sorted(entries, key=cmp_to_key(compare))


__all__ = [
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
]
