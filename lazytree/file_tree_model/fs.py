"""Directory scanning and listing for the branch assembler."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

from .sorting import Comparator, SortMode, comparator_for, sort_entries
from .types import DirectoryListing, Entry

Scanner = Callable[[Path], list[Entry]]
Visibility = Callable[[Path], bool]


def scan_directory(directory: Path) -> list[Entry]:
    """Return every child of ``directory`` in filesystem order.

    Raises ``OSError`` when the directory cannot be opened. Children whose
    metadata cannot be read are kept with zero size/mtime.
    """
    entries: list[Entry] = []
    with os.scandir(directory) as children:
        for child in children:
            try:
                is_dir = child.is_dir()
            except OSError:
                is_dir = False

            size = 0
            mtime_ns = 0
            try:
                stat = child.stat(follow_symlinks=False)
                size = int(stat.st_size)
                mtime_ns = int(stat.st_mtime_ns)
            except OSError:
                pass

            entries.append(Entry(path=Path(child.path), is_dir=is_dir, size=size, mtime_ns=mtime_ns))
    return entries


def list_directory(
    directory: Path,
    sort_mode: SortMode | str | Comparator,
    visible: Visibility | None = None,
    scan: Scanner = scan_directory,
) -> DirectoryListing:
    """List visible children of ``directory`` as sorted directory and file runs.

    The comparator is resolved before touching the filesystem, so an invalid
    ``sort_mode`` raises ``ConfigurationError`` even for unreadable paths.
    ``OSError`` from ``scan`` propagates to the caller.
    """
    comparator = sort_mode if callable(sort_mode) else comparator_for(sort_mode)
    directories: list[Entry] = []
    files: list[Entry] = []
    for entry in scan(directory):
        if visible is not None and not visible(entry.path):
            continue
        if entry.is_dir:
            directories.append(entry)
        else:
            files.append(entry)
    return DirectoryListing(
        directories=tuple(sort_entries(directories, comparator)),
        files=tuple(sort_entries(files, comparator)),
    )


__all__ = [
    "Scanner",
    "Visibility",
    "scan_directory",
    "list_directory",
]
