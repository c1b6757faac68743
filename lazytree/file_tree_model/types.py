"""Filesystem entry datatypes consumed by the listing and node builders."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Entry:
    """One directory child as observed on disk."""

    path: Path
    is_dir: bool
    size: int = 0
    mtime_ns: int = 0

    @property
    def name(self) -> str:
        return self.path.name


@dataclass(frozen=True)
class DirectoryListing:
    """Visible children of one directory, partitioned and sorted."""

    directories: tuple[Entry, ...] = ()
    files: tuple[Entry, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.directories or self.files)


__all__ = ["Entry", "DirectoryListing"]
