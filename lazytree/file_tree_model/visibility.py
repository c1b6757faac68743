"""Visibility filtering for directory listings.

Hides dotfiles unless requested and, optionally, anything git ignores. The
gitignore matcher asks git for ignored paths once per root and caches the
answer with a short TTL.
"""

from __future__ import annotations

import shutil
import subprocess
import time
from collections import OrderedDict
from dataclasses import dataclass
from pathlib import Path

IGNORE_MATCHER_CACHE_MAX = 64
IGNORE_MATCHER_CACHE_TTL_SECONDS = 2.0


@dataclass(frozen=True)
class GitIgnoreMatcher:
    """Ignored files and directories under ``root`` as resolved paths."""

    root: Path
    ignored_files: frozenset[Path]
    ignored_dirs: frozenset[Path]

    def is_ignored(self, path: Path) -> bool:
        resolved = path.resolve()
        if not resolved.is_relative_to(self.root):
            return False
        if resolved in self.ignored_files:
            return True
        # Any ignored ancestor hides the whole subtree.
        for candidate in (resolved, *resolved.parents):
            if candidate in self.ignored_dirs:
                return True
            if candidate == self.root:
                break
        return False


@dataclass(frozen=True)
class _CachedMatcher:
    matcher: GitIgnoreMatcher | None
    root_mtime_ns: int | None
    loaded_at: float


_MATCHER_CACHE: OrderedDict[Path, _CachedMatcher] = OrderedDict()


def clear_ignore_matcher_cache() -> None:
    _MATCHER_CACHE.clear()


def _git_lines(args: list[str], cwd: Path) -> bytes | None:
    try:
        proc = subprocess.run(
            ["git", "-C", str(cwd), *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return None
    return proc.stdout


def load_ignore_matcher(root: Path) -> GitIgnoreMatcher | None:
    """Query git for ignored paths under ``root``.

    Returns ``None`` outside a repository or when git is unavailable.
    """
    if shutil.which("git") is None:
        return None

    root = root.resolve()
    toplevel = _git_lines(["rev-parse", "--show-toplevel"], root)
    if not toplevel or not toplevel.strip():
        return None
    repo_root = Path(toplevel.decode("utf-8", errors="replace").strip()).resolve()
    if not root.is_relative_to(repo_root):
        return None

    listing = _git_lines(
        ["ls-files", "-z", "--others", "-i", "--exclude-standard", "--directory"],
        repo_root,
    )
    if listing is None:
        return None

    ignored_files: set[Path] = set()
    ignored_dirs: set[Path] = set()
    for raw in listing.split(b"\0"):
        rel = raw.decode("utf-8", errors="replace")
        if not rel.rstrip("/"):
            continue
        target = (repo_root / rel.rstrip("/")).resolve()
        if not target.is_relative_to(root):
            continue
        if rel.endswith("/") or target.is_dir():
            ignored_dirs.add(target)
        else:
            ignored_files.add(target)

    return GitIgnoreMatcher(root=root, ignored_files=frozenset(ignored_files), ignored_dirs=frozenset(ignored_dirs))


def get_ignore_matcher(root: Path) -> GitIgnoreMatcher | None:
    """Return a cached matcher for ``root``, reloading on mtime change or TTL expiry."""
    key = root.resolve()
    try:
        root_mtime_ns: int | None = int(key.stat().st_mtime_ns)
    except OSError:
        root_mtime_ns = None
    now = time.monotonic()

    cached = _MATCHER_CACHE.get(key)
    if (
        cached is not None
        and cached.root_mtime_ns == root_mtime_ns
        and now - cached.loaded_at <= IGNORE_MATCHER_CACHE_TTL_SECONDS
    ):
        _MATCHER_CACHE.move_to_end(key)
        return cached.matcher

    matcher = load_ignore_matcher(key)
    _MATCHER_CACHE[key] = _CachedMatcher(matcher=matcher, root_mtime_ns=root_mtime_ns, loaded_at=now)
    _MATCHER_CACHE.move_to_end(key)
    while len(_MATCHER_CACHE) > IGNORE_MATCHER_CACHE_MAX:
        _MATCHER_CACHE.popitem(last=False)
    return matcher


@dataclass(frozen=True)
class VisibilityFilter:
    """Predicate deciding whether a path appears in the tree."""

    show_hidden: bool = False
    ignore_matcher: GitIgnoreMatcher | None = None

    def __call__(self, path: Path) -> bool:
        if not self.show_hidden and path.name.startswith("."):
            return False
        if self.ignore_matcher is not None and self.ignore_matcher.is_ignored(path):
            return False
        return True


def build_visibility_filter(root: Path, show_hidden: bool, skip_gitignored: bool) -> VisibilityFilter:
    matcher = get_ignore_matcher(root) if skip_gitignored else None
    return VisibilityFilter(show_hidden=show_hidden, ignore_matcher=matcher)


__all__ = [
    "GitIgnoreMatcher",
    "VisibilityFilter",
    "build_visibility_filter",
    "clear_ignore_matcher_cache",
    "get_ignore_matcher",
    "load_ignore_matcher",
]
