"""Git status collection for tree styling.

``collect_git_status`` parses ``git status --porcelain`` into a path to
category mapping. ``GitStatusScheduler`` runs that collection on a background
worker and hands out ``GitStatusHandle`` objects that may resolve after the
nodes they style were already built.
"""

from __future__ import annotations

import logging
import subprocess
import threading
import time
from collections import OrderedDict
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from queue import Empty, Queue

logger = logging.getLogger(__name__)

GIT_STATUS_TIMEOUT_SECONDS = 2.0


class GitStatus(str, Enum):
    """Status categories a file row can be highlighted with."""

    MODIFIED = "modified"
    UNTRACKED = "untracked"
    IGNORED = "ignored"
    ADDED = "added"
    DELETED = "deleted"
    RENAMED = "renamed"
    CONFLICT = "conflict"


StatusMap = Mapping[Path, GitStatus]


def classify_porcelain_status(code: str) -> GitStatus | None:
    """Map a two-letter porcelain ``XY`` code to a ``GitStatus``."""
    if len(code) != 2 or code == "  ":
        return None
    if code == "??":
        return GitStatus.UNTRACKED
    if code == "!!":
        return GitStatus.IGNORED
    if "U" in code or code in {"AA", "DD"}:
        return GitStatus.CONFLICT
    if "R" in code or "C" in code:
        return GitStatus.RENAMED
    if code[0] == "A":
        return GitStatus.ADDED
    if "D" in code:
        return GitStatus.DELETED
    return GitStatus.MODIFIED


def iter_porcelain_records(output: str) -> list[tuple[str, str]]:
    """Split ``git status --porcelain=v1 -z`` output into ``(code, path)`` pairs."""
    records: list[tuple[str, str]] = []
    tokens = output.split("\0")
    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1
        if len(token) < 4 or token[2] != " ":
            continue
        code = token[:2]
        records.append((code, token[3:]))
        # Renames and copies carry the source path as an extra token.
        if "R" in code or "C" in code:
            index += 1
    return records


def _run_git(cwd: Path, args: list[str], timeout_seconds: float) -> subprocess.CompletedProcess[str] | None:
    try:
        return subprocess.run(
            ["git", "-C", str(cwd), *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=timeout_seconds,
        )
    except (OSError, subprocess.SubprocessError):
        return None


def resolve_repo_root(path: Path, timeout_seconds: float = GIT_STATUS_TIMEOUT_SECONDS) -> Path | None:
    proc = _run_git(path, ["rev-parse", "--show-toplevel"], timeout_seconds)
    if proc is None or proc.returncode != 0:
        return None
    top = proc.stdout.strip()
    return Path(top).resolve() if top else None


def collect_git_status(
    directory: Path,
    timeout_seconds: float = GIT_STATUS_TIMEOUT_SECONDS,
) -> dict[Path, GitStatus]:
    """Return status categories for files at or below ``directory``.

    Any failure (no git, not a repository, timeout) yields an empty mapping.
    """
    directory = directory.resolve()
    repo_root = resolve_repo_root(directory, timeout_seconds)
    if repo_root is None:
        return {}

    proc = _run_git(
        repo_root,
        ["status", "--porcelain=v1", "-z", "--untracked-files=normal", "--ignored", "--", str(directory)],
        timeout_seconds,
    )
    if proc is None or proc.returncode != 0:
        return {}

    statuses: dict[Path, GitStatus] = {}
    for code, rel_path in iter_porcelain_records(proc.stdout):
        status = classify_porcelain_status(code)
        rel_path = rel_path.rstrip("/")
        if status is None or not rel_path:
            continue
        target = repo_root / rel_path
        if not target.is_relative_to(directory):
            continue
        statuses[target] = status
    return statuses


class GitStatusHandle:
    """Status mapping for ``directory`` that may not have arrived yet."""

    def __init__(self, directory: Path, statuses: StatusMap | None = None) -> None:
        self.directory = directory
        self._lock = threading.Lock()
        self._ready = threading.Event()
        self._statuses: dict[Path, GitStatus] | None = None
        if statuses is not None:
            self.resolve(statuses)

    def resolve(self, statuses: StatusMap) -> None:
        """Publish the collected statuses; later calls replace earlier ones."""
        with self._lock:
            self._statuses = dict(statuses)
        self._ready.set()

    def done(self) -> bool:
        return self._ready.is_set()

    def statuses(self) -> dict[Path, GitStatus] | None:
        """Return the mapping without blocking, or ``None`` while pending."""
        with self._lock:
            return self._statuses

    def wait(self, timeout: float | None = None) -> dict[Path, GitStatus] | None:
        self._ready.wait(timeout)
        return self.statuses()

    def __repr__(self) -> str:
        state = "done" if self.done() else "pending"
        return f"GitStatusHandle({str(self.directory)!r}, {state})"


def status_snapshot(source: GitStatusHandle | StatusMap | None) -> StatusMap | None:
    """Return whatever status is available right now from ``source``."""
    if source is None:
        return None
    if isinstance(source, GitStatusHandle):
        return source.statuses()
    return source


class GitStatusScheduler:
    """Background git-status collector.

    Requests for a directory that is still queued share one handle. A single
    worker thread drains the queue; completed handles are collected by the
    caller's thread through ``drain_results``.
    """

    def __init__(
        self,
        collect: Callable[[Path], Mapping[Path, GitStatus]] = collect_git_status,
    ) -> None:
        self._collect = collect
        self._lock = threading.Lock()
        self._pending: OrderedDict[Path, GitStatusHandle] = OrderedDict()
        self._running = False
        self._results: Queue[GitStatusHandle] = Queue()

    def _worker(self) -> None:
        while True:
            with self._lock:
                if not self._pending:
                    self._running = False
                    return
                _directory, handle = self._pending.popitem(last=False)

            started = time.monotonic()
            try:
                statuses = self._collect(handle.directory)
            except Exception:
                logger.exception("git status collection failed for %s", handle.directory)
                statuses = {}
            logger.debug(
                "git status for %s: %d paths in %.3fs",
                handle.directory,
                len(statuses),
                time.monotonic() - started,
            )
            handle.resolve(statuses)
            self._results.put(handle)

    def schedule(self, directory: Path) -> GitStatusHandle:
        """Queue status collection for ``directory`` and return its handle."""
        directory = directory.resolve()
        with self._lock:
            handle = self._pending.get(directory)
            if handle is None:
                handle = GitStatusHandle(directory)
                self._pending[directory] = handle
            if self._running:
                return handle
            self._running = True

        worker = threading.Thread(target=self._worker, name="lazytree-git-status", daemon=True)
        worker.start()
        return handle

    def drain_results(self) -> list[GitStatusHandle]:
        """Return every handle resolved since the last drain."""
        out: list[GitStatusHandle] = []
        while True:
            try:
                out.append(self._results.get_nowait())
            except Empty:
                break
        return out


@dataclass(frozen=True)
class StatusCounts:
    """Per-category totals, used for the CLI summary line."""

    counts: tuple[tuple[GitStatus, int], ...]

    @classmethod
    def from_statuses(cls, statuses: StatusMap) -> StatusCounts:
        totals: dict[GitStatus, int] = {}
        for status in statuses.values():
            totals[status] = totals.get(status, 0) + 1
        return cls(tuple(sorted(totals.items(), key=lambda item: item[0].value)))

    def __str__(self) -> str:
        return ", ".join(f"{count} {status.value}" for status, count in self.counts)


__all__ = [
    "GitStatus",
    "GitStatusHandle",
    "GitStatusScheduler",
    "StatusCounts",
    "StatusMap",
    "classify_porcelain_status",
    "collect_git_status",
    "iter_porcelain_records",
    "resolve_repo_root",
    "status_snapshot",
]
