"""Branch assembly: listing a directory into a linked run of nodes.

A branch is the run of nodes for one directory's visible children,
directories first. Previously expanded subdirectories are reassembled
recursively and spliced into the chain right after their directory node, so
the returned run covers the whole visible subtree.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from ..file_tree_model import (
    DEFAULT_SORT_MODE,
    Comparator,
    Entry,
    Scanner,
    SortMode,
    Visibility,
    list_directory,
    scan_directory,
)
from ..git_status import GitStatusHandle, StatusMap, status_snapshot
from ..icons import directory_style, file_style
from ..render_mode import RenderContext, RenderModeMonitor
from .build import EMPTY_RUN, NodeRun, build_nodes, join_runs, link
from .navigation import iter_chain, subtree_handles
from .types import Node, NodeArena, NodeHandle, NodeState

logger = logging.getLogger(__name__)

StatusSource = GitStatusHandle | StatusMap | None


class RestyleScope(str, Enum):
    """Which file nodes a late git-status result may restyle."""

    BRANCH = "branch"
    TREE = "tree"


class ExpandedPaths:
    """In-memory set of expanded directories keyed by resolved path."""

    def __init__(self, paths: set[Path] | None = None) -> None:
        self._paths: set[Path] = set()
        for path in paths or ():
            self.add(path)

    @staticmethod
    def _key(path: Path) -> Path:
        try:
            return path.resolve()
        except OSError:
            return path

    def add(self, path: Path) -> None:
        self._paths.add(self._key(path))

    def discard(self, path: Path) -> None:
        self._paths.discard(self._key(path))

    def __contains__(self, path: object) -> bool:
        return isinstance(path, Path) and self._key(path) in self._paths

    def __call__(self, path: Path) -> bool:
        return path in self

    def __len__(self) -> int:
        return len(self._paths)

    def paths(self) -> frozenset[Path]:
        return frozenset(self._paths)


def _never_expanded(_path: Path) -> bool:
    return False


@dataclass
class TreeContext:
    """Collaborators and settings threaded through branch assembly."""

    monitor: RenderModeMonitor = field(default_factory=RenderModeMonitor)
    sort_mode: SortMode | str | Comparator = DEFAULT_SORT_MODE
    visible: Visibility | None = None
    is_expanded: Callable[[Path], bool] = _never_expanded
    scan: Scanner = scan_directory
    warn: Callable[[str], None] | None = None

    @property
    def render(self) -> RenderContext:
        return self.monitor.context

    def report(self, message: str) -> None:
        logger.warning(message)
        if self.warn is not None:
            self.warn(message)


def assemble_branch(
    arena: NodeArena,
    directory: Path,
    depth: int,
    context: TreeContext,
    git_status: StatusSource = None,
    parent: NodeHandle | None = None,
) -> NodeRun:
    """Build the linked node run for ``directory``'s visible subtree.

    When ``parent`` is given, its previous children are discarded and the new
    run is spliced right after it. ``ConfigurationError`` propagates; an
    unreadable directory is reported through ``context`` and yields an empty
    run. A render-mode change seen here redecorates every node already in
    ``arena`` before the new branch is built.
    """
    if context.monitor.check() and len(arena):
        redecorate_nodes(arena, context.render)
    return _assemble(arena, directory, depth, context, context.render, git_status, parent, frozenset())


def _resolved(path: Path) -> Path:
    try:
        return path.resolve()
    except OSError:
        return path


def _assemble(
    arena: NodeArena,
    directory: Path,
    depth: int,
    context: TreeContext,
    render: RenderContext,
    git_status: StatusSource,
    parent: NodeHandle | None,
    ancestors: frozenset[Path],
) -> NodeRun:
    try:
        listing = list_directory(directory, context.sort_mode, context.visible, context.scan)
    except OSError as exc:
        context.report(f"cannot read {directory}: {exc.strerror or exc}")
        listing = None

    if parent is not None:
        _discard_children(arena, parent)
        _mark_open(arena[parent], render)
    if listing is None:
        return EMPTY_RUN

    def make_directory(entry: Entry, node_depth: int, node_parent: NodeHandle | None) -> Node:
        return arena.add(
            entry.path,
            NodeState.DIR_CLOSED,
            node_depth,
            node_parent,
            style=directory_style(),
            decoration=render.directory_decoration(False),
        )

    directories = build_nodes(listing.directories, depth, parent, make_directory)

    statuses = status_snapshot(git_status)

    def make_file(entry: Entry, node_depth: int, node_parent: NodeHandle | None) -> Node:
        return arena.add(
            entry.path,
            NodeState.FILE,
            node_depth,
            node_parent,
            style=file_style(entry.path, statuses),
            decoration=render.file_decoration(entry.path),
        )

    files = build_nodes(listing.files, depth, parent, make_file)
    run = join_runs(arena, directories, files)

    tail = run.tail
    ancestors = ancestors | {_resolved(directory)}
    directory_nodes = [node.handle for node in iter_chain(arena, directories.head, directories.tail)]
    for handle in directory_nodes:
        node = arena[handle]
        if not context.is_expanded(node.path) or _resolved(node.path) in ancestors:
            continue
        subtree = _assemble(arena, node.path, depth + 1, context, render, git_status, handle, ancestors)
        if handle == tail and subtree:
            tail = subtree.tail
    if tail != run.tail:
        run = NodeRun(run.head, tail)

    if parent is not None and run:
        after = arena[parent].next_node
        link(arena, parent, run.head)
        link(arena, run.tail, after)
    return run


def _mark_open(node: Node, render: RenderContext) -> None:
    node.state = NodeState.DIR_OPEN
    node.decoration = render.directory_decoration(True)


def _discard_children(arena: NodeArena, handle: NodeHandle) -> int:
    descendants = subtree_handles(arena, handle)
    if not descendants:
        return 0
    after = arena[descendants[-1]].next_node
    link(arena, handle, after)
    return arena.remove_many(descendants)


def collapse_branch(arena: NodeArena, handle: NodeHandle, context: TreeContext) -> int:
    """Close directory ``handle`` and drop its visible descendants from the arena."""
    node = arena[handle]
    if not node.is_dir:
        return 0
    removed = _discard_children(arena, handle)
    node.state = NodeState.DIR_CLOSED
    node.decoration = context.render.directory_decoration(False)
    return removed


def expand_branch(
    arena: NodeArena,
    handle: NodeHandle,
    context: TreeContext,
    git_status: StatusSource = None,
) -> NodeRun:
    """Open directory ``handle`` by assembling its branch beneath it."""
    node = arena[handle]
    if not node.is_dir:
        return EMPTY_RUN
    return assemble_branch(arena, node.path, node.depth + 1, context, git_status, parent=handle)


def restyle_nodes(
    arena: NodeArena,
    git_status: StatusSource,
    scope: RestyleScope = RestyleScope.BRANCH,
    directory: Path | None = None,
) -> int:
    """Re-resolve file styles from ``git_status``; return how many changed.

    Only ``style`` is touched. With ``RestyleScope.BRANCH`` only direct file
    children of ``directory`` (default: the handle's directory) are updated.
    Running the pass again with the same status changes nothing.
    """
    statuses = status_snapshot(git_status)
    if statuses is None:
        return 0
    if directory is None and isinstance(git_status, GitStatusHandle):
        directory = git_status.directory

    changed = 0
    for node in arena.nodes():
        if node.state is not NodeState.FILE:
            continue
        if scope is RestyleScope.BRANCH and directory is not None and node.path.parent != directory:
            continue
        style = file_style(node.path, statuses)
        if style != node.style:
            node.style = style
            changed += 1
    return changed


def redecorate_nodes(arena: NodeArena, render: RenderContext) -> int:
    """Re-resolve every node's decoration with the active strategies."""
    for node in arena.nodes():
        if node.is_dir:
            node.decoration = render.directory_decoration(node.is_open)
        else:
            node.decoration = render.file_decoration(node.path)
    return len(arena)


__all__ = [
    "ExpandedPaths",
    "RestyleScope",
    "StatusSource",
    "TreeContext",
    "assemble_branch",
    "collapse_branch",
    "expand_branch",
    "restyle_nodes",
    "redecorate_nodes",
]
