"""Walking the flat node chain."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from .types import Node, NodeArena, NodeHandle


def iter_chain(arena: NodeArena, head: NodeHandle | None, tail: NodeHandle | None = None) -> Iterator[Node]:
    """Yield nodes from ``head`` following ``next_node``, stopping after ``tail``."""
    node = arena.get(head)
    while node is not None:
        yield node
        if node.handle == tail:
            return
        node = arena.get(node.next_node)


def next_visible(arena: NodeArena, handle: NodeHandle) -> NodeHandle | None:
    return arena[handle].next_node


def previous_visible(arena: NodeArena, handle: NodeHandle) -> NodeHandle | None:
    return arena[handle].prev_node


def subtree_handles(arena: NodeArena, handle: NodeHandle) -> list[NodeHandle]:
    """Return handles of every visible descendant of ``handle`` in chain order."""
    root = arena[handle]
    out: list[NodeHandle] = []
    node = arena.get(root.next_node)
    while node is not None and node.depth > root.depth:
        out.append(node.handle)
        node = arena.get(node.next_node)
    return out


def subtree_tail(arena: NodeArena, handle: NodeHandle) -> NodeHandle:
    """Return the last chain node belonging to ``handle``'s subtree (itself if closed)."""
    descendants = subtree_handles(arena, handle)
    return descendants[-1] if descendants else handle


def next_sibling_at_depth(arena: NodeArena, handle: NodeHandle, direction: int) -> NodeHandle | None:
    """Return the next node at the same depth under the same parent, skipping subtrees."""
    if direction == 0:
        return None
    start = arena[handle]
    node = arena.get(start.next_node if direction > 0 else start.prev_node)
    while node is not None:
        if node.depth < start.depth:
            return None
        if node.depth == start.depth and node.parent == start.parent:
            return node.handle
        node = arena.get(node.next_node if direction > 0 else node.prev_node)
    return None


def next_directory(arena: NodeArena, handle: NodeHandle, direction: int) -> NodeHandle | None:
    """Return the next directory node in the requested direction."""
    if direction == 0:
        return None
    node = arena[handle]
    while True:
        node = arena.get(node.next_node if direction > 0 else node.prev_node)
        if node is None:
            return None
        if node.is_dir:
            return node.handle


def find_node(arena: NodeArena, head: NodeHandle | None, path: Path) -> NodeHandle | None:
    for node in iter_chain(arena, head):
        if node.path == path:
            return node.handle
    return None


__all__ = [
    "iter_chain",
    "next_visible",
    "previous_visible",
    "subtree_handles",
    "subtree_tail",
    "next_sibling_at_depth",
    "next_directory",
    "find_node",
]
