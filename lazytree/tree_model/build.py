"""Node construction and run linking."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ..file_tree_model import Entry
from .types import Node, NodeArena, NodeHandle

NodeFactory = Callable[[Entry, int, NodeHandle | None], Node]


@dataclass(frozen=True)
class NodeRun:
    """First and last node of a linked sequence; both ``None`` when empty."""

    head: NodeHandle | None = None
    tail: NodeHandle | None = None

    def __bool__(self) -> bool:
        return self.head is not None


EMPTY_RUN = NodeRun()


def indentation(depth: int, width: int) -> str:
    """Return the leading whitespace for a row at ``depth``."""
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")
    return " " * (depth * max(0, width))


def link(arena: NodeArena, first: NodeHandle | None, second: NodeHandle | None) -> None:
    """Make ``second`` follow ``first`` in the chain (either may be ``None``)."""
    if first is not None:
        arena[first].next_node = second
    if second is not None:
        arena[second].prev_node = first


def build_nodes(
    entries: Iterable[Entry],
    depth: int,
    parent: NodeHandle | None,
    make_node: NodeFactory,
) -> NodeRun:
    """Create one node per entry in order and thread them into a run."""
    head: Node | None = None
    previous: Node | None = None
    for entry in entries:
        node = make_node(entry, depth, parent)
        if previous is None:
            head = node
        else:
            previous.next_node = node.handle
            node.prev_node = previous.handle
        previous = node
    if head is None or previous is None:
        return EMPTY_RUN
    return NodeRun(head.handle, previous.handle)


def join_runs(arena: NodeArena, first: NodeRun, second: NodeRun) -> NodeRun:
    """Stitch ``second`` after ``first``; empty runs are skipped."""
    if not first:
        return second
    if not second:
        return first
    link(arena, first.tail, second.head)
    return NodeRun(first.head, second.tail)


__all__ = [
    "NodeFactory",
    "NodeRun",
    "EMPTY_RUN",
    "indentation",
    "link",
    "build_nodes",
    "join_runs",
]
