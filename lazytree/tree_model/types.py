"""Node records and the arena that owns them.

Nodes never reference each other directly. ``parent``, ``prev_node`` and
``next_node`` hold handles into the arena, and ``prev_node``/``next_node``
thread every visible node in depth-first order as one flat chain.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from itertools import count
from pathlib import Path
from typing import NewType

from ..icons import Decoration

NodeHandle = NewType("NodeHandle", int)


class NodeState(str, Enum):
    DIR_CLOSED = "dir-closed"
    DIR_OPEN = "dir-open"
    FILE = "file"


@dataclass(eq=False)
class Node:
    """One rendered row of the tree."""

    handle: NodeHandle
    path: Path
    state: NodeState
    depth: int
    parent: NodeHandle | None = None
    prev_node: NodeHandle | None = None
    next_node: NodeHandle | None = None
    style: tuple[str, ...] = ()
    decoration: Decoration = Decoration(kind="text")

    def __post_init__(self) -> None:
        if self.depth < 0:
            raise ValueError(f"node depth must be non-negative, got {self.depth}")

    @property
    def is_dir(self) -> bool:
        return self.state is not NodeState.FILE

    @property
    def is_open(self) -> bool:
        return self.state is NodeState.DIR_OPEN

    @property
    def name(self) -> str:
        return self.path.name or str(self.path)


class NodeArena:
    """Owner of every live node; handles are never reused."""

    def __init__(self) -> None:
        self._nodes: dict[NodeHandle, Node] = {}
        self._handles = count(1)

    def add(
        self,
        path: Path,
        state: NodeState,
        depth: int,
        parent: NodeHandle | None = None,
        style: tuple[str, ...] = (),
        decoration: Decoration | None = None,
    ) -> Node:
        node = Node(
            handle=NodeHandle(next(self._handles)),
            path=path,
            state=state,
            depth=depth,
            parent=parent,
            style=style,
            decoration=decoration if decoration is not None else Decoration(kind="text"),
        )
        self._nodes[node.handle] = node
        return node

    def get(self, handle: NodeHandle | None) -> Node | None:
        if handle is None:
            return None
        return self._nodes.get(handle)

    def __getitem__(self, handle: NodeHandle) -> Node:
        return self._nodes[handle]

    def __contains__(self, handle: object) -> bool:
        return handle in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def nodes(self) -> Iterator[Node]:
        return iter(list(self._nodes.values()))

    def remove_many(self, handles: Iterable[NodeHandle]) -> int:
        """Drop ``handles`` from the arena; return how many were live."""
        removed = 0
        for handle in handles:
            if self._nodes.pop(handle, None) is not None:
                removed += 1
        return removed

    def clear(self) -> None:
        self._nodes.clear()


__all__ = ["NodeHandle", "NodeState", "Node", "NodeArena"]
