"""Node arena, node construction, branch assembly, navigation, and row formatting.

The visible tree is a single chain of ``Node`` records linked through
``prev_node``/``next_node`` handles, not a nested structure.
"""

from __future__ import annotations

from .branch import (
    ExpandedPaths,
    RestyleScope,
    StatusSource,
    TreeContext,
    assemble_branch,
    collapse_branch,
    expand_branch,
    redecorate_nodes,
    restyle_nodes,
)
from .build import EMPTY_RUN, NodeFactory, NodeRun, build_nodes, indentation, join_runs, link
from .navigation import (
    find_node,
    iter_chain,
    next_directory,
    next_sibling_at_depth,
    next_visible,
    previous_visible,
    subtree_handles,
    subtree_tail,
)
from .rendering import DEFAULT_INDENT_WIDTH, format_node, format_rows, format_status
from .types import Node, NodeArena, NodeHandle, NodeState

__all__ = [
    "Node",
    "NodeArena",
    "NodeHandle",
    "NodeState",
    "NodeFactory",
    "NodeRun",
    "EMPTY_RUN",
    "build_nodes",
    "indentation",
    "join_runs",
    "link",
    "ExpandedPaths",
    "RestyleScope",
    "StatusSource",
    "TreeContext",
    "assemble_branch",
    "collapse_branch",
    "expand_branch",
    "redecorate_nodes",
    "restyle_nodes",
    "iter_chain",
    "next_visible",
    "previous_visible",
    "subtree_handles",
    "subtree_tail",
    "next_sibling_at_depth",
    "next_directory",
    "find_node",
    "DEFAULT_INDENT_WIDTH",
    "format_node",
    "format_rows",
    "format_status",
]
