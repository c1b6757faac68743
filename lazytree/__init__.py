"""Public package surface for lazytree.

A lazily built, flat-chain model of a directory tree: branch assembly,
render-mode aware decorations, and git-status styling.
"""

from __future__ import annotations

from .errors import ConfigurationError
from .file_tree_model import Entry, SortMode, comparator_for, list_directory
from .render_mode import RenderMode, RenderModeMonitor
from .tree_model import NodeArena, NodeRun, NodeState, TreeContext, assemble_branch
from .tree_view import TreeView


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "ConfigurationError",
    "Entry",
    "SortMode",
    "comparator_for",
    "list_directory",
    "RenderMode",
    "RenderModeMonitor",
    "NodeArena",
    "NodeRun",
    "NodeState",
    "TreeContext",
    "assemble_branch",
    "TreeView",
    "main",
]
