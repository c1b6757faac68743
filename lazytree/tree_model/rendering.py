"""Row formatting for nodes.

This is the boundary to whatever draws the tree: it only turns a node's
indentation, decoration and style into an ANSI-styled string.
"""

from __future__ import annotations

from ..ui_theme import DEFAULT_THEME, UITheme, face_sgr
from .build import indentation
from .navigation import iter_chain
from .types import Node, NodeArena, NodeHandle

DEFAULT_INDENT_WIDTH = 2


def format_node(node: Node, theme: UITheme | None = None, indent_width: int = DEFAULT_INDENT_WIDTH) -> str:
    """Render one node as display text."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    indent = indentation(node.depth, indent_width)

    decoration = ""
    if node.decoration.text:
        face = "tree_icon" if node.decoration.kind == "icon" else "tree_marker"
        decoration = f"{face_sgr(active_theme, (face,))}{node.decoration.text}{reset} "

    name = node.name + ("/" if node.is_dir else "")
    name_sgr = face_sgr(active_theme, node.style)
    if name_sgr:
        name = f"{name_sgr}{name}{reset}"
    return f"{indent}{decoration}{name}"


def format_status(message: str, theme: UITheme | None = None) -> str:
    """Render a status-line warning with the theme's warning face."""
    active_theme = theme or DEFAULT_THEME
    if not active_theme.status_warning:
        return message
    return f"{active_theme.status_warning}{message}{active_theme.reset}"


def format_rows(
    arena: NodeArena,
    head: NodeHandle | None,
    theme: UITheme | None = None,
    indent_width: int = DEFAULT_INDENT_WIDTH,
) -> list[str]:
    """Render the chain starting at ``head``."""
    return [format_node(node, theme, indent_width) for node in iter_chain(arena, head)]


__all__ = ["DEFAULT_INDENT_WIDTH", "format_node", "format_rows", "format_status"]
