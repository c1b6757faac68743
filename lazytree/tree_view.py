"""Tree view state: one root, its node arena, and the expanded set.

Wires the branch assembler to the render-mode monitor and git status
scheduler, and keeps the last user-visible warning in ``status_message``.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from .config import TreeConfig
from .file_tree_model import (
    DEFAULT_SORT_MODE,
    Comparator,
    Scanner,
    SortMode,
    Visibility,
    build_visibility_filter,
    scan_directory,
)
from .git_status import GitStatusHandle, GitStatusScheduler, StatusMap
from .render_mode import RenderModeMonitor, detect_graphical_icons, fixed_capability
from .tree_model import (
    DEFAULT_INDENT_WIDTH,
    ExpandedPaths,
    Node,
    NodeArena,
    NodeHandle,
    NodeRun,
    RestyleScope,
    TreeContext,
    assemble_branch,
    collapse_branch,
    expand_branch,
    find_node,
    format_rows,
    iter_chain,
    redecorate_nodes,
    restyle_nodes,
)
from .ui_theme import UITheme


class TreeView:
    """Visible tree rooted at ``root``."""

    def __init__(
        self,
        root: Path,
        *,
        monitor: RenderModeMonitor | None = None,
        sort_mode: SortMode | str | Comparator = DEFAULT_SORT_MODE,
        visible: Visibility | None = None,
        expanded: ExpandedPaths | None = None,
        scan: Scanner = scan_directory,
        restyle_scope: RestyleScope = RestyleScope.TREE,
        indent_width: int = DEFAULT_INDENT_WIDTH,
    ) -> None:
        self.root = root.resolve()
        self.arena = NodeArena()
        self.expanded = expanded if expanded is not None else ExpandedPaths()
        self.restyle_scope = restyle_scope
        self.indent_width = indent_width
        self.head: NodeHandle | None = None
        self.git_status: GitStatusHandle | StatusMap | None = None
        self.status_message = ""
        self.context = TreeContext(
            monitor=monitor if monitor is not None else RenderModeMonitor(),
            sort_mode=sort_mode,
            visible=visible,
            is_expanded=self.expanded,
            scan=scan,
            warn=self._set_status,
        )

    @classmethod
    def from_config(
        cls,
        root: Path,
        config: TreeConfig,
        *,
        expanded: ExpandedPaths | None = None,
    ) -> TreeView:
        """Build a view honoring persisted preferences."""
        if config.icons == "auto":
            monitor = RenderModeMonitor(detect_graphical_icons)
        else:
            monitor = RenderModeMonitor(fixed_capability(config.icons == "graphical"))
        resolved_root = root.resolve()
        return cls(
            resolved_root,
            monitor=monitor,
            sort_mode=config.sort_mode,
            visible=build_visibility_filter(resolved_root, config.show_hidden, config.skip_gitignored),
            expanded=expanded,
            restyle_scope=RestyleScope(config.restyle_scope),
            indent_width=config.indent_width,
        )

    def _set_status(self, message: str) -> None:
        self.status_message = message

    def build(self, git_status: GitStatusHandle | StatusMap | None = None) -> NodeRun:
        """Discard every node and assemble the root branch again."""
        if git_status is not None:
            self.git_status = git_status
        self.arena.clear()
        run = assemble_branch(self.arena, self.root, 0, self.context, self.git_status)
        self.head = run.head
        return run

    def expand(self, handle: NodeHandle) -> NodeRun:
        node = self.arena[handle]
        if not node.is_dir:
            return NodeRun()
        self.expanded.add(node.path)
        self.refresh_render_mode()
        return expand_branch(self.arena, handle, self.context, self.git_status)

    def collapse(self, handle: NodeHandle) -> int:
        node = self.arena[handle]
        self.expanded.discard(node.path)
        return collapse_branch(self.arena, handle, self.context)

    def toggle(self, handle: NodeHandle) -> None:
        node = self.arena[handle]
        if not node.is_dir:
            return
        if node.is_open:
            self.collapse(handle)
        else:
            self.expand(handle)

    def refresh_render_mode(self) -> bool:
        """Re-check terminal capability and redecorate every node on change."""
        changed = self.context.monitor.check()
        if changed:
            redecorate_nodes(self.arena, self.context.render)
        return changed

    def request_git_status(self, scheduler: GitStatusScheduler) -> GitStatusHandle:
        handle = scheduler.schedule(self.root)
        self.git_status = handle
        return handle

    def apply_git_status(self, handle: GitStatusHandle) -> int:
        """Restyle file nodes from a resolved status handle."""
        return restyle_nodes(self.arena, handle, self.restyle_scope, handle.directory)

    def drain_git_status(self, scheduler: GitStatusScheduler) -> int:
        return sum(self.apply_git_status(handle) for handle in scheduler.drain_results())

    def iter_nodes(self) -> Iterator[Node]:
        return iter_chain(self.arena, self.head)

    def find(self, path: Path) -> NodeHandle | None:
        return find_node(self.arena, self.head, path)

    def rows(self, theme: UITheme | None = None) -> list[str]:
        return format_rows(self.arena, self.head, theme, self.indent_width)


__all__ = ["TreeView"]
