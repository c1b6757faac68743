"""Command-line front door for lazytree.

Builds a tree view for a directory from persisted preferences plus CLI
overrides, waits briefly for git status, and prints the visible rows.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from .config import ICON_MODES, RESTYLE_SCOPES, load_tree_config, save_show_hidden, save_sort_mode
from .errors import ConfigurationError
from .file_tree_model import SortMode, parse_sort_mode
from .git_status import GitStatusScheduler, StatusCounts
from .tree_model import ExpandedPaths, format_status
from .tree_view import TreeView
from .ui_theme import available_theme_names, resolve_theme

DEFAULT_GIT_WAIT_SECONDS = 1.0


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lazytree", description="Print a directory tree with icons and git status.")
    parser.add_argument("path", nargs="?", default=None, help="Directory to show. Defaults to current directory.")
    parser.add_argument(
        "--sort",
        default=None,
        help=f"Entry order ({', '.join(mode.value for mode in SortMode)}).",
    )
    parser.add_argument("--icons", choices=ICON_MODES, default=None, help="Icon mode (default: auto-detect).")
    parser.add_argument("-a", "--all", action="store_true", help="Show hidden files.")
    parser.add_argument("--no-gitignore", action="store_true", help="Show gitignored files.")
    parser.add_argument("--expand", action="append", default=[], metavar="PATH", help="Expand PATH (repeatable).")
    parser.add_argument("--expand-depth", type=_positive_int, default=None, metavar="N", help="Expand directories N levels deep.")
    parser.add_argument("--theme", default=None, help=f"UI theme name ({', '.join(available_theme_names())}).")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--indent", type=_positive_int, default=None, help="Indentation width per level.")
    parser.add_argument("--restyle-scope", choices=RESTYLE_SCOPES, default=None, help="Which rows late git status restyles.")
    parser.add_argument("--no-git", action="store_true", help="Skip git status collection.")
    parser.add_argument("--save", action="store_true", help="Persist --sort and --all as defaults.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log diagnostics to stderr.")
    return parser


def _expand_to_depth(view: TreeView, max_depth: int) -> None:
    handle = view.head
    while handle is not None:
        node = view.arena[handle]
        if node.is_dir and not node.is_open and node.depth < max_depth:
            view.expand(handle)
        handle = view.arena[handle].next_node


def main(argv: Sequence[str] | None = None, default_path: Path | None = None) -> int:
    """Parse CLI arguments and print the tree. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    root = Path(args.path) if args.path else (default_path or Path.cwd())
    if not root.is_dir():
        raise SystemExit(f"Not a directory: {root}")

    config = load_tree_config()
    overrides: dict[str, object] = {}
    if args.sort is not None:
        overrides["sort_mode"] = args.sort
    if args.icons is not None:
        overrides["icons"] = args.icons
    if args.all:
        overrides["show_hidden"] = True
    if args.no_gitignore:
        overrides["skip_gitignored"] = False
    if args.indent is not None:
        overrides["indent_width"] = args.indent
    if args.theme is not None:
        overrides["theme"] = args.theme
    if args.restyle_scope is not None:
        overrides["restyle_scope"] = args.restyle_scope
    config = dataclasses.replace(config, **overrides)

    view = TreeView.from_config(root, config, expanded=ExpandedPaths({root / path for path in args.expand}))
    scheduler = GitStatusScheduler()
    pending = None if args.no_git else view.request_git_status(scheduler)
    try:
        view.build()
        if args.expand_depth is not None:
            _expand_to_depth(view, args.expand_depth)
    except ConfigurationError as exc:
        raise SystemExit(f"lazytree: {exc}") from exc

    if args.save:
        if args.sort is not None:
            save_sort_mode(parse_sort_mode(config.sort_mode).value)
        if args.all:
            save_show_hidden(True)

    if pending is not None:
        statuses = pending.wait(DEFAULT_GIT_WAIT_SECONDS)
        if pending.done():
            view.apply_git_status(pending)
        if statuses:
            logging.getLogger(__name__).info("git: %s", StatusCounts.from_statuses(statuses))

    theme = resolve_theme(config.theme, no_color=args.no_color or not sys.stdout.isatty())
    out = [f"{row}\n" for row in view.rows(theme)]
    sys.stdout.write("".join(out))
    if view.status_message:
        warn_theme = resolve_theme(config.theme, no_color=args.no_color or not sys.stderr.isatty())
        sys.stderr.write(f"{format_status(view.status_message, warn_theme)}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
