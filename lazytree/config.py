"""Persistent JSON config helpers.

Stores tree preferences (sort mode, hidden files, icons, theme). Access is
defensive: malformed or missing config falls back to defaults. The sort mode
is kept as written so an invalid value is reported when the tree is built.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazytree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

ICON_MODES = ("auto", "graphical", "text")
RESTYLE_SCOPES = ("branch", "tree")


@dataclass(frozen=True)
class TreeConfig:
    """Tree preferences after validation."""

    sort_mode: str = "alphabetic-asc"
    show_hidden: bool = False
    skip_gitignored: bool = True
    indent_width: int = 2
    icons: str = "auto"
    theme: str | None = None
    restyle_scope: str = "tree"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON; write failures are ignored."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _choice(value: object, choices: tuple[str, ...], default: str) -> str:
    if isinstance(value, str) and value.strip().lower() in choices:
        return value.strip().lower()
    return default


def _bool(value: object, default: bool) -> bool:
    return value if isinstance(value, bool) else default


def _positive_int(value: object, default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return default
    return value


def load_tree_config() -> TreeConfig:
    """Return persisted preferences, coercing invalid scalars to defaults."""
    data = load_config()
    defaults = TreeConfig()
    sort_mode = data.get("sort_mode")
    theme = data.get("theme")
    return TreeConfig(
        sort_mode=str(sort_mode) if sort_mode is not None else defaults.sort_mode,
        show_hidden=_bool(data.get("show_hidden"), defaults.show_hidden),
        skip_gitignored=_bool(data.get("skip_gitignored"), defaults.skip_gitignored),
        indent_width=_positive_int(data.get("indent_width"), defaults.indent_width),
        icons=_choice(data.get("icons"), ICON_MODES, defaults.icons),
        theme=theme if isinstance(theme, str) else defaults.theme,
        restyle_scope=_choice(data.get("restyle_scope"), RESTYLE_SCOPES, defaults.restyle_scope),
    )


def save_sort_mode(sort_mode: str) -> None:
    config = load_config()
    config["sort_mode"] = str(sort_mode)
    save_config(config)


def save_show_hidden(show_hidden: bool) -> None:
    """Persist hidden-file visibility preference as a boolean."""
    config = load_config()
    config["show_hidden"] = bool(show_hidden)
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "ICON_MODES",
    "RESTYLE_SCOPES",
    "TreeConfig",
    "load_config",
    "save_config",
    "load_tree_config",
    "save_sort_mode",
    "save_show_hidden",
]
