"""UI theme definitions and face lookup.

Node styles are tuples of face names; a theme maps each face to an ANSI SGR
prefix. Later faces in a style are layered over earlier ones.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, fields


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by row formatting."""

    name: str
    reset: str
    tree_marker: str
    tree_icon: str
    tree_dir: str
    tree_file_python: str
    tree_file_default: str
    git_modified: str
    git_untracked: str
    git_ignored: str
    git_added: str
    git_deleted: str
    git_renamed: str
    git_conflict: str
    status_warning: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    tree_marker="\033[38;5;44m",
    tree_icon="\033[38;5;110m",
    tree_dir="\033[1;34m",
    tree_file_python="\033[38;5;110m",
    tree_file_default="\033[38;5;252m",
    git_modified="\033[38;5;214m",
    git_untracked="\033[38;5;42m",
    git_ignored="\033[2;38;5;244m",
    git_added="\033[38;5;78m",
    git_deleted="\033[9;38;5;203m",
    git_renamed="\033[38;5;141m",
    git_conflict="\033[1;38;5;196m",
    status_warning="\033[38;5;214m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    tree_marker="\033[38;5;39m",
    tree_icon="\033[38;5;117m",
    tree_dir="\033[1;38;5;45m",
    tree_file_python="\033[38;5;117m",
    tree_file_default="\033[38;5;252m",
    git_modified="\033[38;5;215m",
    git_untracked="\033[38;5;84m",
    git_ignored="\033[2;38;5;110m",
    git_added="\033[38;5;85m",
    git_deleted="\033[9;38;5;210m",
    git_renamed="\033[38;5;147m",
    git_conflict="\033[1;38;5;203m",
    status_warning="\033[38;5;215m",
)

PLAIN_THEME = UITheme(name="plain", **{field.name: "" for field in fields(UITheme) if field.name != "name"})

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}

_FACE_NAMES = frozenset(field.name for field in fields(UITheme)) - {"name", "reset"}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    candidate = str(name or "").strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


def face_sgr(theme: UITheme, faces: Iterable[str]) -> str:
    """Concatenate SGR prefixes for ``faces``; unknown face names are skipped."""
    return "".join(getattr(theme, face) for face in faces if face in _FACE_NAMES)


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
    "face_sgr",
]
