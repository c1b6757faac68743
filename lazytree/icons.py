"""Node decorations and styles.

Two decoration strategies exist: text glyphs for plain terminals and Nerd
Font icons for terminals that can show them. ``RenderModeMonitor`` picks
which pair is active. Styles are tuples of face names from ``ui_theme``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from pygments.lexers import get_lexer_for_filename
from pygments.util import ClassNotFound

from .git_status import GitStatus, StatusMap

TEXT_DIR_CLOSED_GLYPH = "+"
TEXT_DIR_OPEN_GLYPH = "-"

DIRECTORY_STYLE: tuple[str, ...] = ("tree_dir",)
_PYTHON_SUFFIXES = frozenset({".py", ".pyi", ".pyw"})
_STATUS_FACES: dict[GitStatus, str] = {
    GitStatus.MODIFIED: "git_modified",
    GitStatus.UNTRACKED: "git_untracked",
    GitStatus.IGNORED: "git_ignored",
    GitStatus.ADDED: "git_added",
    GitStatus.DELETED: "git_deleted",
    GitStatus.RENAMED: "git_renamed",
    GitStatus.CONFLICT: "git_conflict",
}
_INHERITED_STATUSES = frozenset({GitStatus.UNTRACKED, GitStatus.IGNORED})


@dataclass(frozen=True)
class Icon:
    """Icon asset reference: a stable name plus the glyph that draws it."""

    name: str
    glyph: str


@dataclass(frozen=True)
class Decoration:
    """What is drawn between a row's indentation and its name."""

    kind: str
    text: str = ""
    icon: str | None = None

    @classmethod
    def from_icon(cls, icon: Icon) -> Decoration:
        return cls(kind="icon", text=icon.glyph, icon=icon.name)

    @classmethod
    def glyph(cls, text: str) -> Decoration:
        return cls(kind="text", text=text)


@dataclass(frozen=True)
class IconSet:
    """Graphical icon assets for directories and files.

    ``by_extension`` keys are lower-case suffixes including the dot.
    ``by_language`` keys are pygments lexer aliases; files pygments recognises
    without a dedicated icon get ``code_default`` when it is set.
    """

    dir_closed: Icon
    dir_open: Icon
    file_default: Icon
    by_extension: Mapping[str, Icon] = field(default_factory=dict)
    by_filename: Mapping[str, Icon] = field(default_factory=dict)
    by_language: Mapping[str, Icon] = field(default_factory=dict)
    code_default: Icon | None = None

    def icon_for_directory(self, is_open: bool) -> Icon:
        return self.dir_open if is_open else self.dir_closed

    def icon_for_file(self, path: Path) -> Icon:
        icon = self.by_extension.get(path.suffix.lower())
        if icon is None:
            icon = self.by_filename.get(path.name)
        if icon is None and self.by_language:
            language = language_for_filename(path.stem + path.suffix.lower())
            if language is not None:
                icon = self.by_language.get(language, self.code_default)
        return icon or self.file_default


@lru_cache(maxsize=1024)
def language_for_filename(name: str) -> str | None:
    """Return the primary pygments alias for ``name`` or ``None``."""
    try:
        lexer = get_lexer_for_filename(name)
    except ClassNotFound:
        return None
    return lexer.aliases[0] if lexer.aliases else None


_PYTHON = Icon("file-python", "\ue73c")
_JAVASCRIPT = Icon("file-javascript", "\ue74e")
_TYPESCRIPT = Icon("file-typescript", "\ue628")
_MARKDOWN = Icon("file-markdown", "\ue73e")
_JSON = Icon("file-json", "\ue60b")
_CONFIG = Icon("file-config", "\ue615")
_SHELL = Icon("file-shell", "\uf489")
_IMAGE = Icon("file-image", "\uf1c5")
_ARCHIVE = Icon("file-archive", "\uf1c6")
_PDF = Icon("file-pdf", "\uf1c1")
_TEXT = Icon("file-text", "\uf15c")
_HTML = Icon("file-html", "\ue736")
_CSS = Icon("file-css", "\ue749")
_C = Icon("file-c", "\ue61e")
_CPP = Icon("file-cpp", "\ue61d")
_RUST = Icon("file-rust", "\ue7a8")
_GO = Icon("file-go", "\ue627")
_JAVA = Icon("file-java", "\ue738")
_RUBY = Icon("file-ruby", "\ue739")
_LUA = Icon("file-lua", "\ue620")
_DOCKER = Icon("file-docker", "\uf308")
_MAKE = Icon("file-make", "\ue779")
_GIT = Icon("file-git", "\ue702")
_LOCK = Icon("file-lock", "\uf023")
_CODE = Icon("file-code", "\uf121")

DEFAULT_ICON_SET = IconSet(
    dir_closed=Icon("dir-closed", "\uf07b"),
    dir_open=Icon("dir-open", "\uf07c"),
    file_default=Icon("file", "\uf15b"),
    code_default=_CODE,
    by_extension={
        ".py": _PYTHON,
        ".pyi": _PYTHON,
        ".js": _JAVASCRIPT,
        ".mjs": _JAVASCRIPT,
        ".ts": _TYPESCRIPT,
        ".tsx": _TYPESCRIPT,
        ".md": _MARKDOWN,
        ".json": _JSON,
        ".toml": _CONFIG,
        ".yaml": _CONFIG,
        ".yml": _CONFIG,
        ".ini": _CONFIG,
        ".cfg": _CONFIG,
        ".conf": _CONFIG,
        ".sh": _SHELL,
        ".bash": _SHELL,
        ".zsh": _SHELL,
        ".png": _IMAGE,
        ".jpg": _IMAGE,
        ".jpeg": _IMAGE,
        ".gif": _IMAGE,
        ".svg": _IMAGE,
        ".webp": _IMAGE,
        ".zip": _ARCHIVE,
        ".tar": _ARCHIVE,
        ".gz": _ARCHIVE,
        ".xz": _ARCHIVE,
        ".pdf": _PDF,
        ".txt": _TEXT,
        ".rst": _TEXT,
        ".html": _HTML,
        ".css": _CSS,
        ".c": _C,
        ".h": _C,
        ".cpp": _CPP,
        ".hpp": _CPP,
        ".rs": _RUST,
        ".go": _GO,
        ".java": _JAVA,
        ".rb": _RUBY,
        ".lua": _LUA,
        ".lock": _LOCK,
    },
    by_filename={
        "Dockerfile": _DOCKER,
        "Makefile": _MAKE,
        ".gitignore": _GIT,
        ".gitattributes": _GIT,
    },
    by_language={
        "python": _PYTHON,
        "javascript": _JAVASCRIPT,
        "typescript": _TYPESCRIPT,
        "markdown": _MARKDOWN,
        "json": _JSON,
        "yaml": _CONFIG,
        "toml": _CONFIG,
        "ini": _CONFIG,
        "bash": _SHELL,
        "html": _HTML,
        "css": _CSS,
        "c": _C,
        "cpp": _CPP,
        "rust": _RUST,
        "go": _GO,
        "java": _JAVA,
        "ruby": _RUBY,
        "lua": _LUA,
        "docker": _DOCKER,
        "make": _MAKE,
    },
)


def text_directory_decoration(is_open: bool, _icons: IconSet | None = None) -> Decoration:
    return Decoration.glyph(TEXT_DIR_OPEN_GLYPH if is_open else TEXT_DIR_CLOSED_GLYPH)


def text_file_decoration(_path: Path, _icons: IconSet | None = None) -> Decoration:
    return Decoration.glyph("")


def graphical_directory_decoration(is_open: bool, icons: IconSet | None = None) -> Decoration:
    return Decoration.from_icon((icons or DEFAULT_ICON_SET).icon_for_directory(is_open))


def graphical_file_decoration(path: Path, icons: IconSet | None = None) -> Decoration:
    return Decoration.from_icon((icons or DEFAULT_ICON_SET).icon_for_file(path))


def base_file_face(path: Path) -> str:
    if path.suffix.lower() in _PYTHON_SUFFIXES:
        return "tree_file_python"
    return "tree_file_default"


def file_style(path: Path, statuses: StatusMap | None) -> tuple[str, ...]:
    """Return the faces for a file row, with a git highlight when one is known."""
    base = base_file_face(path)
    if not statuses:
        return (base,)
    status = status_for_path(path, statuses)
    if status is None:
        return (base,)
    return (base, _STATUS_FACES[status])


def status_for_path(path: Path, statuses: StatusMap) -> GitStatus | None:
    """Return the status of ``path``, else that of an untracked or ignored ancestor.

    Git reports an untracked or ignored directory as a single entry, so files
    inside it inherit that directory's status.
    """
    status = statuses.get(path)
    if status is not None:
        return status
    for parent in path.parents:
        status = statuses.get(parent)
        if status in _INHERITED_STATUSES:
            return status
    return None


def directory_style() -> tuple[str, ...]:
    return DIRECTORY_STYLE


__all__ = [
    "Icon",
    "IconSet",
    "Decoration",
    "DEFAULT_ICON_SET",
    "DIRECTORY_STYLE",
    "TEXT_DIR_CLOSED_GLYPH",
    "TEXT_DIR_OPEN_GLYPH",
    "language_for_filename",
    "text_directory_decoration",
    "text_file_decoration",
    "graphical_directory_decoration",
    "graphical_file_decoration",
    "base_file_face",
    "file_style",
    "status_for_path",
    "directory_style",
]
