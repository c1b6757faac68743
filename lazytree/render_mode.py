"""Render-mode detection and the active decoration strategy.

The terminal's ability to draw icon glyphs can change between calls (for
example when a session is re-attached from another terminal). The monitor
compares the current capability with the last observed one and swaps the
decoration strategies in its ``RenderContext`` when they differ.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from functools import partial
from pathlib import Path

from .icons import (
    DEFAULT_ICON_SET,
    Decoration,
    IconSet,
    graphical_directory_decoration,
    graphical_file_decoration,
    text_directory_decoration,
    text_file_decoration,
)

logger = logging.getLogger(__name__)

ICONS_ENV_VAR = "LAZYTREE_ICONS"
_GRAPHICAL_TERM_PROGRAMS = frozenset({"WezTerm", "iTerm.app", "ghostty"})

_UNOBSERVED = object()


class RenderMode(str, Enum):
    GRAPHICAL = "graphical"
    TEXT = "text"


def detect_graphical_icons(environ: Mapping[str, str] | None = None) -> bool:
    """Return whether the terminal appears able to draw icon glyphs.

    ``LAZYTREE_ICONS=graphical|text`` overrides detection.
    """
    env = os.environ if environ is None else environ
    override = env.get(ICONS_ENV_VAR, "").strip().lower()
    if override in {RenderMode.GRAPHICAL.value, "1", "yes"}:
        return True
    if override in {RenderMode.TEXT.value, "0", "no"}:
        return False
    if env.get("TERM", "") == "xterm-kitty" or env.get("KITTY_WINDOW_ID"):
        return True
    return env.get("TERM_PROGRAM", "") in _GRAPHICAL_TERM_PROGRAMS


@dataclass
class RenderContext:
    """Currently active decoration strategies.

    ``mode`` is ``None`` until the monitor has queried the terminal once; the
    text strategies are used in the meantime.
    """

    mode: RenderMode | None = None
    icons: IconSet | None = None
    directory_decoration: Callable[[bool], Decoration] = text_directory_decoration
    file_decoration: Callable[[Path], Decoration] = text_file_decoration


class RenderModeMonitor:
    """Swap decoration strategies whenever the capability query changes."""

    def __init__(
        self,
        query: Callable[[], object] = detect_graphical_icons,
        icon_set: IconSet = DEFAULT_ICON_SET,
    ) -> None:
        self._query = query
        self._icon_set = icon_set
        self._lock = threading.Lock()
        self._last_observed: object = _UNOBSERVED
        self.context = RenderContext()

    @property
    def mode(self) -> RenderMode | None:
        return self.context.mode

    def check(self) -> bool:
        """Re-query capability; return ``True`` when the strategy was swapped."""
        with self._lock:
            observed = self._query()
            if self._last_observed is not _UNOBSERVED and observed == self._last_observed:
                return False
            self._last_observed = observed
            mode = RenderMode.GRAPHICAL if observed else RenderMode.TEXT
            self._swap(mode)
        logger.debug("render mode switched to %s", mode.value)
        return True

    def _swap(self, mode: RenderMode) -> None:
        # Replaced whole: a pass reads ``self.context`` once.
        if mode is RenderMode.GRAPHICAL:
            self.context = RenderContext(
                mode=mode,
                icons=self._icon_set,
                directory_decoration=partial(graphical_directory_decoration, icons=self._icon_set),
                file_decoration=partial(graphical_file_decoration, icons=self._icon_set),
            )
        else:
            self.context = RenderContext(mode=mode)


def fixed_capability(enabled: bool) -> Callable[[], bool]:
    """Capability query that always answers ``enabled`` (used for --icons)."""
    return lambda: enabled


__all__ = [
    "ICONS_ENV_VAR",
    "RenderMode",
    "RenderContext",
    "RenderModeMonitor",
    "detect_graphical_icons",
    "fixed_capability",
]
