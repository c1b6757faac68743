"""Error types raised by lazytree.

Only configuration problems surface as exceptions. Unreadable directories and
icon/status lookup misses are absorbed where they happen.
"""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when a configured value (for example a sort mode) is not recognized."""

    def __init__(self, setting: str, value: object) -> None:
        self.setting = setting
        self.value = value
        super().__init__(f"unrecognized {setting}: {value!r}")


__all__ = ["ConfigurationError"]
