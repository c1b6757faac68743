"""Tests for icon lookup, decoration strategies, and file styles."""

from __future__ import annotations

import unittest
from pathlib import Path

from lazytree.git_status import GitStatus
from lazytree.icons import (
    DEFAULT_ICON_SET,
    Icon,
    IconSet,
    file_style,
    graphical_directory_decoration,
    graphical_file_decoration,
    language_for_filename,
    status_for_path,
    text_directory_decoration,
    text_file_decoration,
)


class IconLookupTests(unittest.TestCase):
    def test_extension_match_is_case_insensitive(self) -> None:
        self.assertEqual(
            DEFAULT_ICON_SET.icon_for_file(Path("foo.PNG")),
            DEFAULT_ICON_SET.icon_for_file(Path("foo.png")),
        )
        self.assertEqual(DEFAULT_ICON_SET.icon_for_file(Path("foo.PNG")).name, "file-image")

    def test_unknown_or_missing_extension_uses_default_icon(self) -> None:
        self.assertIs(DEFAULT_ICON_SET.icon_for_file(Path("foo.unknownext")), DEFAULT_ICON_SET.file_default)
        self.assertIs(DEFAULT_ICON_SET.icon_for_file(Path("noextension")), DEFAULT_ICON_SET.file_default)

    def test_exact_filename_match(self) -> None:
        self.assertEqual(DEFAULT_ICON_SET.icon_for_file(Path("Makefile")).name, "file-make")

    def test_pygments_language_fallback(self) -> None:
        self.assertEqual(language_for_filename("script.pyw"), "python")
        self.assertEqual(DEFAULT_ICON_SET.icon_for_file(Path("script.pyw")).name, "file-python")
        self.assertIsNone(language_for_filename("foo.unknownext"))

    def test_upper_case_extension_resolved_through_pygments(self) -> None:
        for lower, upper in ((Path("main.kt"), Path("main.KT")), (Path("p.pyw"), Path("p.PYW"))):
            self.assertEqual(DEFAULT_ICON_SET.icon_for_file(lower), DEFAULT_ICON_SET.icon_for_file(upper))
        self.assertEqual(DEFAULT_ICON_SET.icon_for_file(Path("main.KT")).name, "file-code")
        self.assertEqual(DEFAULT_ICON_SET.icon_for_file(Path("p.PYW")).name, "file-python")

    def test_language_without_dedicated_icon_uses_code_icon(self) -> None:
        icons = IconSet(
            dir_closed=Icon("closed", "C"),
            dir_open=Icon("open", "O"),
            file_default=Icon("file", "F"),
            by_language={"rust": Icon("rust", "R")},
            code_default=Icon("code", "<>"),
        )

        self.assertEqual(icons.icon_for_file(Path("main.py")).name, "code")
        self.assertEqual(icons.icon_for_file(Path("lib.rs")).name, "rust")
        self.assertEqual(icons.icon_for_file(Path("notes.unknownext")).name, "file")


class DecorationStrategyTests(unittest.TestCase):
    def test_text_mode(self) -> None:
        self.assertEqual(text_directory_decoration(False).text, "+")
        self.assertEqual(text_directory_decoration(True).text, "-")
        self.assertEqual(text_directory_decoration(False).kind, "text")
        self.assertEqual(text_file_decoration(Path("a.py")).text, "")

    def test_graphical_mode(self) -> None:
        closed = graphical_directory_decoration(False, DEFAULT_ICON_SET)
        opened = graphical_directory_decoration(True, DEFAULT_ICON_SET)
        self.assertEqual((closed.kind, closed.icon), ("icon", "dir-closed"))
        self.assertEqual(opened.icon, "dir-open")
        self.assertEqual(opened.text, DEFAULT_ICON_SET.dir_open.glyph)
        self.assertEqual(graphical_file_decoration(Path("x.md"), DEFAULT_ICON_SET).icon, "file-markdown")


class FileStyleTests(unittest.TestCase):
    def test_status_highlight_is_layered_over_base_face(self) -> None:
        statuses = {
            Path("/p/a.py"): GitStatus.MODIFIED,
            Path("/p/b.txt"): GitStatus.IGNORED,
            Path("/p/c.txt"): GitStatus.CONFLICT,
        }

        self.assertEqual(file_style(Path("/p/a.py"), statuses), ("tree_file_python", "git_modified"))
        self.assertEqual(file_style(Path("/p/b.txt"), statuses), ("tree_file_default", "git_ignored"))
        self.assertEqual(file_style(Path("/p/c.txt"), statuses), ("tree_file_default", "git_conflict"))

    def test_missing_status_falls_back_to_base_face(self) -> None:
        self.assertEqual(file_style(Path("/p/d.txt"), {}), ("tree_file_default",))
        self.assertEqual(file_style(Path("/p/d.txt"), None), ("tree_file_default",))

    def test_files_inherit_untracked_or_ignored_directory_status(self) -> None:
        statuses = {
            Path("/p/newdir"): GitStatus.UNTRACKED,
            Path("/p/build"): GitStatus.IGNORED,
        }

        self.assertEqual(file_style(Path("/p/newdir/a.txt"), statuses), ("tree_file_default", "git_untracked"))
        self.assertEqual(file_style(Path("/p/build/lib/x.py"), statuses), ("tree_file_python", "git_ignored"))
        self.assertEqual(file_style(Path("/p/src/a.txt"), statuses), ("tree_file_default",))
        self.assertIsNone(status_for_path(Path("/p/src/a.txt"), statuses))

    def test_own_status_wins_over_inherited(self) -> None:
        statuses = {
            Path("/p/build"): GitStatus.IGNORED,
            Path("/p/build/keep.txt"): GitStatus.ADDED,
        }

        self.assertIs(status_for_path(Path("/p/build/keep.txt"), statuses), GitStatus.ADDED)


if __name__ == "__main__":
    unittest.main()
