"""Tests for the command-line entry point."""

from __future__ import annotations

import contextlib
import io
import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazytree import cli, config


class CliMainTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        base = Path(self._tmp.name).resolve()
        self.root = base / "project"
        (self.root / "src").mkdir(parents=True)
        (self.root / "src" / "main.py").write_text("", encoding="utf-8")
        (self.root / "README.md").write_text("", encoding="utf-8")
        (self.root / "b.txt").write_text("", encoding="utf-8")
        patcher = mock.patch.object(config, "CONFIG_PATH", base / "config" / "config.json")
        patcher.start()
        self.addCleanup(patcher.stop)

    def _run(self, *args: str) -> tuple[int, str, str]:
        stdout = io.StringIO()
        stderr = io.StringIO()
        argv = [str(self.root), "--no-git", "--no-gitignore", "--icons", "text", *args]
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
            code = cli.main(argv)
        return code, stdout.getvalue(), stderr.getvalue()

    def test_prints_top_level_rows(self) -> None:
        code, out, _err = self._run()

        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), ["+ src/", "b.txt", "README.md"])

    def test_expand_depth_opens_directories(self) -> None:
        _code, out, _err = self._run("--expand-depth", "1")

        self.assertEqual(out.splitlines(), ["- src/", "  main.py", "b.txt", "README.md"])

    def test_expand_path_and_indent(self) -> None:
        _code, out, _err = self._run("--expand", str(self.root / "src"), "--indent", "4")

        self.assertEqual(out.splitlines()[:2], ["- src/", "    main.py"])

    def test_relative_expand_path_is_resolved_against_root(self) -> None:
        _code, out, _err = self._run("--expand", "src")

        self.assertEqual(out.splitlines()[:2], ["- src/", "  main.py"])

    def test_save_persists_sort_and_hidden_preferences(self) -> None:
        self._run("--sort", "SIZE-DESC", "--all", "--save")

        saved = json.loads(config.CONFIG_PATH.read_text(encoding="utf-8"))
        self.assertEqual(saved, {"sort_mode": "size-desc", "show_hidden": True})

    def test_without_save_config_is_untouched(self) -> None:
        self._run("--sort", "size-desc")

        self.assertFalse(config.CONFIG_PATH.exists())

    def test_invalid_sort_mode_is_not_saved(self) -> None:
        with self.assertRaises(SystemExit):
            self._run("--sort", "bogus", "--save")

        self.assertFalse(config.CONFIG_PATH.exists())

    def test_unreadable_directory_warning_goes_to_stderr(self) -> None:
        blocked = self.root / "src"
        real_scandir = os.scandir

        def scandir(path):
            if Path(path) == blocked:
                raise PermissionError(13, "Permission denied", str(path))
            return real_scandir(path)

        with mock.patch("lazytree.file_tree_model.fs.os.scandir", side_effect=scandir):
            code, out, err = self._run("--expand", "src")

        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines()[0], "- src/")
        self.assertIn(f"cannot read {blocked}: Permission denied", err)
        self.assertNotIn("\033[", err)

    def test_sort_override(self) -> None:
        _code, out, _err = self._run("--sort", "alphabetic-desc")

        self.assertEqual(out.splitlines(), ["+ src/", "README.md", "b.txt"])

    def test_invalid_sort_mode_exits(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            self._run("--sort", "bogus")

        self.assertIn("sort mode", str(ctx.exception.code))

    def test_missing_directory_exits(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            cli.main([str(self.root / "missing"), "--no-git"])

        self.assertIn("Not a directory", str(ctx.exception.code))

    def test_invalid_indent_is_rejected_by_parser(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as ctx:
            cli.main([str(self.root), "--indent", "0"])

        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
