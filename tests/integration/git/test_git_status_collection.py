"""Git status collection against a real repository."""

from __future__ import annotations

import shutil
import subprocess
import tempfile
import unittest
from pathlib import Path

from lazytree.git_status import GitStatus, collect_git_status
from lazytree.icons import file_style, status_for_path


@unittest.skipIf(shutil.which("git") is None, "git is required for status collection tests")
class CollectGitStatusTests(unittest.TestCase):
    def test_collects_untracked_added_and_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            subprocess.run(["git", "init", "-q"], cwd=root, check=True)
            (root / ".gitignore").write_text("*.log\n", encoding="utf-8")
            (root / "new.txt").write_text("n", encoding="utf-8")
            (root / "staged.txt").write_text("s", encoding="utf-8")
            (root / "debug.log").write_text("d", encoding="utf-8")
            subprocess.run(["git", "add", "staged.txt"], cwd=root, check=True)

            statuses = collect_git_status(root)

            self.assertIs(statuses[root / "new.txt"], GitStatus.UNTRACKED)
            self.assertIs(statuses[root / "staged.txt"], GitStatus.ADDED)
            self.assertIs(statuses[root / "debug.log"], GitStatus.IGNORED)

    def test_files_inside_untracked_directory_are_highlighted(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            subprocess.run(["git", "init", "-q"], cwd=root, check=True)
            (root / "newdir").mkdir()
            (root / "newdir" / "a.txt").write_text("a", encoding="utf-8")

            statuses = collect_git_status(root)

            self.assertIs(status_for_path(root / "newdir" / "a.txt", statuses), GitStatus.UNTRACKED)
            self.assertEqual(
                file_style(root / "newdir" / "a.txt", statuses),
                ("tree_file_default", "git_untracked"),
            )

    def test_outside_repository_is_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            if subprocess.run(
                ["git", "-C", str(root), "rev-parse", "--show-toplevel"],
                capture_output=True,
                check=False,
            ).returncode == 0:
                self.skipTest("temporary directory is inside a git repository")

            self.assertEqual(collect_git_status(root), {})


if __name__ == "__main__":
    unittest.main()
