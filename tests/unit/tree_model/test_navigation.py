"""Tests for walking the flat node chain."""

from __future__ import annotations

import unittest
from pathlib import Path

from lazytree.tree_model import (
    NodeArena,
    NodeState,
    find_node,
    link,
    next_directory,
    next_sibling_at_depth,
    next_visible,
    previous_visible,
    subtree_handles,
    subtree_tail,
)


class ChainNavigationTests(unittest.TestCase):
    def setUp(self) -> None:
        # src/ (open)
        #   lib/
        #   main.py
        # docs/
        # README.md
        self.arena = NodeArena()
        add = self.arena.add
        self.src = add(Path("/p/src"), NodeState.DIR_OPEN, 0).handle
        self.lib = add(Path("/p/src/lib"), NodeState.DIR_CLOSED, 1, self.src).handle
        self.main = add(Path("/p/src/main.py"), NodeState.FILE, 1, self.src).handle
        self.docs = add(Path("/p/docs"), NodeState.DIR_CLOSED, 0).handle
        self.readme = add(Path("/p/README.md"), NodeState.FILE, 0).handle
        chain = [self.src, self.lib, self.main, self.docs, self.readme]
        for first, second in zip(chain, chain[1:]):
            link(self.arena, first, second)

    def test_next_and_previous_visible(self) -> None:
        self.assertEqual(next_visible(self.arena, self.src), self.lib)
        self.assertEqual(previous_visible(self.arena, self.docs), self.main)
        self.assertIsNone(previous_visible(self.arena, self.src))
        self.assertIsNone(next_visible(self.arena, self.readme))

    def test_subtree_bounds(self) -> None:
        self.assertEqual(subtree_handles(self.arena, self.src), [self.lib, self.main])
        self.assertEqual(subtree_tail(self.arena, self.src), self.main)
        self.assertEqual(subtree_handles(self.arena, self.docs), [])
        self.assertEqual(subtree_tail(self.arena, self.docs), self.docs)

    def test_sibling_jumps_skip_open_subtrees(self) -> None:
        self.assertEqual(next_sibling_at_depth(self.arena, self.src, 1), self.docs)
        self.assertEqual(next_sibling_at_depth(self.arena, self.docs, -1), self.src)
        self.assertEqual(next_sibling_at_depth(self.arena, self.lib, 1), self.main)
        self.assertIsNone(next_sibling_at_depth(self.arena, self.main, 1))
        self.assertIsNone(next_sibling_at_depth(self.arena, self.src, 0))

    def test_next_directory(self) -> None:
        self.assertEqual(next_directory(self.arena, self.lib, 1), self.docs)
        self.assertEqual(next_directory(self.arena, self.docs, -1), self.lib)
        self.assertIsNone(next_directory(self.arena, self.docs, 1))

    def test_find_node(self) -> None:
        self.assertEqual(find_node(self.arena, self.src, Path("/p/src/main.py")), self.main)
        self.assertIsNone(find_node(self.arena, self.src, Path("/p/missing")))


if __name__ == "__main__":
    unittest.main()
