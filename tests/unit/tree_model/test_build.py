"""Tests for node construction and run linking."""

from __future__ import annotations

import unittest
from pathlib import Path

from lazytree.file_tree_model import Entry
from lazytree.tree_model import EMPTY_RUN, NodeArena, NodeState, build_nodes, indentation, iter_chain, join_runs


def _factory(arena: NodeArena, state: NodeState):
    def make(entry: Entry, depth: int, parent):
        return arena.add(entry.path, state, depth, parent)

    return make


class BuildNodesTests(unittest.TestCase):
    def test_threads_prev_and_next_in_entry_order(self) -> None:
        arena = NodeArena()
        entries = [Entry(Path(f"/p/{name}"), False) for name in ("a", "b", "c")]

        run = build_nodes(entries, 1, None, _factory(arena, NodeState.FILE))

        nodes = list(iter_chain(arena, run.head))
        self.assertEqual([node.name for node in nodes], ["a", "b", "c"])
        self.assertIsNone(nodes[0].prev_node)
        self.assertIsNone(nodes[-1].next_node)
        self.assertEqual(run.tail, nodes[-1].handle)
        for node in nodes[:-1]:
            self.assertEqual(arena[node.next_node].prev_node, node.handle)
        self.assertTrue(all(node.depth == 1 for node in nodes))

    def test_empty_entries_give_empty_sentinel(self) -> None:
        arena = NodeArena()

        run = build_nodes([], 0, None, _factory(arena, NodeState.FILE))

        self.assertIs(run, EMPTY_RUN)
        self.assertFalse(run)
        self.assertEqual(len(arena), 0)

    def test_join_runs_links_tail_to_head(self) -> None:
        arena = NodeArena()
        dirs = build_nodes([Entry(Path("/p/d"), True)], 0, None, _factory(arena, NodeState.DIR_CLOSED))
        files = build_nodes([Entry(Path("/p/f"), False)], 0, None, _factory(arena, NodeState.FILE))

        joined = join_runs(arena, dirs, files)

        self.assertEqual(joined.head, dirs.head)
        self.assertEqual(joined.tail, files.tail)
        self.assertEqual(arena[dirs.tail].next_node, files.head)
        self.assertEqual(arena[files.head].prev_node, dirs.tail)

    def test_join_runs_skips_empty_sides(self) -> None:
        arena = NodeArena()
        files = build_nodes([Entry(Path("/p/f"), False)], 0, None, _factory(arena, NodeState.FILE))

        self.assertEqual(join_runs(arena, EMPTY_RUN, files), files)
        self.assertEqual(join_runs(arena, files, EMPTY_RUN), files)
        self.assertIsNone(arena[files.head].prev_node)


class IndentationTests(unittest.TestCase):
    def test_depth_times_width(self) -> None:
        self.assertEqual(indentation(0, 2), "")
        self.assertEqual(indentation(3, 2), "      ")
        self.assertEqual(indentation(2, 4), " " * 8)

    def test_negative_depth_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            indentation(-1, 2)
        with self.assertRaises(ValueError):
            NodeArena().add(Path("/p"), NodeState.FILE, -1)


class NodeArenaTests(unittest.TestCase):
    def test_handles_are_not_reused_after_removal(self) -> None:
        arena = NodeArena()
        first = arena.add(Path("/p/a"), NodeState.FILE, 0)
        arena.remove_many([first.handle])
        second = arena.add(Path("/p/b"), NodeState.FILE, 0)

        self.assertNotEqual(first.handle, second.handle)
        self.assertNotIn(first.handle, arena)
        self.assertIn(second.handle, arena)
        self.assertIsNone(arena.get(first.handle))


if __name__ == "__main__":
    unittest.main()
