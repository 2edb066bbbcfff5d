"""Tests for depth-indexed and path-keyed scroll offset memory."""

from __future__ import annotations

import unittest
from pathlib import Path

from sfnav.offsets import OffsetStack, PathOffsetMemory, make_offset_memory


class OffsetStackTests(unittest.TestCase):
    def test_grow_reserves_depth_plus_two_slots(self) -> None:
        stack = OffsetStack()
        stack.grow(3)
        self.assertEqual(stack.slots, [0, 0, 0, 0, 0])

    def test_stack_never_shrinks(self) -> None:
        stack = OffsetStack()
        stack.grow(4)
        stack.set(Path("/a/b/c/d"), 4, 7)
        stack.grow(1)
        self.assertEqual(len(stack), 6)
        self.assertEqual(stack.get(Path("/a/b/c/d"), 4), 7)

    def test_new_slots_start_at_zero_and_keep_existing_values(self) -> None:
        stack = OffsetStack()
        stack.grow(1)
        stack.set(Path("/a"), 1, 3)
        stack.grow(3)
        self.assertEqual(stack.slots, [0, 3, 0, 0, 0])

    def test_siblings_at_same_depth_share_an_offset(self) -> None:
        stack = OffsetStack()
        stack.grow(2)
        stack.set(Path("/a/one"), 2, 9)
        self.assertEqual(stack.get(Path("/a/two"), 2), 9)

    def test_reset_child_clears_next_depth(self) -> None:
        stack = OffsetStack()
        stack.grow(1)
        stack.set(Path("/a"), 1, 4)
        stack.set(Path("/a/b"), 2, 5)
        stack.reset_child(Path("/a"), 1, Path("/a/b"))
        self.assertEqual(stack.slots, [0, 4, 0])

    def test_reading_before_growth_is_a_programming_error(self) -> None:
        stack = OffsetStack()
        with self.assertRaises(AssertionError):
            stack.get(Path("/a"), 1)
        with self.assertRaises(AssertionError):
            stack.reset_child(Path("/"), 0, None)

    def test_negative_offsets_are_clamped(self) -> None:
        stack = OffsetStack()
        stack.grow(0)
        stack.set(Path("/"), 0, -3)
        self.assertEqual(stack.get(Path("/"), 0), 0)


class PathOffsetMemoryTests(unittest.TestCase):
    def test_siblings_keep_separate_offsets(self) -> None:
        memory = PathOffsetMemory()
        memory.set(Path("/a/one"), 2, 9)
        self.assertEqual(memory.get(Path("/a/one"), 2), 9)
        self.assertEqual(memory.get(Path("/a/two"), 2), 0)

    def test_reset_child_forgets_only_that_child(self) -> None:
        memory = PathOffsetMemory()
        memory.set(Path("/a/one"), 2, 9)
        memory.set(Path("/a/two"), 2, 4)
        memory.reset_child(Path("/a"), 1, Path("/a/one"))
        self.assertEqual(memory.get(Path("/a/one"), 2), 0)
        self.assertEqual(memory.get(Path("/a/two"), 2), 4)

    def test_factory(self) -> None:
        self.assertIsInstance(make_offset_memory("depth"), OffsetStack)
        self.assertIsInstance(make_offset_memory("path"), PathOffsetMemory)
        with self.assertRaises(ValueError):
            make_offset_memory("inode")


if __name__ == "__main__":
    unittest.main()
