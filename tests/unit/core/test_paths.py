"""Tests for canonicalization, depth, and last-component helpers."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from sfnav.paths import canonical_depth, canonicalize, depth, top_component


class PathHelperTests(unittest.TestCase):
    def test_root_has_depth_zero(self) -> None:
        self.assertEqual(depth("/"), 0)

    def test_depth_counts_separators_below_root(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            nested = root / "a" / "b"
            nested.mkdir(parents=True)

            self.assertEqual(depth(nested), len(root.parts) - 1 + 2)
            self.assertEqual(depth(nested / ".."), depth(root / "a"))

    def test_depth_fails_for_missing_paths(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(OSError):
                depth(Path(tmp) / "missing")

    def test_canonical_depth_does_not_touch_disk(self) -> None:
        self.assertEqual(canonical_depth(Path("/no/such/place")), 3)

    def test_canonicalize_resolves_relative_against_base_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "child").mkdir()
            previous_cwd = Path.cwd()
            try:
                os.chdir("/")
                self.assertEqual(canonicalize("child", base_path=root), root / "child")
                self.assertEqual(canonicalize("child/..", base_path=root), root)
            finally:
                os.chdir(previous_cwd)

    def test_canonicalize_resolves_symlinks(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "real").mkdir()
            (root / "alias").symlink_to(root / "real", target_is_directory=True)

            self.assertEqual(canonicalize(root / "alias"), root / "real")

    def test_canonicalize_requires_base_for_relative_paths(self) -> None:
        with self.assertRaises(ValueError):
            canonicalize("relative")

    def test_top_component(self) -> None:
        self.assertEqual(top_component("/home/user/project"), "project")
        self.assertEqual(top_component("/home/user/project/"), "project")
        self.assertEqual(top_component("/home"), "home")
        self.assertEqual(top_component("/"), "/")
        self.assertEqual(top_component(Path("/tmp/x")), "x")


if __name__ == "__main__":
    unittest.main()
