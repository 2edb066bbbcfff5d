"""Tests for the user-level command surface bound to a view set."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from sfnav.commands import EDIT_MODE, OPEN_MODE, NavigatorCommands
from sfnav.config import Settings
from sfnav.launcher import SpawnResult
from sfnav.view_set import ViewSet


class _RecordingSpawner:
    def __init__(self) -> None:
        self.calls: list[tuple[list[str], object, dict]] = []

    def __call__(self, argv, mode, **kwargs) -> SpawnResult:
        self.calls.append((list(argv), mode, kwargs))
        return SpawnResult(tuple(argv), 1234, 0)


class NavigatorCommandsTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        (self.root / "src").mkdir()
        (self.root / "src" / "main.py").write_text("print()\n", encoding="utf-8")
        (self.root / ".cache").mkdir()
        (self.root / "readme.md").write_text("# hi\n", encoding="utf-8")
        self.chdir_calls: list[Path] = []
        self.view_set = ViewSet(self.root, 3, change_directory=self.chdir_calls.append)
        self.spawner = _RecordingSpawner()
        self.suspend = lambda: None
        self.resume = lambda: None
        self.commands = NavigatorCommands(
            self.view_set,
            Settings(opener="xdg-open", editor="vim -p"),
            suspend_tui=self.suspend,
            resume_tui=self.resume,
            spawner=self.spawner,
        )

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _select(self, name: str) -> None:
        view = self.view_set.active
        view.set_selected_index(view.index_of(name))

    def test_open_file_launches_opener_detached_and_quiet(self) -> None:
        self._select("readme.md")

        changed = self.commands.open_selected()

        self.assertFalse(changed)
        argv, mode, kwargs = self.spawner.calls[0]
        self.assertEqual(argv, ["xdg-open", str(self.root / "readme.md")])
        self.assertEqual(mode, OPEN_MODE)
        self.assertEqual(kwargs["cwd"], self.root)
        self.assertEqual(self.commands.last_spawn.pid, 1234)

    def test_open_directory_descends(self) -> None:
        self._select("src")

        self.assertTrue(self.commands.open_selected())

        self.assertEqual(self.view_set.active.path, self.root / "src")
        self.assertEqual(self.chdir_calls[-1], self.root / "src")
        self.assertEqual(self.spawner.calls, [])

    def test_edit_hands_terminal_to_editor(self) -> None:
        self._select("src")

        self.assertTrue(self.commands.edit_selected())

        argv, mode, kwargs = self.spawner.calls[0]
        self.assertEqual(argv, ["vim", "-p", str(self.root / "src")])
        self.assertEqual(mode, EDIT_MODE)
        self.assertIs(kwargs["suspend_tui"], self.suspend)
        self.assertIs(kwargs["resume_tui"], self.resume)

    def test_edit_refreshes_listing_afterwards(self) -> None:
        self._select("readme.md")

        def creating_spawner(argv, mode, **kwargs):
            (self.root / "new.txt").write_text("", encoding="utf-8")
            return SpawnResult(tuple(argv), 1, 0)

        self.commands._spawn = creating_spawner
        self.commands.edit_selected()

        self.assertIsNotNone(self.view_set.active.index_of("new.txt"))
        self.assertEqual(self.view_set.active.selected_entry.name, "readme.md")

    def test_edit_in_empty_directory_does_nothing(self) -> None:
        (self.root / "src" / "main.py").unlink()
        self._select("src")
        self.commands.descend()

        self.assertFalse(self.commands.edit_selected())
        self.assertEqual(self.spawner.calls, [])

    def test_failed_launch_leaves_view_unchanged(self) -> None:
        commands = NavigatorCommands(self.view_set, Settings(opener="/nonexistent/sfnav-opener"))
        self._select("readme.md")
        before = (self.view_set.active.path, self.view_set.active.selected_index)

        commands.open_selected()

        self.assertEqual((self.view_set.active.path, self.view_set.active.selected_index), before)
        self.assertFalse(commands.last_spawn.launched)
        self.assertEqual(commands.last_spawn.returncode, 127)

    def test_ascend_and_descend_follow_working_directory(self) -> None:
        self._select("src")
        self.assertTrue(self.commands.descend())
        self.assertTrue(self.commands.ascend())

        self.assertEqual(self.view_set.active.path, self.root)
        self.assertEqual(self.view_set.active.selected_entry.name, "src")
        self.assertEqual(self.chdir_calls[-2:], [self.root / "src", self.root])

    def test_descend_on_file_is_rejected(self) -> None:
        self._select("readme.md")
        calls_before = len(self.chdir_calls)
        self.assertFalse(self.commands.descend())
        self.assertEqual(len(self.chdir_calls), calls_before)

    def test_move_commands_report_boundaries(self) -> None:
        self.assertFalse(self.commands.move_up())
        self.assertTrue(self.commands.move_down())
        self.assertFalse(self.commands.move_down())
        self.assertTrue(self.commands.move_up())

    def test_toggle_hidden_applies_to_every_view(self) -> None:
        self.assertIsNone(self.view_set.active.index_of(".cache"))

        self.assertTrue(self.commands.toggle_hidden())

        self.assertIsNotNone(self.view_set.active.index_of(".cache"))
        self.assertTrue(all(view.show_hidden for view in self.view_set.views))
        self.commands.switch_view(1)
        self.assertIsNotNone(self.view_set.active.index_of(".cache"))
        self.assertTrue(self.commands.toggle_hidden())
        self.assertIsNone(self.view_set.active.index_of(".cache"))

    def test_toggle_hidden_twice_restores_listing(self) -> None:
        self.commands.toggle_hidden()
        self.commands.toggle_hidden()
        self.assertFalse(self.commands.show_hidden)
        self.assertIsNone(self.view_set.active.index_of(".cache"))

    def test_switch_view_and_quit(self) -> None:
        self.assertTrue(self.commands.switch_view(2))
        self.assertEqual(self.view_set.active_index, 2)
        self.assertFalse(self.commands.switch_view(3))

        self.assertFalse(self.commands.should_quit)
        self.commands.quit()
        self.assertTrue(self.commands.should_quit)


if __name__ == "__main__":
    unittest.main()
