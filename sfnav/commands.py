"""User-level commands bound to a view set.

Each command returns ``True`` when it changed something worth redrawing.
``quit`` flips ``should_quit``; the loop checks it after every dispatch.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from .config import Settings
from .debug import get_logger
from .entries import EntryKind
from .launcher import SpawnMode, SpawnResult, command_for, spawn
from .view import NavigationResult
from .view_set import ViewSet

logger = get_logger(__name__)

OPEN_MODE = SpawnMode.QUIET | SpawnMode.DETACH
EDIT_MODE = SpawnMode.TERMINAL


class NavigatorCommands:
    """Command surface for the interactive loop."""

    def __init__(
        self,
        view_set: ViewSet,
        settings: Settings,
        *,
        suspend_tui: Callable[[], None] | None = None,
        resume_tui: Callable[[], None] | None = None,
        spawner: Callable[..., SpawnResult] = spawn,
    ) -> None:
        self.view_set = view_set
        self.settings = settings
        self.show_hidden = settings.show_hidden
        self.should_quit = False
        self.last_spawn: SpawnResult | None = None
        self._suspend_tui = suspend_tui
        self._resume_tui = resume_tui
        self._spawn = spawner

    def _after_navigation(self, result: NavigationResult) -> bool:
        if result:
            self.view_set.restore_working_directory()
        return result.accepted

    def ascend(self) -> bool:
        return self._after_navigation(self.view_set.active.ascend())

    def descend(self) -> bool:
        return self._after_navigation(self.view_set.active.descend())

    def move_up(self) -> bool:
        return self.view_set.active.move_selection(-1)

    def move_down(self) -> bool:
        return self.view_set.active.move_selection(1)

    def _selected_target(self) -> Path | None:
        selected = self.view_set.active.selected_path()
        if selected is None:
            return None
        return selected.resolve()

    def _launch(self, program: str, target: Path, mode: SpawnMode) -> bool:
        try:
            argv = command_for(program, target)
        except ValueError as exc:
            logger.warning("cannot launch %r: %s", program, exc)
            return False
        self.last_spawn = self._spawn(
            argv,
            mode,
            cwd=self.view_set.active.path,
            suspend_tui=self._suspend_tui,
            resume_tui=self._resume_tui,
        )
        return True

    def open_selected(self) -> bool:
        """Open a selected file with the opener; directories are entered."""
        entry = self.view_set.active.selected_entry
        if entry is None:
            return False
        if entry.navigable(self.view_set.active.link_dirs):
            return self.descend()
        if entry.kind is not EntryKind.FILE:
            return False
        target = self._selected_target()
        if target is None:
            return False
        self._launch(self.settings.opener, target, OPEN_MODE)
        return False

    def edit_selected(self) -> bool:
        """Edit the selected entry, handing the terminal to the editor."""
        target = self._selected_target()
        if target is None:
            return False
        launched = self._launch(self.settings.editor, target, EDIT_MODE)
        if launched:
            # The editor may have created, renamed, or removed entries.
            self.view_set.active.refresh()
        return launched

    def toggle_hidden(self) -> bool:
        """Flip hidden-file visibility for every view; reload the active one."""
        show_hidden = not self.show_hidden
        view = self.view_set.active
        if not view.refresh(show_hidden):
            return False
        self.show_hidden = show_hidden
        for other in self.view_set.views:
            other.show_hidden = show_hidden
        return True

    def switch_view(self, index: int) -> bool:
        return self.view_set.switch_to(index)

    def quit(self) -> bool:
        self.should_quit = True
        return True

    def redraw(self) -> bool:
        return True


__all__ = ["EDIT_MODE", "OPEN_MODE", "NavigatorCommands"]
