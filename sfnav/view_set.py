"""Fixed collection of views with exactly one active view."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

from .debug import get_logger
from .offsets import make_offset_memory
from .preview import PreviewBinding
from .view import View

logger = get_logger(__name__)


class ViewSet:
    """``count`` independent views plus the preview driven by the active one.

    The number of views is fixed at construction. Switching views changes the
    process working directory so launched programs inherit it.
    """

    def __init__(
        self,
        start_path: Path | str,
        count: int,
        *,
        show_hidden: bool = False,
        link_dirs: bool = False,
        show_parent_entry: bool = False,
        offset_memory: str = "depth",
        change_directory: Callable[[Path], None] = os.chdir,
    ) -> None:
        if count < 1:
            raise ValueError(f"view count must be >= 1, got {count}")
        self.active_index = 0
        self.preview = PreviewBinding()
        self._change_directory = change_directory
        self._views: tuple[View, ...] = ()
        self._views = tuple(
            View(
                start_path,
                show_hidden=show_hidden,
                link_dirs=link_dirs,
                show_parent_entry=show_parent_entry,
                offsets=make_offset_memory(offset_memory),
                on_selection=self._selection_changed,
            )
            for _ in range(count)
        )
        self.switch_to(0)

    @property
    def views(self) -> tuple[View, ...]:
        return self._views

    @property
    def count(self) -> int:
        return len(self._views)

    @property
    def active(self) -> View:
        return self._views[self.active_index]

    def _selection_changed(self, view: View) -> None:
        # Views are still being built during __init__; nothing is active yet.
        if not self._views or view is not self.active:
            return
        self.preview.sync(view)

    def switch_to(self, index: int) -> bool:
        """Activate view ``index``; out-of-range indices are ignored.

        A view whose listing predates a hidden-file toggle is relisted first.
        """
        if not 0 <= index < len(self._views):
            return False
        self.active_index = index
        view = self.active
        if view.stale:
            view.refresh()
        try:
            self._change_directory(view.path)
        except OSError as exc:
            logger.debug("cannot change directory to %s: %s", view.path, exc)
        logger.debug("switched to view %d at %s", index + 1, view.path)
        self.preview.sync(view)
        return True

    def restore_working_directory(self) -> None:
        """Point the process working directory back at the active view."""
        try:
            self._change_directory(self.active.path)
        except OSError as exc:
            logger.debug("cannot change directory to %s: %s", self.active.path, exc)


__all__ = ["ViewSet"]
