"""Read-only listing that mirrors the directory selected in the active view."""

from __future__ import annotations

from pathlib import Path

from .debug import get_logger
from .entries import PARENT_ENTRY_NAME, Entry, list_entries
from .view import View

logger = get_logger(__name__)


class PreviewBinding:
    """Secondary listing recomputed from a driving view's selection."""

    def __init__(self) -> None:
        self.path: Path | None = None
        self.entries: list[Entry] = []
        self.active = False

    def clear(self) -> None:
        self.path = None
        self.entries = []
        self.active = False

    def sync(self, view: View) -> None:
        """Mirror the selected entry of ``view`` when it is a directory.

        Listing failures leave the preview empty and inactive.
        """
        entry = view.selected_entry
        if entry is None or entry.name == PARENT_ENTRY_NAME or not entry.navigable(view.link_dirs):
            self.clear()
            return

        target = view.path / entry.name
        try:
            resolved = target.resolve(strict=True)
            entries = list_entries(resolved, view.show_hidden, link_dirs=view.link_dirs)
        except OSError as exc:
            logger.debug("preview of %s unavailable: %s", target, exc)
            self.clear()
            return

        self.path = resolved
        self.entries = entries
        self.active = True


__all__ = ["PreviewBinding"]
