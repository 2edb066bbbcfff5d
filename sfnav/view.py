"""Navigation state for one browsing view.

A view owns its current directory, the sorted listing of that directory, the
selected index, and its own remembered scroll offsets. Path-changing
transitions return a ``NavigationResult``; rejected transitions leave the
view exactly as it was.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .debug import get_logger
from .entries import PARENT_ENTRY_NAME, Entry, list_entries
from .offsets import OffsetMemory, OffsetStack
from .paths import canonical_depth, canonicalize, top_component

logger = get_logger(__name__)


@dataclass(frozen=True)
class NavigationResult:
    """Outcome of a path-changing transition. Falsy when rejected."""

    accepted: bool
    path: Path
    reason: str = ""
    error: OSError | None = None

    def __bool__(self) -> bool:
        return self.accepted


class View:
    """One independent browsing context."""

    def __init__(
        self,
        path: Path | str,
        *,
        show_hidden: bool = False,
        link_dirs: bool = False,
        show_parent_entry: bool = False,
        offsets: OffsetMemory | None = None,
        on_selection: Callable[[View], None] | None = None,
    ) -> None:
        self.path = canonicalize(path, base_path=Path.cwd())
        self.entries: list[Entry] = []
        self.selected_index = 0
        self.show_hidden = show_hidden
        self.link_dirs = link_dirs
        self.show_parent_entry = show_parent_entry
        self.offsets: OffsetMemory = offsets if offsets is not None else OffsetStack()
        self.on_selection = on_selection
        self.listed_hidden = show_hidden
        self.offsets.grow(self.depth)
        result = self.set_path(self.path)
        if not result:
            logger.warning("cannot list start directory %s: %s", self.path, result.reason)

    @property
    def depth(self) -> int:
        return canonical_depth(self.path)

    @property
    def stale(self) -> bool:
        """Whether the listing was made under a different hidden-file setting."""
        return self.listed_hidden != self.show_hidden

    @property
    def selected_entry(self) -> Entry | None:
        if not self.entries:
            return None
        return self.entries[self.selected_index]

    def selected_path(self) -> Path | None:
        """Absolute path of the selected entry, without resolving links."""
        entry = self.selected_entry
        if entry is None:
            return None
        return self.path / entry.name

    def index_of(self, name: str) -> int | None:
        for index, entry in enumerate(self.entries):
            if entry.name == name:
                return index
        return None

    def _list(self, directory: Path) -> list[Entry]:
        return list_entries(
            directory,
            self.show_hidden,
            link_dirs=self.link_dirs,
            show_parent_entry=self.show_parent_entry,
        )

    def _reject(self, target: Path, reason: str, error: OSError | None = None) -> NavigationResult:
        logger.debug("navigation to %s rejected: %s", target, reason)
        return NavigationResult(False, self.path, reason, error)

    def _notify(self) -> None:
        if self.on_selection is not None:
            self.on_selection(self)

    def set_path(self, target: Path | str) -> NavigationResult:
        """Move to ``target``, resolved against this view's own path.

        On success the listing is reloaded and offset slots are grown for the
        new depth. A listing of at most one entry resets the selection to 0;
        otherwise the old index is clamped into range. Either way the
        selection listener sees the new path.
        """
        try:
            resolved = canonicalize(target, base_path=self.path)
        except OSError as exc:
            return self._reject(Path(target), exc.strerror or str(exc), exc)
        try:
            entries = self._list(resolved)
        except OSError as exc:
            return self._reject(resolved, exc.strerror or str(exc), exc)

        self.path = resolved
        self.entries = entries
        self.listed_hidden = self.show_hidden
        self.offsets.grow(self.depth)
        if len(entries) <= 1:
            self.set_selected_index(0)
        else:
            self.selected_index = min(self.selected_index, len(entries) - 1)
            self._notify()
        return NavigationResult(True, self.path)

    def set_selected_index(self, index: int) -> None:
        """Select ``index`` (clamped) and forget the offset one level deeper."""
        if self.entries:
            index = max(0, min(index, len(self.entries) - 1))
        else:
            index = 0
        self.selected_index = index

        level = self.depth
        self.offsets.grow(level)
        self.offsets.reset_child(self.path, level, self.selected_path())
        self._notify()

    def ascend(self) -> NavigationResult:
        """Go to the parent directory and reselect the child we came from."""
        previous_name = top_component(self.path)
        result = self.set_path(self.path / "..")
        if not result:
            return result
        index = self.index_of(previous_name)
        if index is not None:
            self.set_selected_index(index)
        else:
            self._notify()
        return result

    def descend(self) -> NavigationResult:
        """Enter the selected directory and select its first entry."""
        entry = self.selected_entry
        if entry is None:
            return self._reject(self.path, "empty directory")
        if entry.name == PARENT_ENTRY_NAME:
            return self.ascend()
        target = self.path / entry.name
        if not entry.navigable(self.link_dirs):
            return self._reject(target, "not a directory")
        result = self.set_path(target)
        if result:
            self.set_selected_index(0)
        return result

    def move_selection(self, delta: int) -> bool:
        """Move the selection by ``delta``; returns ``False`` at a list boundary."""
        if not self.entries:
            return False
        target = max(0, min(self.selected_index + delta, len(self.entries) - 1))
        if target == self.selected_index:
            return False
        self.set_selected_index(target)
        return True

    def refresh(self, show_hidden: bool | None = None) -> NavigationResult:
        """Reload the listing, keeping the selected entry by name when possible."""
        previous_hidden = self.show_hidden
        if show_hidden is not None:
            self.show_hidden = show_hidden
        selected = self.selected_entry
        try:
            entries = self._list(self.path)
        except OSError as exc:
            self.show_hidden = previous_hidden
            return self._reject(self.path, exc.strerror or str(exc), exc)

        self.entries = entries
        self.listed_hidden = self.show_hidden
        self.offsets.grow(self.depth)
        index = self.index_of(selected.name) if selected is not None else None
        self.set_selected_index(index if index is not None else self.selected_index)
        return NavigationResult(True, self.path)

    def scroll_offset(self, height: int) -> int:
        """Return the first visible row for a viewport of ``height`` rows.

        The remembered offset is pulled down to the selection, or pushed up so
        the selection stays one row clear of the bottom edge.
        """
        level = self.depth
        offset = self.offsets.get(self.path, level)
        if self.selected_index < offset:
            offset = self.selected_index
        if self.selected_index >= offset + height - 1:
            offset = self.selected_index - height + 2
        offset = max(0, min(offset, self.selected_index))
        self.offsets.set(self.path, level, offset)
        return offset

    def visible_entries(self, height: int) -> list[tuple[int, Entry]]:
        """Return ``(index, entry)`` pairs for the rows of the viewport."""
        if not self.entries or height <= 0:
            return []
        offset = self.scroll_offset(height)
        return list(enumerate(self.entries[offset : offset + height], start=offset))


__all__ = ["NavigationResult", "View"]
