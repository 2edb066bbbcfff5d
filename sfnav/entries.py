"""Directory listing into classified, sorted entries.

Classification never follows links: a symlink stays a ``LINK`` even when
its target is a directory. Only ``link_dirs`` looks through a link, to decide
whether it sorts and navigates with the directories.
"""

from __future__ import annotations

import enum
import locale
import os
import stat
from dataclasses import dataclass
from pathlib import Path

PARENT_ENTRY_NAME = ".."


class EntryKind(enum.Enum):
    """Directory-entry type as reported by the directory read."""

    FILE = "file"
    DIRECTORY = "directory"
    LINK = "link"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Entry:
    """One visible member of a directory listing."""

    name: str
    kind: EntryKind
    link_to_directory: bool = False

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    def navigable(self, link_dirs: bool = False) -> bool:
        """Return whether this entry can be descended into or previewed."""
        if self.kind is EntryKind.DIRECTORY:
            return True
        return link_dirs and self.kind is EntryKind.LINK and self.link_to_directory


def _kind_from_dirent(child: os.DirEntry) -> EntryKind:
    """Classify ``child`` from its cached ``d_type`` without following links."""
    try:
        if child.is_symlink():
            return EntryKind.LINK
        if child.is_dir(follow_symlinks=False):
            return EntryKind.DIRECTORY
        if child.is_file(follow_symlinks=False):
            return EntryKind.FILE
    except OSError:
        return EntryKind.UNKNOWN
    return EntryKind.UNKNOWN


def _points_to_directory(child: os.DirEntry) -> bool:
    try:
        return stat.S_ISDIR(child.stat(follow_symlinks=True).st_mode)
    except OSError:
        return False


def collation_key(name: str) -> tuple[str, str]:
    """Locale-aware name key with a code-point tie-break for a total order."""
    try:
        collated = locale.strxfrm(name)
    except (OSError, ValueError):
        collated = name
    return collated, name


def entry_sort_key(entry: Entry, link_dirs: bool = False) -> tuple[int, tuple[str, str]]:
    """Sort directories first, then everything else interleaved by name.

    Links and unknown entries share the second group with files. With
    ``link_dirs`` a link to a directory joins the first group.
    """
    if entry.name == PARENT_ENTRY_NAME:
        return -1, ("", "")
    rank = 0 if entry.navigable(link_dirs) else 1
    return rank, collation_key(entry.name)


def sort_entries(entries: list[Entry], link_dirs: bool = False) -> list[Entry]:
    """Return ``entries`` in listing order."""
    return sorted(entries, key=lambda entry: entry_sort_key(entry, link_dirs))


def list_entries(
    directory: Path | str,
    show_hidden: bool,
    *,
    link_dirs: bool = False,
    show_parent_entry: bool = False,
) -> list[Entry]:
    """List ``directory`` into a sorted entry list.

    ``.`` is never listed. ``..`` is listed first only when
    ``show_parent_entry`` is set. Dot-names are dropped unless
    ``show_hidden`` is set.

    Raises ``FileNotFoundError``, ``NotADirectoryError`` or
    ``PermissionError`` when ``directory`` cannot be opened as a directory.
    """
    entries: list[Entry] = []
    with os.scandir(directory) as children:
        for child in children:
            name = child.name
            if name in {".", ".."}:
                continue
            if not show_hidden and name.startswith("."):
                continue
            kind = _kind_from_dirent(child)
            link_to_directory = link_dirs and kind is EntryKind.LINK and _points_to_directory(child)
            entries.append(Entry(name=name, kind=kind, link_to_directory=link_to_directory))

    if show_parent_entry:
        entries.append(Entry(name=PARENT_ENTRY_NAME, kind=EntryKind.DIRECTORY))
    return sort_entries(entries, link_dirs)


def describe_entry(entry: Entry) -> str:
    """Return a one-line ``ls -F`` style label for non-interactive output."""
    if entry.kind is EntryKind.DIRECTORY:
        return f"{entry.name}/"
    if entry.kind is EntryKind.LINK:
        return f"{entry.name}@"
    if entry.kind is EntryKind.UNKNOWN:
        return f"{entry.name}?"
    return entry.name


__all__ = [
    "PARENT_ENTRY_NAME",
    "Entry",
    "EntryKind",
    "collation_key",
    "describe_entry",
    "entry_sort_key",
    "list_entries",
    "sort_entries",
]
