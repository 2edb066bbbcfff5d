"""Remembered scroll offsets for one view.

``OffsetStack`` keys offsets by filesystem depth, so sibling directories at
the same depth share one remembered offset. ``PathOffsetMemory`` keys them by
canonical directory path instead. Views only talk to the ``OffsetMemory``
interface, so either can be plugged in.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class OffsetMemory(Protocol):
    def grow(self, depth: int) -> None:
        """Make room for reads and writes at ``depth`` and ``depth + 1``."""

    def get(self, path: Path, depth: int) -> int:
        """Return the first visible index remembered for ``path``."""

    def set(self, path: Path, depth: int, offset: int) -> None:
        """Remember ``offset`` as the first visible index for ``path``."""

    def reset_child(self, path: Path, depth: int, child: Path | None) -> None:
        """Forget the offset one level below ``path``."""


class OffsetStack:
    """Depth-indexed offsets. Slots grow on demand and never shrink."""

    def __init__(self) -> None:
        self.slots: list[int] = []

    def __len__(self) -> int:
        return len(self.slots)

    def grow(self, depth: int) -> None:
        required = depth + 2
        if len(self.slots) < required:
            self.slots.extend([0] * (required - len(self.slots)))

    def get(self, path: Path, depth: int) -> int:
        assert depth < len(self.slots), f"offset slot {depth} read before growth"
        return self.slots[depth]

    def set(self, path: Path, depth: int, offset: int) -> None:
        assert depth < len(self.slots), f"offset slot {depth} written before growth"
        self.slots[depth] = max(0, offset)

    def reset_child(self, path: Path, depth: int, child: Path | None) -> None:
        assert depth + 1 < len(self.slots), f"offset slot {depth + 1} reset before growth"
        self.slots[depth + 1] = 0


class PathOffsetMemory:
    """Offsets keyed by canonical directory path."""

    def __init__(self) -> None:
        self.offsets: dict[Path, int] = {}

    def __len__(self) -> int:
        return len(self.offsets)

    def grow(self, depth: int) -> None:
        return None

    def get(self, path: Path, depth: int) -> int:
        return self.offsets.get(path, 0)

    def set(self, path: Path, depth: int, offset: int) -> None:
        self.offsets[path] = max(0, offset)

    def reset_child(self, path: Path, depth: int, child: Path | None) -> None:
        if child is not None:
            self.offsets.pop(child, None)


OFFSET_MEMORY_KINDS = ("depth", "path")


def make_offset_memory(kind: str = "depth") -> OffsetMemory:
    """Build the offset memory named by ``kind`` (``depth`` or ``path``)."""
    if kind == "depth":
        return OffsetStack()
    if kind == "path":
        return PathOffsetMemory()
    raise ValueError(f"unknown offset memory kind: {kind!r}")


__all__ = [
    "OFFSET_MEMORY_KINDS",
    "OffsetMemory",
    "OffsetStack",
    "PathOffsetMemory",
    "make_offset_memory",
]
