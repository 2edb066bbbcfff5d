"""Path helpers for canonicalization, depth, and last-component lookup.

Relative paths are always resolved against an explicit ``base_path`` so no
helper here depends on the process working directory.
"""

from __future__ import annotations

import os
from pathlib import Path


def canonicalize(path: Path | str, base_path: Path | str | None = None) -> Path:
    """Return the absolute, symlink-free form of ``path``.

    Relative ``path`` values are joined onto ``base_path`` first. Raises
    ``OSError`` when any component does not exist.
    """
    candidate = Path(path).expanduser()
    if not candidate.is_absolute():
        if base_path is None:
            raise ValueError(f"relative path without base_path: {path!s}")
        candidate = Path(base_path) / candidate
    return candidate.resolve(strict=True)


def canonical_depth(path: Path) -> int:
    """Depth of an already-canonical absolute path, without touching disk."""
    return len(path.parts) - 1


def depth(path: Path | str) -> int:
    """Count separators from the root to canonical ``path``; the root is 0.

    Canonicalization failures propagate: callers only pass existing paths.
    """
    return canonical_depth(Path(path).resolve(strict=True))


def top_component(path: Path | str) -> str:
    """Return the final segment of ``path``, or the separator for the root."""
    text = os.fspath(path)
    stripped = text.rstrip(os.sep)
    if not stripped:
        return os.sep
    return stripped.rsplit(os.sep, 1)[-1]


__all__ = ["canonical_depth", "canonicalize", "depth", "top_component"]
