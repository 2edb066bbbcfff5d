"""JSON config helpers.

Holds the opener/editor programs, view count, and listing options.
All access is defensive: malformed or missing config falls back to defaults.
The file is only read; sfnav keeps no state between sessions.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .offsets import OFFSET_MEMORY_KINDS

APP_NAME = "sfnav"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_OPENER = "xdg-open"
DEFAULT_EDITOR = "nvim"
DEFAULT_VIEW_COUNT = 4
MAX_VIEW_COUNT = 9
DEFAULT_PANE_RATIO = 3.0 / 5.0


@dataclass(frozen=True)
class Settings:
    """Resolved configuration for one session."""

    opener: str = DEFAULT_OPENER
    editor: str = DEFAULT_EDITOR
    view_count: int = DEFAULT_VIEW_COUNT
    show_hidden: bool = False
    pane_ratio: float = DEFAULT_PANE_RATIO
    draw_borders: bool = True
    link_dirs: bool = False
    offset_memory: str = "depth"
    show_parent_entry: bool = False


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _load_program(data: dict[str, object], key: str, fallback: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        return fallback
    stripped = value.strip()
    return stripped if stripped else fallback


def _load_bool(data: dict[str, object], key: str, fallback: bool) -> bool:
    """Only explicit booleans count; anything else falls back."""
    value = data.get(key)
    return value if isinstance(value, bool) else fallback


def _load_view_count(data: dict[str, object]) -> int:
    value = data.get("view_count")
    if isinstance(value, bool) or not isinstance(value, int):
        return DEFAULT_VIEW_COUNT
    if not 1 <= value <= MAX_VIEW_COUNT:
        return DEFAULT_VIEW_COUNT
    return value


def _load_pane_ratio(data: dict[str, object]) -> float:
    """Main-pane share of the width, constrained to the open interval (0, 1)."""
    value = data.get("pane_ratio")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return DEFAULT_PANE_RATIO
    if value <= 0 or value >= 1:
        return DEFAULT_PANE_RATIO
    return float(value)


def _load_offset_memory(data: dict[str, object]) -> str:
    value = data.get("offset_memory")
    return value if value in OFFSET_MEMORY_KINDS else "depth"


def default_editor() -> str:
    """``$EDITOR`` when set, otherwise the built-in editor."""
    editor_env = os.environ.get("EDITOR", "").strip()
    return editor_env or DEFAULT_EDITOR


def load_settings() -> Settings:
    """Build ``Settings`` from the config file, validating each key."""
    data = load_config()
    return Settings(
        opener=_load_program(data, "opener", DEFAULT_OPENER),
        editor=_load_program(data, "editor", default_editor()),
        view_count=_load_view_count(data),
        show_hidden=_load_bool(data, "show_hidden", False),
        pane_ratio=_load_pane_ratio(data),
        draw_borders=_load_bool(data, "draw_borders", True),
        link_dirs=_load_bool(data, "link_dirs", False),
        offset_memory=_load_offset_memory(data),
        show_parent_entry=_load_bool(data, "show_parent_entry", False),
    )


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_EDITOR",
    "DEFAULT_OPENER",
    "DEFAULT_PANE_RATIO",
    "DEFAULT_VIEW_COUNT",
    "MAX_VIEW_COUNT",
    "Settings",
    "default_editor",
    "load_config",
    "load_settings",
]
