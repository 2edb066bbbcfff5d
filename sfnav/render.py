"""Screen composition for the header, main pane, and preview pane.

``build_frame`` is pure: it turns view-set state and a terminal size into
styled rows. ``draw_frame`` writes those rows to the terminal in one call.
The only state it touches is the active view's remembered scroll offset.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .ansi import clip_ansi_line, display_width, fit_to_width
from .entries import Entry
from .theme import DEFAULT_THEME, UITheme
from .view_set import ViewSet

EMPTY_LABEL = "empty"
DIVIDER = "│"


@dataclass(frozen=True)
class PaneLayout:
    """Column split for one terminal width."""

    main_width: int
    divider_width: int
    side_width: int
    body_height: int


def compute_layout(columns: int, rows: int, pane_ratio: float, draw_borders: bool) -> PaneLayout:
    """Split ``columns`` into main pane, optional divider, and preview pane."""
    columns = max(1, columns)
    main_width = max(1, min(columns, int(columns * pane_ratio)))
    divider_width = 1 if draw_borders and columns - main_width >= 2 else 0
    side_width = max(0, columns - main_width - divider_width)
    return PaneLayout(main_width, divider_width, side_width, max(0, rows - 1))


def _printable(name: str) -> str:
    """Replace control characters so names cannot inject escape sequences."""
    return "".join(ch if ch.isprintable() else "?" for ch in name)


def format_header(view_set: ViewSet, columns: int, theme: UITheme = DEFAULT_THEME) -> str:
    """Numbered view list with the active view highlighted, then its path."""
    labels: list[str] = []
    for index in range(view_set.count):
        label = str(index + 1)
        if index == view_set.active_index:
            label = f"{theme.header_active}{label}{theme.reset}"
        labels.append(label)
    header = f"[{' '.join(labels)}] - {_printable(str(view_set.active.path))}"
    return clip_ansi_line(header, columns) + theme.reset


def format_entry(entry: Entry, width: int, selected: bool, theme: UITheme = DEFAULT_THEME) -> str:
    """Render one entry cell of exactly ``width`` columns.

    Directories are colored; the selected row is reversed across the full width.
    """
    style = theme.directory if entry.is_dir else ""
    if selected:
        style = theme.reverse + style
    name = clip_ansi_line(_printable(entry.name), width)
    padding = " " * max(0, width - display_width(name))
    if selected:
        return f"{style}{name}{padding}{theme.reset}"
    if style:
        return f"{style}{name}{theme.reset}{padding}"
    return name + padding


def main_pane_rows(view_set: ViewSet, layout: PaneLayout, theme: UITheme = DEFAULT_THEME) -> list[str]:
    """Rows for the active view, scrolled so the selection stays visible."""
    view = view_set.active
    blank = " " * layout.main_width
    rows = [blank] * layout.body_height
    if not rows:
        return rows
    if not view.entries:
        marker_row = 1 if layout.body_height > 1 else 0
        label = fit_to_width(EMPTY_LABEL, layout.main_width)
        rows[marker_row] = f"{theme.empty}{label}{theme.reset}" if theme.empty else label
        return rows

    visible = view.visible_entries(layout.body_height)
    offset = visible[0][0]
    for index, entry in visible:
        rows[index - offset] = format_entry(entry, layout.main_width, index == view.selected_index, theme)
    return rows


def side_pane_rows(view_set: ViewSet, layout: PaneLayout, theme: UITheme = DEFAULT_THEME) -> list[str]:
    """Rows for the preview pane; blank while the preview is inactive."""
    rows = [""] * layout.body_height
    preview = view_set.preview
    if not preview.active or layout.side_width <= 0:
        return rows
    for row, entry in enumerate(preview.entries[: layout.body_height]):
        rows[row] = format_entry(entry, layout.side_width, False, theme).rstrip(" ")
    return rows


def build_frame(
    view_set: ViewSet,
    columns: int,
    rows: int,
    *,
    pane_ratio: float,
    draw_borders: bool = True,
    theme: UITheme = DEFAULT_THEME,
) -> list[str]:
    """Compose every screen row for a ``columns`` x ``rows`` terminal."""
    if rows <= 0:
        return []
    layout = compute_layout(columns, rows, pane_ratio, draw_borders)
    divider = ""
    if layout.divider_width:
        divider = f"{theme.divider}{DIVIDER}{theme.reset}" if theme.divider else DIVIDER

    lines = [format_header(view_set, columns, theme)]
    for main, side in zip(main_pane_rows(view_set, layout, theme), side_pane_rows(view_set, layout, theme)):
        lines.append(f"{main}{divider}{side}")
    return lines


def draw_frame(stdout_fd: int, lines: list[str]) -> None:
    """Clear the screen and write ``lines`` from the top-left corner."""
    payload = "\033[H\033[J" + "\r\n".join(lines)
    os.write(stdout_fd, payload.encode("utf-8", errors="replace"))


__all__ = [
    "EMPTY_LABEL",
    "PaneLayout",
    "build_frame",
    "compute_layout",
    "draw_frame",
    "format_entry",
    "format_header",
    "main_pane_rows",
    "side_pane_rows",
]
