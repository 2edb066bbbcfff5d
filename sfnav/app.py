"""Interactive session: build state, then render, read a key, dispatch, repeat.

Feature logic lives in ``commands``; this module only wires it to the
terminal. A change in terminal size forces a redraw without touching state.
"""

from __future__ import annotations

import shutil
import sys
from collections.abc import Callable
from pathlib import Path

from .commands import NavigatorCommands
from .config import Settings
from .debug import get_logger
from .keymap import KeyComboRegistry, build_key_registry
from .keys import read_key
from .render import build_frame, draw_frame
from .terminal import TerminalController
from .theme import UITheme, theme_for
from .view_set import ViewSet

logger = get_logger(__name__)

KEY_POLL_MS = 200


def build_view_set(start_path: Path, settings: Settings) -> ViewSet:
    return ViewSet(
        start_path,
        settings.view_count,
        show_hidden=settings.show_hidden,
        link_dirs=settings.link_dirs,
        show_parent_entry=settings.show_parent_entry,
        offset_memory=settings.offset_memory,
    )


def run_main_loop(
    commands: NavigatorCommands,
    registry: KeyComboRegistry,
    *,
    stdin_fd: int,
    stdout_fd: int,
    theme: UITheme,
    read: Callable[[int, int | None], str] = read_key,
    terminal_size: Callable[[], tuple[int, int]] | None = None,
) -> None:
    """Run until a command sets ``commands.should_quit``."""
    settings = commands.settings
    if terminal_size is None:

        def terminal_size() -> tuple[int, int]:
            size = shutil.get_terminal_size((80, 24))
            return size.columns, size.lines

    dirty = True
    last_size: tuple[int, int] | None = None
    while not commands.should_quit:
        size = terminal_size()
        if size != last_size:
            last_size = size
            dirty = True
        if dirty:
            columns, rows = size
            lines = build_frame(
                commands.view_set,
                columns,
                rows,
                pane_ratio=settings.pane_ratio,
                draw_borders=settings.draw_borders,
                theme=theme,
            )
            draw_frame(stdout_fd, lines)
            dirty = False

        key = read(stdin_fd, KEY_POLL_MS)
        if not key:
            continue
        handled = registry.dispatch(key)
        if handled is None:
            logger.debug("unbound key %r", key)
            continue
        dirty = True


def run_navigator(start_path: Path, settings: Settings, no_color: bool = False) -> None:
    """Start the interactive navigator on ``start_path``."""
    if not sys.stdin.isatty() or not sys.stdout.isatty():
        raise SystemExit("sfnav needs an interactive terminal.")

    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    view_set = build_view_set(start_path, settings)
    terminal = TerminalController(stdin_fd, stdout_fd)
    commands = NavigatorCommands(
        view_set,
        settings,
        suspend_tui=terminal.disable_tui_mode,
        resume_tui=terminal.enable_tui_mode,
    )
    registry = build_key_registry(commands)
    logger.info("starting in %s with %d views", view_set.active.path, view_set.count)
    with terminal.raw_mode():
        run_main_loop(
            commands,
            registry,
            stdin_fd=stdin_fd,
            stdout_fd=stdout_fd,
            theme=theme_for(no_color),
        )


__all__ = ["KEY_POLL_MS", "build_view_set", "run_main_loop", "run_navigator"]
