"""Command-line front door for sfnav.

Parses CLI options, layers them over the config file, and resolves the start
directory. Then dispatches into the interactive session or, with ``--list``,
prints one listing and exits.
"""

from __future__ import annotations

import argparse
import dataclasses
import locale
import sys
from pathlib import Path

from .app import run_navigator
from .config import MAX_VIEW_COUNT, Settings, load_settings
from .entries import describe_entry, list_entries
from .offsets import OFFSET_MEMORY_KINDS


def _view_count(value: str) -> int:
    """argparse type for the number of views."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if not 1 <= parsed <= MAX_VIEW_COUNT:
        raise argparse.ArgumentTypeError(f"value must be between 1 and {MAX_VIEW_COUNT}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sfnav",
        description="Browse directories in several independent terminal views.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Start directory. Defaults to current directory.")
    parser.add_argument("--views", type=_view_count, default=None, help="Number of views (1-9).")
    parser.add_argument("--opener", default=None, help="Program used to open files.")
    parser.add_argument("--editor", default=None, help="Program used to edit entries.")
    parser.add_argument("-a", "--show-hidden", action="store_true", default=None, help="Start with hidden files shown.")
    parser.add_argument(
        "--link-dirs",
        action="store_true",
        default=None,
        help="Sort and enter symlinks to directories as directories.",
    )
    parser.add_argument(
        "--offset-memory",
        choices=OFFSET_MEMORY_KINDS,
        default=None,
        help="Remember scroll positions per depth (default) or per directory.",
    )
    parser.add_argument("--parent-entry", action="store_true", default=None, help="List '..' as an entry.")
    parser.add_argument("--no-color", action="store_true", help="Disable colors.")
    parser.add_argument("--list", action="store_true", help="Print the sorted listing of PATH and exit.")
    return parser


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Replace config values with any CLI flags that were given."""
    overrides = {
        "view_count": args.views,
        "opener": args.opener,
        "editor": args.editor,
        "show_hidden": args.show_hidden,
        "link_dirs": args.link_dirs,
        "offset_memory": args.offset_memory,
        "show_parent_entry": args.parent_entry,
    }
    return dataclasses.replace(settings, **{key: value for key, value in overrides.items() if value is not None})


def print_listing(path: Path, settings: Settings) -> None:
    entries = list_entries(
        path,
        settings.show_hidden,
        link_dirs=settings.link_dirs,
        show_parent_entry=settings.show_parent_entry,
    )
    for entry in entries:
        sys.stdout.write(describe_entry(entry) + "\n")


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch sfnav on a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        # Unsupported LC_* settings: names collate by code point.
        pass
    args = build_parser().parse_args()
    settings = apply_overrides(load_settings(), args)

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")
    path = path.resolve()

    if args.list:
        try:
            print_listing(path, settings)
        except OSError as exc:
            raise SystemExit(f"Cannot list {path}: {exc.strerror or exc}") from exc
        return

    run_navigator(path, settings, args.no_color)


if __name__ == "__main__":
    main()
