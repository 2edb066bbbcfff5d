"""ANSI palettes used by the renderer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reverse: str
    reset: str
    directory: str
    header_active: str
    empty: str
    divider: str


DEFAULT_THEME = UITheme(
    name="default",
    reverse="\033[7m",
    reset="\033[0m",
    directory="\033[34m",
    header_active="\033[34m",
    empty="\033[37;41m",
    divider="\033[2m",
)

# Keeps reverse video for the selection so the cursor stays visible.
NO_COLOR_THEME = UITheme(
    name="no-color",
    reverse="\033[7m",
    reset="\033[0m",
    directory="",
    header_active="\033[1m",
    empty="",
    divider="",
)


def theme_for(no_color: bool) -> UITheme:
    return NO_COLOR_THEME if no_color else DEFAULT_THEME
