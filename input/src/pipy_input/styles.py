"""Decoration style presets."""

from typing import Literal

from rich.style import Style

DecorationStyle = Literal["error", "warning", "info", "highlight"]

DECORATION_STYLES: dict[str, Style] = {
    "error": Style(color="red", underline=True),
    "warning": Style(color="yellow", underline=True),
    "info": Style(color="blue", underline=True),
    "highlight": Style(bgcolor="yellow"),
}

# Styles used by the render composer
CURSOR_STYLE = Style(reverse=True)
GHOST_STYLE = Style(dim=True)
PLACEHOLDER_STYLE = Style(color="grey50")
DIM_PLACEHOLDER_STYLE = Style(dim=True)


def get_decoration_style(name: str) -> Style | None:
    """Look up the style for a decoration preset.

    Returns None for names outside the preset table.
    """
    return DECORATION_STYLES.get(name)


def is_known_style(name: str) -> bool:
    return name in DECORATION_STYLES
