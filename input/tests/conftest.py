"""Pytest configuration."""

import pytest
from rich.style import Style
from rich.text import Text


def style_at(text: Text, offset: int) -> Style:
    """Combined style of the character at offset."""
    styles = [text.style] + [span.style for span in text.spans if span.start <= offset < span.end]
    return Style.combine(
        Style.parse(style) if isinstance(style, str) else style for style in styles
    )


def chars_with(text: Text, attribute: str) -> str:
    """Characters of text whose combined style has attribute set."""
    return "".join(
        char
        for offset, char in enumerate(text.plain)
        if getattr(style_at(text, offset), attribute)
    )


@pytest.fixture
def styled():
    """Helpers for inspecting styled text."""

    class Styled:
        at = staticmethod(style_at)
        chars = staticmethod(chars_with)

    return Styled
