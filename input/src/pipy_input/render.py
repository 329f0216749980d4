"""Compose the styled output of an input from value, cursor and decorations.

Two modes are available. Without a language every character is styled
individually (inverse video around the cursor, including a pasted block when
paste highlighting is on). With a language the text is split into segments
so cursor, decoration and syntax styling never fight over the same span.
"""

from dataclasses import dataclass
from typing import Iterable

from rich.console import Console
from rich.text import Text

from .highlight import Highlighter, PygmentsHighlighter
from .segments import Decoration, create_segments, merge_decoration_styles
from .state import InputState
from .styles import CURSOR_STYLE, DIM_PLACEHOLDER_STYLE, GHOST_STYLE, PLACEHOLDER_STYLE
from .suggestion import SuggestionSource, ghost_text


@dataclass
class RenderOptions:
    """Display options for an input."""

    placeholder: str = ""
    focus: bool = True
    mask: str | None = None
    show_cursor: bool = True
    highlight_pasted_text: bool = False
    language: str | None = None

    def __post_init__(self) -> None:
        if not self.mask:
            self.mask = None
        elif len(self.mask) != 1:
            raise ValueError(f"mask must be a single character, got {self.mask!r}")

    @property
    def cursor_visible(self) -> bool:
        return self.show_cursor and self.focus


def mask_value(value: str, mask: str | None) -> str:
    """Text to display for value, with every character replaced by mask."""
    return mask * len(value) if mask else value


def render_input(
    value: str,
    state: InputState,
    options: RenderOptions | None = None,
    *,
    decorations: Iterable[Decoration] = (),
    suggest: SuggestionSource | None = None,
    highlighter: Highlighter | None = None,
) -> Text:
    """Render an input to styled text.

    Args:
        value: Current text (never modified)
        state: Cursor state
        options: Display options, defaults when None
        decorations: Ranges to style; only used when a language is set
        suggest: Suggestion source for ghost text
        highlighter: Used when a language is set, pygments when None

    Returns:
        Styled text for the whole input
    """
    options = options or RenderOptions()
    display = mask_value(value, options.mask)
    ghost = ghost_text(value, state.cursor_offset, suggest, options.focus)

    if options.language:
        return _render_decorated(
            display,
            state,
            options,
            list(decorations),
            ghost,
            highlighter or PygmentsHighlighter(),
        )

    return _render_plain(display, state, options, ghost)


def _render_plain(display: str, state: InputState, options: RenderOptions, ghost: str) -> Text:
    placeholder = options.placeholder
    cursor = state.cursor_offset

    if options.cursor_visible:
        if placeholder:
            rendered_placeholder = Text()
            rendered_placeholder.append(placeholder[0], style=CURSOR_STYLE)
            rendered_placeholder.append(placeholder[1:], style=PLACEHOLDER_STYLE)
        else:
            rendered_placeholder = Text(" ", style=CURSOR_STYLE)

        rendered = Text()
        if not display:
            rendered.append(" ", style=CURSOR_STYLE)

        extra_width = state.paste_width if options.highlight_pasted_text else 0
        for i, char in enumerate(display):
            inverse = cursor - extra_width <= i <= cursor
            rendered.append(char, style=CURSOR_STYLE if inverse else None)

        if display and cursor == len(display):
            rendered.append(" ", style=CURSOR_STYLE)
    else:
        rendered_placeholder = Text(placeholder, style=PLACEHOLDER_STYLE)
        rendered = Text(display)

    if ghost:
        rendered.append(ghost, style=GHOST_STYLE)

    if placeholder and not display:
        return rendered_placeholder
    return rendered


def _render_decorated(
    display: str,
    state: InputState,
    options: RenderOptions,
    decorations: list[Decoration],
    ghost: str,
    highlighter: Highlighter,
) -> Text:
    language = options.language or ""
    placeholder = options.placeholder
    cursor_visible = options.cursor_visible
    result = Text()

    if not display:
        if placeholder:
            if cursor_visible:
                result.append(placeholder[0], style=CURSOR_STYLE)
                result.append(placeholder[1:], style=DIM_PLACEHOLDER_STYLE)
            else:
                result.append(placeholder, style=DIM_PLACEHOLDER_STYLE)
        elif cursor_visible:
            result.append(" ", style=CURSOR_STYLE)
        return result

    cursor = state.cursor_offset
    cursor_at_end = cursor == len(display)

    for segment in create_segments(display, cursor, decorations, cursor_visible):
        # Cursor wins over decorations
        if segment.is_cursor:
            result.append(segment.text, style=CURSOR_STYLE)
            continue

        highlighted = highlighter(language, segment.text)
        decoration_style = merge_decoration_styles(segment.decorations)
        if decoration_style is None:
            result.append_text(highlighted)
            continue

        # Highlighter spans sit on top of the decoration style
        wrapped = Text(style=decoration_style)
        wrapped.append_text(highlighted)
        result.append_text(wrapped)

    if cursor_visible and cursor_at_end:
        result.append(" ", style=CURSOR_STYLE)

    if ghost and options.focus and cursor_at_end:
        result.append(ghost, style=GHOST_STYLE)

    return result


def render_ansi(text: Text, color_system: str = "standard") -> str:
    """Export styled text as a terminal escape string."""
    console = Console(
        force_terminal=True,
        color_system=color_system,
        legacy_windows=False,
        soft_wrap=True,
    )
    with console.capture() as capture:
        console.print(text, end="", soft_wrap=True)
    return capture.get()
