"""Partition text into segments by cursor and decoration boundaries."""

import logging
from dataclasses import dataclass, field, replace

from rich.style import Style

from .styles import DecorationStyle, get_decoration_style, is_known_style

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Decoration:
    """A styled highlight over the half-open range [start, end)."""

    start: int
    end: int
    style: DecorationStyle


@dataclass
class Segment:
    """A slice of text with uniform cursor and decoration status."""

    text: str
    start: int
    end: int
    is_cursor: bool = False
    decorations: list[Decoration] = field(default_factory=list)


def clamp_decorations(decorations: list[Decoration], length: int) -> list[Decoration]:
    """Clamp decoration bounds into [0, length] and drop unusable ones.

    Empty or inverted ranges and unknown style names are dropped. Order is
    preserved so later decorations still win when styles are merged.
    """
    clamped: list[Decoration] = []
    for dec in decorations:
        if not is_known_style(dec.style):
            logger.warning(f"Ignoring decoration with unknown style {dec.style!r}")
            continue

        start = max(0, min(dec.start, length))
        end = max(0, min(dec.end, length))
        if start >= end:
            logger.debug(f"Dropping empty decoration {dec!r} (length {length})")
            continue

        clamped.append(replace(dec, start=start, end=end))

    return clamped


def create_segments(
    value: str,
    cursor_offset: int,
    decorations: list[Decoration],
    show_cursor: bool,
) -> list[Segment]:
    """Split value into contiguous segments.

    Split points are the text ends, the cursor cell (when shown) and every
    decoration boundary. Concatenating the segment texts yields value.
    """
    length = len(value)
    clamped = clamp_decorations(decorations, length)

    split_points = {0, length}

    if show_cursor:
        split_points.add(cursor_offset)
        if cursor_offset < length:
            split_points.add(cursor_offset + 1)

    for dec in clamped:
        split_points.add(dec.start)
        split_points.add(dec.end)

    points = sorted(p for p in split_points if 0 <= p <= length)

    segments: list[Segment] = []
    for start, end in zip(points, points[1:]):
        is_cursor = show_cursor and start == cursor_offset and end == cursor_offset + 1
        # Strict overlap: touching ranges do not apply
        applied = [dec for dec in clamped if dec.start < end and dec.end > start]
        segments.append(
            Segment(
                text=value[start:end],
                start=start,
                end=end,
                is_cursor=is_cursor,
                decorations=applied,
            )
        )

    return segments


def merge_decoration_styles(decorations: list[Decoration]) -> Style | None:
    """Merge decoration styles, later decorations overriding per attribute."""
    styles = [
        style
        for style in (get_decoration_style(dec.style) for dec in decorations)
        if style is not None
    ]
    if not styles:
        return None
    return Style.combine(styles)
