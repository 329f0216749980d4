"""Tests for segment partitioning and decoration styles."""

import logging

import pytest
from pipy_input import (
    DECORATION_STYLES,
    Decoration,
    clamp_decorations,
    create_segments,
    get_decoration_style,
    merge_decoration_styles,
)


def assert_partition(value, segments):
    assert "".join(seg.text for seg in segments) == value
    assert segments[0].start == 0
    assert segments[-1].end == len(value)
    for left, right in zip(segments, segments[1:]):
        assert left.end == right.start
        assert left.start < left.end


class TestDecorationStyles:
    def test_presets(self):
        assert set(DECORATION_STYLES) == {"error", "warning", "info", "highlight"}

    def test_error_is_red_underline(self):
        style = get_decoration_style("error")
        assert style.color.name == "red"
        assert style.underline

    def test_warning_and_info_colors(self):
        assert get_decoration_style("warning").color.name == "yellow"
        assert get_decoration_style("info").color.name == "blue"

    def test_highlight_is_background(self):
        style = get_decoration_style("highlight")
        assert style.bgcolor.name == "yellow"
        assert style.color is None

    def test_unknown(self):
        assert get_decoration_style("fancy") is None


class TestClampDecorations:
    def test_clamps_bounds(self):
        result = clamp_decorations([Decoration(-3, 99, "info")], 5)
        assert result == [Decoration(0, 5, "info")]

    def test_drops_empty_and_inverted(self):
        decorations = [
            Decoration(2, 2, "error"),
            Decoration(4, 1, "error"),
            Decoration(7, 9, "error"),
        ]
        assert clamp_decorations(decorations, 5) == []

    def test_keeps_order(self):
        decorations = [Decoration(0, 3, "error"), Decoration(1, 2, "highlight")]
        assert clamp_decorations(decorations, 5) == decorations

    def test_unknown_style_ignored_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING):
            result = clamp_decorations([Decoration(0, 2, "sparkle")], 5)
        assert result == []
        assert "sparkle" in caplog.text


class TestCreateSegments:
    def test_no_cursor_no_decorations(self):
        segments = create_segments("hello", 0, [], show_cursor=False)
        assert len(segments) == 1
        assert segments[0].text == "hello"
        assert not segments[0].is_cursor
        assert segments[0].decorations == []

    def test_cursor_in_middle_splits_three_ways(self):
        segments = create_segments("hello", 2, [], show_cursor=True)
        assert [s.text for s in segments] == ["he", "l", "lo"]
        assert [s.is_cursor for s in segments] == [False, True, False]

    def test_cursor_at_start(self):
        segments = create_segments("hello", 0, [], show_cursor=True)
        assert [s.text for s in segments] == ["h", "ello"]
        assert segments[0].is_cursor

    def test_cursor_at_end_has_no_cursor_segment(self):
        segments = create_segments("hello", 5, [], show_cursor=True)
        assert [s.text for s in segments] == ["hello"]
        assert not any(s.is_cursor for s in segments)

    def test_hidden_cursor_not_split(self):
        segments = create_segments("hello", 2, [], show_cursor=False)
        assert [s.text for s in segments] == ["hello"]

    def test_decoration_on_misspelled_keyword(self):
        segments = create_segments("selct", 5, [Decoration(0, 3, "error")], show_cursor=True)
        assert len(segments) == 2
        first, second = segments
        assert (first.text, first.start, first.end) == ("sel", 0, 3)
        assert first.decorations == [Decoration(0, 3, "error")]
        assert (second.text, second.start, second.end) == ("ct", 3, 5)
        assert second.decorations == []

    def test_touching_decorations_do_not_bleed(self):
        decorations = [Decoration(0, 2, "error"), Decoration(2, 4, "info")]
        segments = create_segments("abcd", 4, decorations, show_cursor=False)
        assert [s.text for s in segments] == ["ab", "cd"]
        assert segments[0].decorations == [decorations[0]]
        assert segments[1].decorations == [decorations[1]]

    def test_overlapping_decorations(self):
        decorations = [Decoration(0, 5, "error"), Decoration(2, 8, "highlight")]
        segments = create_segments("abcdefgh", 8, decorations, show_cursor=True)
        assert [s.text for s in segments] == ["ab", "cde", "fgh"]
        assert segments[0].decorations == [decorations[0]]
        assert segments[1].decorations == decorations
        assert segments[2].decorations == [decorations[1]]

    def test_cursor_inside_decoration(self):
        decorations = [Decoration(0, 5, "warning")]
        segments = create_segments("hello", 2, decorations, show_cursor=True)
        assert [s.text for s in segments] == ["he", "l", "lo"]
        cursor = segments[1]
        assert cursor.is_cursor
        assert cursor.decorations == decorations

    def test_out_of_range_decorations_do_not_crash(self):
        decorations = [Decoration(-10, 2, "error"), Decoration(3, 100, "info"), Decoration(9, 4, "info")]
        segments = create_segments("hello", 1, decorations, show_cursor=True)
        assert_partition("hello", segments)
        assert segments[-1].decorations == [Decoration(3, 5, "info")]

    def test_empty_value(self):
        assert create_segments("", 0, [Decoration(0, 3, "error")], show_cursor=True) == []

    @pytest.mark.parametrize("cursor", range(0, 9))
    @pytest.mark.parametrize("show_cursor", [True, False])
    def test_partition_is_complete(self, cursor, show_cursor):
        value = "abcdefgh"
        decorations = [
            Decoration(1, 4, "error"),
            Decoration(3, 6, "highlight"),
            Decoration(-2, 1, "info"),
            Decoration(6, 20, "warning"),
            Decoration(5, 5, "error"),
        ]
        segments = create_segments(value, cursor, decorations, show_cursor)
        assert_partition(value, segments)

        cursor_segments = [s for s in segments if s.is_cursor]
        if show_cursor and cursor < len(value):
            assert len(cursor_segments) == 1
            assert cursor_segments[0].start == cursor
            assert cursor_segments[0].end == cursor + 1
        else:
            assert cursor_segments == []


class TestMergeDecorationStyles:
    def test_empty(self):
        assert merge_decoration_styles([]) is None

    def test_single(self):
        assert merge_decoration_styles([Decoration(0, 1, "info")]) == DECORATION_STYLES["info"]

    def test_later_keeps_earlier_attributes(self):
        style = merge_decoration_styles(
            [Decoration(0, 5, "error"), Decoration(2, 8, "highlight")]
        )
        assert style.color.name == "red"
        assert style.underline
        assert style.bgcolor.name == "yellow"

    def test_later_overrides_conflicting_attribute(self):
        style = merge_decoration_styles(
            [Decoration(0, 5, "error"), Decoration(0, 5, "info")]
        )
        assert style.color.name == "blue"
        assert style.underline
