"""Cursor and edit state machine for a single-line input.

The caller owns the text value. Every operation takes the current value and
state and returns an :class:`EditResult` with the next value and state plus
the notifications the caller should dispatch. Nothing is mutated in place.
"""

from dataclasses import dataclass

from .keybindings import IGNORED_ACTIONS, EditorAction
from .suggestion import SuggestionSource, resolve_suggestion


@dataclass(frozen=True)
class InputState:
    """Cursor position and width of the most recent paste."""

    cursor_offset: int = 0
    paste_width: int = 0

    @classmethod
    def at_end(cls, value: str) -> "InputState":
        """State with the cursor after the last character."""
        return cls(cursor_offset=len(value))


@dataclass(frozen=True)
class EditResult:
    """Outcome of one processed edit."""

    value: str
    state: InputState
    cursor_changed: bool = False
    value_changed: str | None = None
    submitted: str | None = None
    suggestion_accepted: str | None = None

    @property
    def cursor_offset(self) -> int:
        return self.state.cursor_offset

    @property
    def paste_width(self) -> int:
        return self.state.paste_width


def clamp_cursor(offset: int, value: str) -> int:
    """Clamp a cursor offset into [0, len(value)]."""
    return max(0, min(offset, len(value)))


def apply_edit(
    value: str,
    state: InputState,
    action: EditorAction,
    text: str = "",
    *,
    focus: bool = True,
    show_cursor: bool = True,
    suggest: SuggestionSource | None = None,
) -> EditResult:
    """Apply one edit intent.

    Args:
        value: Current text, owned by the caller
        state: Current cursor state
        action: Edit intent
        text: Inserted text for EditorAction.INSERT
        focus: Unfocused inputs ignore every intent
        show_cursor: Enables left/right cursor navigation
        suggest: Suggestion source consulted by CURSOR_RIGHT at end of text

    Returns:
        EditResult with the next value, state and notifications
    """
    if not focus or action in IGNORED_ACTIONS:
        return EditResult(value=value, state=state)

    if action is EditorAction.SUBMIT:
        return EditResult(value=value, state=state, submitted=value)

    cursor = state.cursor_offset
    next_cursor = cursor
    next_value = value
    next_paste_width = 0
    accepted: str | None = None

    if action is EditorAction.CURSOR_LEFT:
        if show_cursor:
            next_cursor -= 1
    elif action is EditorAction.CURSOR_RIGHT:
        suggestion = resolve_suggestion(value, cursor, suggest, focus)
        if suggestion is not None:
            next_value = suggestion
            next_cursor = len(suggestion)
            accepted = suggestion
        elif show_cursor:
            next_cursor += 1
    elif action in (EditorAction.DELETE_CHAR_BEFORE, EditorAction.DELETE_CHAR_AFTER):
        if cursor > 0:
            next_value = value[: cursor - 1] + value[cursor:]
            next_cursor -= 1
    elif action is EditorAction.INSERT:
        next_value = value[:cursor] + text + value[cursor:]
        next_cursor += len(text)
        if len(text) > 1:
            next_paste_width = len(text)

    # Clamp before anything is reported
    next_cursor = clamp_cursor(next_cursor, next_value)
    next_state = InputState(cursor_offset=next_cursor, paste_width=next_paste_width)

    return EditResult(
        value=next_value,
        state=next_state,
        cursor_changed=next_cursor != cursor,
        value_changed=next_value if next_value != value else None,
        suggestion_accepted=accepted,
    )


def reconcile(state: InputState, new_value: str) -> InputState:
    """Resynchronise state after the value was replaced out of band.

    When the recorded cursor would sit past the last character of the new
    value it moves to the end and the paste highlight is cleared.
    """
    if state.cursor_offset > len(new_value) - 1:
        return InputState(cursor_offset=len(new_value), paste_width=0)
    return state
