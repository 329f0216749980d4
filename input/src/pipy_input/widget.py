"""TextInput - single-line input widget with ghost-text autocomplete."""

import logging

from rich.console import RenderableType
from textual import events
from textual.message import Message
from textual.widget import Widget

from .highlight import Highlighter, PygmentsHighlighter
from .keybindings import EditorAction, KeybindingConfig, KeybindingManager
from .render import RenderOptions, render_input
from .segments import Decoration
from .settings import InputSettings
from .state import EditResult, InputState, apply_edit, reconcile
from .suggestion import SuggestionSource

logger = logging.getLogger(__name__)


class TextInput(Widget, can_focus=True):
    """Single-line input with cursor, ghost-text suggestions and decorations.

    The widget owns its value. Assigning ``value`` from outside is treated
    as an out-of-band change: the cursor is reconciled and no Changed
    message is posted.

    Example:
        prompt = TextInput(
            placeholder="Enter SQL query...",
            language="sql",
            suggest=PrefixSuggestionProvider(["select * from users"]),
        )

        @on(TextInput.Submitted)
        def on_submit(self, event: TextInput.Submitted) -> None:
            print(f"Submitted: {event.value}")
    """

    DEFAULT_CSS = """
    TextInput {
        height: 1;
        width: 1fr;
    }
    """

    # Messages
    class Changed(Message):
        """Emitted when an edit changes the value."""

        def __init__(self, value: str) -> None:
            self.value = value
            super().__init__()

    class Submitted(Message):
        """Emitted when user submits (Enter)."""

        def __init__(self, value: str) -> None:
            self.value = value
            super().__init__()

    class SuggestionAccepted(Message):
        """Emitted when a ghost-text suggestion is accepted (Right)."""

        def __init__(self, value: str) -> None:
            self.value = value
            super().__init__()

    def __init__(
        self,
        value: str = "",
        *,
        placeholder: str = "",
        mask: str | None = None,
        show_cursor: bool = True,
        highlight_pasted_text: bool = False,
        language: str | None = None,
        suggest: SuggestionSource | None = None,
        decorations: list[Decoration] | None = None,
        highlighter: Highlighter | None = None,
        keybindings: KeybindingConfig | None = None,
        active: bool = True,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)

        self.options = RenderOptions(
            placeholder=placeholder,
            mask=mask,
            show_cursor=show_cursor,
            highlight_pasted_text=highlight_pasted_text,
            language=language,
        )
        self.suggest = suggest
        self.decorations: list[Decoration] = list(decorations or [])
        self.highlighter = highlighter
        self.keybindings = KeybindingManager(keybindings)
        self.active = active

        self._value = value
        self._input_state = InputState.at_end(value)

    @classmethod
    def from_settings(cls, settings: InputSettings, **kwargs) -> "TextInput":
        """Create an input configured from loaded settings."""
        kwargs.setdefault("highlighter", PygmentsHighlighter(settings.syntax_theme))
        return cls(
            placeholder=settings.placeholder,
            mask=settings.mask,
            show_cursor=settings.show_cursor,
            highlight_pasted_text=settings.highlight_pasted_text,
            language=settings.language,
            **kwargs,
        )

    @property
    def value(self) -> str:
        """Current text."""
        return self._value

    @value.setter
    def value(self, value: str) -> None:
        if value == self._value:
            return
        self._value = value
        self._input_state = reconcile(self._input_state, value)
        self.refresh()

    @property
    def state(self) -> InputState:
        return self._input_state

    @property
    def cursor_offset(self) -> int:
        return self._input_state.cursor_offset

    def set_decorations(self, decorations: list[Decoration]) -> None:
        """Replace decorations; applied on the next render."""
        self.decorations = list(decorations)
        self.refresh()

    def render(self) -> RenderableType:
        """Render the input."""
        self.options.focus = self.active
        return render_input(
            self._value,
            self._input_state,
            self.options,
            decorations=self.decorations,
            suggest=self.suggest,
            highlighter=self.highlighter,
        )

    # === Input ===

    def on_key(self, event: events.Key) -> None:
        """Handle keyboard input."""
        if not self.active:
            return

        edit = self.keybindings.key_to_edit(event.key, event.character)
        if edit is None:
            return

        action, text = edit
        self.edit(action, text)
        event.stop()
        event.prevent_default()

    def on_paste(self, event: events.Paste) -> None:
        """Insert pasted text as a single edit."""
        if not self.active or not event.text:
            return
        self.edit(EditorAction.INSERT, event.text)
        event.stop()

    def edit(self, action: EditorAction, text: str = "") -> EditResult:
        """Apply one edit intent and post the resulting messages."""
        result = apply_edit(
            self._value,
            self._input_state,
            action,
            text,
            focus=self.active,
            show_cursor=self.options.show_cursor,
            suggest=self.suggest,
        )

        changed = result.state != self._input_state or result.value != self._value
        self._value = result.value
        self._input_state = result.state

        if changed:
            self.refresh()
        self._dispatch(result)
        return result

    def insert(self, text: str) -> EditResult:
        """Insert text at the cursor."""
        return self.edit(EditorAction.INSERT, text)

    def _dispatch(self, result: EditResult) -> None:
        """Post one message per notification carried by result."""
        if result.suggestion_accepted is not None:
            logger.debug(f"Accepted suggestion {result.suggestion_accepted!r}")
            self.post_message(self.SuggestionAccepted(result.suggestion_accepted))
        if result.value_changed is not None:
            self.post_message(self.Changed(result.value_changed))
        if result.submitted is not None:
            self.post_message(self.Submitted(result.submitted))
