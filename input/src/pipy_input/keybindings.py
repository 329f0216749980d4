"""Configurable keybinding system."""

from dataclasses import dataclass, field
from enum import Enum, auto


class EditorAction(Enum):
    """Edit intents understood by the input core."""

    # Submission
    SUBMIT = auto()

    # Cursor movement
    CURSOR_LEFT = auto()
    CURSOR_RIGHT = auto()
    CURSOR_UP = auto()  # Ignored
    CURSOR_DOWN = auto()  # Ignored

    # Deletion
    DELETE_CHAR_BEFORE = auto()  # Backspace
    DELETE_CHAR_AFTER = auto()  # Delete, behaves like backspace

    # Swallowed so the surrounding app handles them
    INTERRUPT = auto()
    FOCUS_NEXT = auto()
    FOCUS_PREVIOUS = auto()

    # Text entry (not bound to a key)
    INSERT = auto()


# Actions that are recognised but never change state
IGNORED_ACTIONS = frozenset(
    {
        EditorAction.CURSOR_UP,
        EditorAction.CURSOR_DOWN,
        EditorAction.INTERRUPT,
        EditorAction.FOCUS_NEXT,
        EditorAction.FOCUS_PREVIOUS,
    }
)


@dataclass
class KeybindingConfig:
    """Configuration for input keybindings."""

    bindings: dict[EditorAction, list[str]] = field(default_factory=dict)

    def get_keys(self, action: EditorAction) -> list[str]:
        """Get key bindings for an action."""
        return self.bindings.get(action, [])

    def set_keys(self, action: EditorAction, keys: list[str]) -> None:
        """Set key bindings for an action."""
        self.bindings[action] = keys

    def add_key(self, action: EditorAction, key: str) -> None:
        """Add a key binding for an action."""
        if action not in self.bindings:
            self.bindings[action] = []
        if key not in self.bindings[action]:
            self.bindings[action].append(key)


def get_default_keybindings() -> KeybindingConfig:
    """Get default keybindings for a single-line input."""
    return KeybindingConfig(
        bindings={
            EditorAction.SUBMIT: ["enter"],
            EditorAction.CURSOR_LEFT: ["left"],
            EditorAction.CURSOR_RIGHT: ["right"],
            EditorAction.CURSOR_UP: ["up"],
            EditorAction.CURSOR_DOWN: ["down"],
            EditorAction.DELETE_CHAR_BEFORE: ["backspace"],
            EditorAction.DELETE_CHAR_AFTER: ["delete"],
            EditorAction.INTERRUPT: ["ctrl+c"],
            EditorAction.FOCUS_NEXT: ["tab"],
            EditorAction.FOCUS_PREVIOUS: ["shift+tab"],
        }
    )


class KeybindingManager:
    """Manages keybinding lookups and matching."""

    def __init__(self, config: KeybindingConfig | None = None) -> None:
        self.config = config or get_default_keybindings()
        self._key_to_action: dict[str, EditorAction] = {}
        self._build_lookup()

    def _build_lookup(self) -> None:
        """Build reverse lookup from key to action."""
        self._key_to_action.clear()
        for action, keys in self.config.bindings.items():
            for key in keys:
                self._key_to_action[self._normalize_key(key)] = action

    def _normalize_key(self, key: str) -> str:
        """Normalize key string for consistent matching."""
        parts = key.lower().split("+")
        if len(parts) == 1:
            return parts[0]

        # Sort modifiers so "shift+ctrl+x" == "ctrl+shift+x"
        modifiers = sorted(p for p in parts[:-1] if p in ("ctrl", "alt", "shift", "meta"))
        return "+".join(modifiers + [parts[-1]])

    def match(self, key: str) -> EditorAction | None:
        """Match a key string (e.g. "ctrl+c", "enter") to an action."""
        return self._key_to_action.get(self._normalize_key(key))

    def key_to_edit(
        self, key: str, character: str | None = None
    ) -> tuple[EditorAction, str] | None:
        """Translate a key press into an edit intent.

        Bound keys yield their action, printable characters yield INSERT with
        the character as payload. Anything else yields None.
        """
        action = self.match(key)
        if action is not None:
            return action, ""

        if character and character.isprintable():
            return EditorAction.INSERT, character

        return None

    def get_action_keys(self, action: EditorAction) -> list[str]:
        """Get all keys bound to an action."""
        return self.config.get_keys(action)
