"""
pipy-input - Single-line text input for terminal UIs, built on Textual.

Example:
    from pipy_input import TextInput, Decoration, PrefixSuggestionProvider

    prompt = TextInput(
        placeholder="Enter SQL query...",
        language="sql",
        suggest=PrefixSuggestionProvider(["select * from users"]),
        decorations=[Decoration(start=0, end=3, style="error")],
    )
"""

__version__ = "0.1.0"

# Widget
from .widget import TextInput

# Edit state machine
from .state import (
    EditResult,
    InputState,
    apply_edit,
    clamp_cursor,
    reconcile,
)

# Segments and decorations
from .segments import (
    Decoration,
    Segment,
    clamp_decorations,
    create_segments,
    merge_decoration_styles,
)
from .styles import DECORATION_STYLES, DecorationStyle, get_decoration_style

# Suggestions
from .suggestion import (
    CombinedProvider,
    HistorySuggestionProvider,
    PrefixSuggestionProvider,
    SuggestionProvider,
    SuggestionSource,
    ghost_text,
    is_valid_suggestion,
    resolve_suggestion,
)

# Rendering
from .highlight import Highlighter, PygmentsHighlighter, plain_highlighter
from .render import RenderOptions, mask_value, render_ansi, render_input

# Keybindings
from .keybindings import (
    EditorAction,
    KeybindingConfig,
    KeybindingManager,
    get_default_keybindings,
)

# Settings
from .settings import InputSettings, SettingsManager

__all__ = [
    # Version
    "__version__",
    # Widget
    "TextInput",
    # State
    "EditResult",
    "InputState",
    "apply_edit",
    "clamp_cursor",
    "reconcile",
    # Segments
    "Decoration",
    "DecorationStyle",
    "DECORATION_STYLES",
    "Segment",
    "clamp_decorations",
    "create_segments",
    "get_decoration_style",
    "merge_decoration_styles",
    # Suggestions
    "CombinedProvider",
    "HistorySuggestionProvider",
    "PrefixSuggestionProvider",
    "SuggestionProvider",
    "SuggestionSource",
    "ghost_text",
    "is_valid_suggestion",
    "resolve_suggestion",
    # Rendering
    "Highlighter",
    "PygmentsHighlighter",
    "plain_highlighter",
    "RenderOptions",
    "mask_value",
    "render_ansi",
    "render_input",
    # Keybindings
    "EditorAction",
    "KeybindingConfig",
    "KeybindingManager",
    "get_default_keybindings",
    # Settings
    "InputSettings",
    "SettingsManager",
]
