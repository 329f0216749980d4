"""Settings types and defaults."""

from dataclasses import dataclass

from ..highlight import DEFAULT_THEME
from ..render import RenderOptions


@dataclass
class InputSettings:
    """Input display settings with sensible defaults."""

    placeholder: str = ""
    mask: str | None = None
    show_cursor: bool = True
    highlight_pasted_text: bool = False

    # Syntax highlighting
    language: str | None = None
    syntax_theme: str = DEFAULT_THEME

    def to_options(self, focus: bool = True) -> RenderOptions:
        """Build render options. Raises ValueError for an invalid mask."""
        return RenderOptions(
            placeholder=self.placeholder,
            focus=focus,
            mask=self.mask,
            show_cursor=self.show_cursor,
            highlight_pasted_text=self.highlight_pasted_text,
            language=self.language,
        )

