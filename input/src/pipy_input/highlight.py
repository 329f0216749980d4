"""Syntax highlighting of code fragments."""

import logging
from functools import lru_cache
from typing import Callable

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound
from rich.syntax import Syntax, SyntaxTheme
from rich.text import Text

logger = logging.getLogger(__name__)

# (language, code) -> styled text whose plain text equals code
Highlighter = Callable[[str, str], Text]

DEFAULT_THEME = "ansi_dark"


@lru_cache(maxsize=32)
def get_lexer(language: str) -> Lexer | None:
    """Look up a pygments lexer by name or alias."""
    try:
        # Keep the fragment intact: segments are highlighted piecewise
        return get_lexer_by_name(language, stripnl=False, stripall=False, ensurenl=False)
    except ClassNotFound:
        logger.debug(f"No lexer for language {language!r}, rendering plain text")
        return None


class PygmentsHighlighter:
    """Highlights code with pygments tokens and a rich syntax theme."""

    def __init__(self, theme: str | SyntaxTheme = DEFAULT_THEME) -> None:
        self.theme = Syntax.get_theme(theme)

    def __call__(self, language: str, code: str) -> Text:
        lexer = get_lexer(language)
        if lexer is None or not code:
            return Text(code)

        text = Text()
        for token_type, token in lexer.get_tokens(code):
            text.append(token, style=self.theme.get_style_for_token(token_type))

        if text.plain != code:
            return Text(code)
        return text


def plain_highlighter(language: str, code: str) -> Text:
    """Highlighter that applies no styling."""
    return Text(code)
