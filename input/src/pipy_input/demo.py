"""SQL prompt demo for the TextInput widget.

Shows ghost-text autocomplete (accept with Right), syntax highlighting,
an error decoration under unknown leading keywords and a submission history.
"""

import argparse
import logging
import sys
from pathlib import Path

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.widgets import Static

from .segments import Decoration
from .settings import InputSettings, SettingsManager
from .suggestion import CombinedProvider, HistorySuggestionProvider, PrefixSuggestionProvider
from .widget import TextInput

logger = logging.getLogger(__name__)

SQL_COMMANDS = [
    "select * from users",
    "select * from orders",
    "select id, name from users",
    "insert into users values",
    "update users set",
    "delete from users where",
    "create table",
    "drop table",
    "alter table",
]

SQL_KEYWORDS = frozenset(cmd.split()[0] for cmd in SQL_COMMANDS)


def keyword_decorations(value: str) -> list[Decoration]:
    """Mark the first word as an error when it is not a known SQL keyword.

    A word still being typed at the end of the value is only marked once
    it cannot become a keyword.
    """
    stripped = value.lstrip()
    if not stripped:
        return []

    start = len(value) - len(stripped)
    word = stripped.split()[0]
    end = start + len(word)
    lower = word.lower()

    if lower in SQL_KEYWORDS:
        return []
    if end == len(value) and any(k.startswith(lower) for k in SQL_KEYWORDS):
        return []

    return [Decoration(start=start, end=end, style="error")]


class DemoApp(App):
    """SQL editor demo with autocomplete."""

    TITLE = "pipy-input demo"

    CSS = """
    Screen {
        layout: vertical;
        padding: 1;
    }

    #title {
        color: $accent;
        text-style: bold;
    }

    .hint {
        color: $text-muted;
    }

    #prompt-row {
        height: 1;
        margin-top: 1;
    }

    #prompt-marker {
        width: 2;
        color: green;
    }

    #history {
        margin-top: 1;
        height: auto;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
    ]

    def __init__(self, settings: InputSettings) -> None:
        super().__init__()
        self.input_settings = settings
        self.history_provider = HistorySuggestionProvider()
        self.submitted_entries: list[str] = []

    def compose(self) -> ComposeResult:
        yield Static("SQL Editor Demo (with autocomplete)", id="title")
        yield Static(
            "Type a SQL command - suggestions appear dimmed. Press right arrow to accept.",
            classes="hint",
        )
        yield Static("Press Enter to submit. Ctrl+C to exit.", classes="hint")
        with Horizontal(id="prompt-row"):
            yield Static("> ", id="prompt-marker")
            yield TextInput.from_settings(
                self.input_settings,
                suggest=CombinedProvider(
                    [self.history_provider, PrefixSuggestionProvider(SQL_COMMANDS)]
                ),
                id="prompt",
            )
        yield VerticalScroll(id="history")

    def on_mount(self) -> None:
        self.query_one("#prompt", TextInput).focus()

    @on(TextInput.Changed)
    def on_prompt_changed(self, event: TextInput.Changed) -> None:
        prompt = self.query_one("#prompt", TextInput)
        prompt.set_decorations(keyword_decorations(event.value))

    @on(TextInput.SuggestionAccepted)
    def on_suggestion_accepted(self, event: TextInput.SuggestionAccepted) -> None:
        logger.info(f"Accepted suggestion: {event.value}")

    @on(TextInput.Submitted)
    def on_prompt_submitted(self, event: TextInput.Submitted) -> None:
        text = event.value.strip()
        if not text:
            return

        self.submitted_entries.append(text)
        self.history_provider.add(text)
        logger.info(f"Submitted: {text}")

        history = self.query_one("#history", VerticalScroll)
        if len(self.submitted_entries) == 1:
            history.mount(Static("History:", classes="hint"))
        history.mount(Static(f"{len(self.submitted_entries)}. {text}"))

        prompt = self.query_one("#prompt", TextInput)
        prompt.value = ""
        prompt.set_decorations([])


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="pipy-input-demo",
        description="SQL prompt demo for the pipy-input TextInput widget",
    )
    parser.add_argument(
        "--language",
        help="Syntax highlighting language (default: sql, 'none' to disable)",
    )
    parser.add_argument("--placeholder", help="Placeholder shown when empty")
    parser.add_argument("--mask", help="Mask character, e.g. '*' for passwords")
    parser.add_argument(
        "--no-cursor",
        action="store_true",
        help="Hide the cursor and disable left/right navigation",
    )
    parser.add_argument(
        "--highlight-paste",
        action="store_true",
        help="Highlight pasted text with the cursor",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Write logs to this file (the terminal is owned by the UI)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug messages",
    )
    return parser


def _parse_language(name: str) -> str | None:
    return None if name.lower() == "none" else name


def build_settings(parsed: argparse.Namespace, base: InputSettings) -> InputSettings:
    """Apply command line overrides to loaded settings."""
    settings = InputSettings(
        placeholder=base.placeholder or "Enter SQL query...",
        mask=base.mask,
        show_cursor=base.show_cursor,
        highlight_pasted_text=base.highlight_pasted_text,
        language=_parse_language(base.language or "sql"),
        syntax_theme=base.syntax_theme,
    )

    if parsed.language is not None:
        settings.language = _parse_language(parsed.language)
    if parsed.placeholder is not None:
        settings.placeholder = parsed.placeholder
    if parsed.mask is not None:
        settings.mask = parsed.mask
    if parsed.no_cursor:
        settings.show_cursor = False
    if parsed.highlight_paste:
        settings.highlight_pasted_text = True

    return settings


def setup_logging(log_file: Path | None, verbose: bool) -> None:
    if log_file is None:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(args: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    parsed = parser.parse_args(args)

    setup_logging(parsed.log_file, parsed.verbose)

    settings = build_settings(parsed, SettingsManager().settings)
    try:
        settings.to_options()
    except ValueError as e:
        parser.error(str(e))

    DemoApp(settings).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
