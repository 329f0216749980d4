"""Autocomplete suggestions shown as ghost text."""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Iterable

logger = logging.getLogger(__name__)

SuggestionSource = Callable[[str], str | None]


def is_valid_suggestion(value: str, suggestion: str | None) -> bool:
    """A suggestion is valid when it strictly extends value."""
    return bool(suggestion) and suggestion.startswith(value) and suggestion != value


def resolve_suggestion(
    value: str,
    cursor_offset: int,
    suggest: SuggestionSource | None,
    focus: bool = True,
) -> str | None:
    """Return the full suggestion for value, or None if none is eligible.

    Only consulted when the input is focused and the cursor sits at the end
    of the value. The provider is called on every resolution.
    """
    if suggest is None or not focus or cursor_offset != len(value):
        return None

    suggestion = suggest(value)
    if not is_valid_suggestion(value, suggestion):
        if suggestion:
            logger.debug(f"Rejected suggestion {suggestion!r} for {value!r}")
        return None

    return suggestion


def ghost_text(
    value: str,
    cursor_offset: int,
    suggest: SuggestionSource | None,
    focus: bool = True,
) -> str:
    """Remainder of the eligible suggestion past value, or ""."""
    suggestion = resolve_suggestion(value, cursor_offset, suggest, focus)
    if suggestion is None:
        return ""
    return suggestion[len(value) :]


class SuggestionProvider(ABC):
    """Base class for suggestion providers.

    Providers are callable so they can be used anywhere a plain
    ``(value) -> str | None`` function is accepted.
    """

    @abstractmethod
    def get_suggestion(self, value: str) -> str | None:
        """Return the complete suggested text (including value), or None."""
        ...

    def __call__(self, value: str) -> str | None:
        return self.get_suggestion(value)


class PrefixSuggestionProvider(SuggestionProvider):
    """Suggests the first candidate that extends the typed text."""

    def __init__(self, candidates: Iterable[str], case_sensitive: bool = False) -> None:
        self.candidates = list(candidates)
        self.case_sensitive = case_sensitive

    def get_suggestion(self, value: str) -> str | None:
        if not value:
            return None

        for candidate in self.candidates:
            if self._matches(value, candidate) and len(candidate) > len(value):
                # Keep what the user typed, complete with the candidate's tail
                return value + candidate[len(value) :]

        return None

    def _matches(self, value: str, candidate: str) -> bool:
        # Offsets only line up when lowercasing keeps both lengths
        if (
            self.case_sensitive
            or len(value.lower()) != len(value)
            or len(candidate.lower()) != len(candidate)
        ):
            return candidate.startswith(value)
        return candidate.lower().startswith(value.lower())


class HistorySuggestionProvider(SuggestionProvider):
    """Suggests previously submitted entries, most recent first."""

    def __init__(self, entries: Iterable[str] = (), max_entries: int = 100) -> None:
        self.max_entries = max_entries
        self._history: list[str] = []
        for entry in entries:
            self.add(entry)

    @property
    def entries(self) -> list[str]:
        return list(self._history)

    def add(self, text: str) -> None:
        """Record a submitted entry."""
        text = text.strip()
        if not text:
            return

        # Don't add duplicates at top
        if self._history and self._history[0] == text:
            return

        self._history.insert(0, text)
        if len(self._history) > self.max_entries:
            self._history.pop()

    def get_suggestion(self, value: str) -> str | None:
        if not value:
            return None

        for entry in self._history:
            if entry.startswith(value) and entry != value:
                return entry

        return None


class CombinedProvider(SuggestionProvider):
    """Returns the first valid suggestion from a list of sources."""

    def __init__(self, providers: list[SuggestionSource]) -> None:
        self.providers = providers

    def get_suggestion(self, value: str) -> str | None:
        for provider in self.providers:
            suggestion = provider(value)
            if is_valid_suggestion(value, suggestion):
                return suggestion
        return None
