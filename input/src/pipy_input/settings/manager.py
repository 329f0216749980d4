"""Settings manager with global/project hierarchy."""

import json
import logging
from dataclasses import fields
from pathlib import Path

from .types import InputSettings

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".pi"
SETTINGS_FILE_NAME = "input.json"


def get_default_config_dir() -> Path:
    """Get the default global configuration directory."""
    return Path.home() / ".pipy"


def deep_merge(base: dict, overrides: dict) -> dict:
    """Deep merge two dictionaries. Overrides take precedence."""
    result = base.copy()

    for key, value in overrides.items():
        if value is None:
            continue

        base_value = result.get(key)
        if isinstance(value, dict) and isinstance(base_value, dict):
            result[key] = deep_merge(base_value, value)
        else:
            result[key] = value

    return result


def migrate_settings(data: dict) -> dict:
    """Migrate camelCase keys to snake_case."""
    key_migrations = {
        "showCursor": "show_cursor",
        "highlightPastedText": "highlight_pasted_text",
        "syntaxTheme": "syntax_theme",
    }

    for old_key, new_key in key_migrations.items():
        if old_key in data and new_key not in data:
            data[new_key] = data.pop(old_key)

    return data


def dict_to_settings(data: dict) -> InputSettings:
    """Convert a dictionary to InputSettings, ignoring unknown keys."""
    valid_fields = {f.name for f in fields(InputSettings)}
    unknown = sorted(k for k in data if k not in valid_fields)
    if unknown:
        logger.debug(f"Ignoring unknown settings keys: {', '.join(unknown)}")

    return InputSettings(**{k: v for k, v in data.items() if k in valid_fields})


class SettingsManager:
    """
    Loads input settings with a global/project hierarchy.

    Settings are loaded from:
    1. Global: ~/.pipy/input.json
    2. Project: <cwd>/.pi/input.json

    Project settings override global settings.
    """

    def __init__(
        self,
        cwd: str | Path | None = None,
        config_dir: str | Path | None = None,
    ):
        self._cwd = Path(cwd) if cwd else Path.cwd()
        self._config_dir = Path(config_dir) if config_dir else get_default_config_dir()

        self._global_settings_path = self._config_dir / SETTINGS_FILE_NAME
        self._project_settings_path = self._cwd / CONFIG_DIR_NAME / SETTINGS_FILE_NAME

        self._settings = InputSettings()
        self._load()

    @property
    def settings(self) -> InputSettings:
        return self._settings

    def _load(self) -> None:
        """Load settings from files."""
        merged = deep_merge(
            self._load_from_file(self._global_settings_path),
            self._load_from_file(self._project_settings_path),
        )
        self._settings = dict_to_settings(merged) if merged else InputSettings()

    def _load_from_file(self, path: Path) -> dict:
        """Load settings from a JSON file."""
        if not path.exists():
            return {}

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring settings in {path}: expected a JSON object")
            return {}

        return migrate_settings(data)

    def reload(self) -> None:
        """Re-read settings from disk."""
        self._load()
