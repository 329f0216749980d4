"""Tests for settings loading."""

import json
import logging

import pytest
from pipy_input.settings import (
    CONFIG_DIR_NAME,
    SETTINGS_FILE_NAME,
    InputSettings,
    SettingsManager,
    deep_merge,
)


def write_json(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


@pytest.fixture
def dirs(tmp_path):
    cwd = tmp_path / "project"
    config_dir = tmp_path / "global"
    cwd.mkdir()
    config_dir.mkdir()
    return cwd, config_dir


class TestDeepMerge:
    def test_override(self):
        assert deep_merge({"a": 1, "b": 2}, {"b": 3}) == {"a": 1, "b": 3}

    def test_none_skipped(self):
        assert deep_merge({"a": 1}, {"a": None}) == {"a": 1}

    def test_nested(self):
        assert deep_merge({"a": {"x": 1, "y": 2}}, {"a": {"y": 3}}) == {"a": {"x": 1, "y": 3}}


class TestInputSettings:
    def test_defaults(self):
        settings = InputSettings()
        assert settings.show_cursor
        assert not settings.highlight_pasted_text
        assert settings.language is None

    def test_to_options(self):
        options = InputSettings(placeholder="Query", mask="*", language="sql").to_options(focus=False)
        assert options.placeholder == "Query"
        assert options.mask == "*"
        assert options.language == "sql"
        assert not options.focus

    def test_invalid_mask(self):
        with pytest.raises(ValueError):
            InputSettings(mask="***").to_options()


class TestSettingsManager:
    def test_no_files(self, dirs):
        cwd, config_dir = dirs
        assert SettingsManager(cwd=cwd, config_dir=config_dir).settings == InputSettings()

    def test_defaults_not_shared(self, dirs):
        cwd, config_dir = dirs
        first = SettingsManager(cwd=cwd, config_dir=config_dir)
        first.settings.language = "sql"
        second = SettingsManager(cwd=cwd, config_dir=config_dir)
        assert second.settings.language is None

    def test_no_shared_default_export(self):
        import pipy_input.settings as settings_pkg

        assert not hasattr(settings_pkg, "DEFAULT_SETTINGS")

    def test_global_settings(self, dirs):
        cwd, config_dir = dirs
        write_json(config_dir / SETTINGS_FILE_NAME, {"placeholder": "Type..."})
        assert SettingsManager(cwd=cwd, config_dir=config_dir).settings.placeholder == "Type..."

    def test_project_overrides_global(self, dirs):
        cwd, config_dir = dirs
        write_json(config_dir / SETTINGS_FILE_NAME, {"placeholder": "global", "language": "sql"})
        write_json(cwd / CONFIG_DIR_NAME / SETTINGS_FILE_NAME, {"placeholder": "project"})
        settings = SettingsManager(cwd=cwd, config_dir=config_dir).settings
        assert settings.placeholder == "project"
        assert settings.language == "sql"

    def test_camel_case_migrated(self, dirs):
        cwd, config_dir = dirs
        write_json(
            config_dir / SETTINGS_FILE_NAME,
            {"showCursor": False, "highlightPastedText": True, "syntaxTheme": "monokai"},
        )
        settings = SettingsManager(cwd=cwd, config_dir=config_dir).settings
        assert settings.show_cursor is False
        assert settings.highlight_pasted_text is True
        assert settings.syntax_theme == "monokai"

    def test_unknown_keys_ignored(self, dirs):
        cwd, config_dir = dirs
        write_json(config_dir / SETTINGS_FILE_NAME, {"mask": "*", "colour": "red"})
        assert SettingsManager(cwd=cwd, config_dir=config_dir).settings.mask == "*"

    def test_malformed_file_warns(self, dirs, caplog):
        cwd, config_dir = dirs
        (config_dir / SETTINGS_FILE_NAME).write_text("{not json", encoding="utf-8")
        with caplog.at_level(logging.WARNING):
            settings = SettingsManager(cwd=cwd, config_dir=config_dir).settings
        assert settings == InputSettings()
        assert "Could not load settings" in caplog.text

    def test_non_object_warns(self, dirs, caplog):
        cwd, config_dir = dirs
        write_json(config_dir / SETTINGS_FILE_NAME, ["sql"])
        with caplog.at_level(logging.WARNING):
            settings = SettingsManager(cwd=cwd, config_dir=config_dir).settings
        assert settings == InputSettings()
        assert "expected a JSON object" in caplog.text

    def test_reload(self, dirs):
        cwd, config_dir = dirs
        manager = SettingsManager(cwd=cwd, config_dir=config_dir)
        write_json(config_dir / SETTINGS_FILE_NAME, {"language": "python"})
        manager.reload()
        assert manager.settings.language == "python"
