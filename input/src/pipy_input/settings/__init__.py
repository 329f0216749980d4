"""Settings management with global/project hierarchy."""

from .manager import (
    CONFIG_DIR_NAME,
    SETTINGS_FILE_NAME,
    SettingsManager,
    deep_merge,
    get_default_config_dir,
)
from .types import InputSettings

__all__ = [
    # Manager
    "SettingsManager",
    "get_default_config_dir",
    "CONFIG_DIR_NAME",
    "SETTINGS_FILE_NAME",
    "deep_merge",
    # Types
    "InputSettings",
]
