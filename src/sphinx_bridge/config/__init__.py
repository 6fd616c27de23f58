"""Config – settings dataclasses, loaders and validation errors."""
from sphinx_bridge.config.settings import EnvSettingsLoader, SearchSettings, Settings, SettingsLoader
from sphinx_bridge.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SearchSettings",
    "Settings",
    "SettingsLoader",
]
