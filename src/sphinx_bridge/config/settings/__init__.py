"""Config settings – 12-factor env-based configuration."""
from sphinx_bridge.config.settings.base import SearchSettings, Settings
from sphinx_bridge.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "SearchSettings", "Settings", "SettingsLoader"]
