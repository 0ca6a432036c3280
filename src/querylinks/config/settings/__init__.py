"""Config settings – 12-factor env-based configuration."""
from querylinks.config.settings.base import QueryLinksSettings, Settings
from querylinks.config.settings.factory import SettingsFactory
from querylinks.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "QueryLinksSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
