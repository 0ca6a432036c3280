"""Config – 12-factor settings, schema defaults and the default-option resolver."""

from querylinks.config.defaults import (
    DefaultOrder,
    SchemaOptions,
    SchemaRegistry,
    configure,
    default_registry,
    get_option,
    get_settings,
)
from querylinks.config.settings import EnvSettingsLoader, QueryLinksSettings, Settings, SettingsLoader
from querylinks.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DefaultOrder",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "QueryLinksSettings",
    "SchemaOptions",
    "SchemaRegistry",
    "Settings",
    "SettingsLoader",
    "configure",
    "default_registry",
    "get_option",
    "get_settings",
]
