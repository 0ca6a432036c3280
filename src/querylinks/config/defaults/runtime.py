"""Config defaults – process-wide settings snapshot.

Call :func:`configure` once during start-up, before requests are served.
"""
from __future__ import annotations

from typing import Any

from querylinks.config.settings import EnvSettingsLoader, QueryLinksSettings, SettingsFactory, SettingsLoader

_settings: QueryLinksSettings | None = None


def configure(
    settings: QueryLinksSettings | None = None,
    *,
    loaders: list[SettingsLoader] | None = None,
    **overrides: Any,
) -> QueryLinksSettings:
    """Install the process-wide settings.

    Without an explicit *settings* instance, settings are loaded from the
    environment (or the given *loaders*) with *overrides* applied on top.
    """
    global _settings
    if settings is None:
        settings = SettingsFactory.create(
            QueryLinksSettings,
            loaders if loaders is not None else [EnvSettingsLoader()],
            overrides or None,
        )
    _settings = settings
    return settings


def get_settings() -> QueryLinksSettings:
    """Return the configured settings, or built-in defaults when unconfigured."""
    if _settings is None:
        return QueryLinksSettings()
    return _settings


def reset() -> None:
    global _settings
    _settings = None


__all__ = ["configure", "get_settings", "reset"]
