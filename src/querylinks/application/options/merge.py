"""Application options – deep merge and resolution.

Options are resolved as ``defaults ← configured provider ← call-site``;
nested mappings are merged key by key, everything else is replaced.
"""
from __future__ import annotations

import copy
from typing import Any, Mapping

from querylinks.application.options.defaults import (
    CURSOR_PAGINATION_DEFAULTS,
    PAGINATION_DEFAULTS,
    TABLE_DEFAULTS,
    Component,
)
from querylinks.application.query import QualifiedPath
from querylinks.config.defaults import get_settings
from querylinks.config.settings import QueryLinksSettings
from querylinks.kernel.errors import UsageError

_DEFAULTS: dict[str, dict[str, Any]] = {
    "pagination": PAGINATION_DEFAULTS,
    "cursor_pagination": CURSOR_PAGINATION_DEFAULTS,
    "table": TABLE_DEFAULTS,
}


def deep_merge(base: Mapping[str, Any], overrides: Mapping[str, Any] | None) -> dict[str, Any]:
    """Return *base* with *overrides* merged in, recursing into nested mappings."""
    merged = dict(base)
    for key, value in (overrides or {}).items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def add_class(attrs: Mapping[str, Any], css_class: str | None) -> dict[str, Any]:
    """Append *css_class* to the ``class`` attribute."""
    attrs = dict(attrs)
    if not css_class:
        return attrs
    existing = attrs.get("class")
    attrs["class"] = f"{existing} {css_class}" if existing else css_class
    return attrs


def _provider_options(component: Component, settings: QueryLinksSettings) -> Mapping[str, Any]:
    reference = getattr(settings, f"{component}_opts", None)
    if not reference:
        return {}
    options = QualifiedPath.from_reference(reference).resolve()()
    if not isinstance(options, Mapping):
        raise UsageError(f"option provider {reference} must return a mapping")
    return options


def resolve_options(
    component: Component,
    overrides: Mapping[str, Any] | None = None,
    *,
    settings: QueryLinksSettings | None = None,
) -> dict[str, Any]:
    """Resolve the options for *component*.

    >>> resolve_options("pagination", {"next_link_attrs": {"class": "next"}})["next_link_attrs"]
    {'aria-label': 'Go to next page', 'class': 'next'}
    """
    settings = settings or get_settings()
    defaults = copy.deepcopy(_DEFAULTS[component])
    if component == "pagination":
        defaults["page_links"] = settings.page_links
    options = deep_merge(defaults, _provider_options(component, settings))
    return deep_merge(options, overrides)


__all__ = ["add_class", "deep_merge", "resolve_options"]
