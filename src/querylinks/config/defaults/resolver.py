"""Config defaults – get_option."""
from __future__ import annotations

from typing import Any, Mapping

from querylinks.config.defaults.registry import SchemaRegistry, default_registry, normalize_default_order
from querylinks.config.defaults.runtime import get_settings
from querylinks.config.settings import QueryLinksSettings


def get_option(
    name: str,
    opts: Mapping[str, Any] | None = None,
    *,
    registry: SchemaRegistry | None = None,
    settings: QueryLinksSettings | None = None,
) -> Any:
    """Return the first value present for *name* along the resolution chain.

    1. ``opts[name]``
    2. the options registered for the schema in ``opts["for"]``
    3. the process-wide settings (or *settings*, when given)
    4. ``None``

    ``default_order`` is always returned as a
    :class:`~querylinks.config.defaults.registry.DefaultOrder`.

    >>> get_option("default_limit", {"default_limit": 15})
    15
    >>> get_option("default_limit", {}, settings=QueryLinksSettings(default_limit=50))
    50
    """
    opts = opts or {}
    if registry is None:
        registry = default_registry
    value = _resolve(name, opts, registry, settings or get_settings())
    if name == "default_order":
        return normalize_default_order(value)
    return value


def _resolve(
    name: str,
    opts: Mapping[str, Any],
    registry: SchemaRegistry,
    settings: QueryLinksSettings,
) -> Any:
    value = opts.get(name)
    if value is not None:
        return value

    schema_options = registry.get(opts.get("for"))
    if schema_options is not None:
        value = getattr(schema_options, name, None)
        if value is not None:
            return value

    return getattr(settings, name, None)


__all__ = ["get_option"]
