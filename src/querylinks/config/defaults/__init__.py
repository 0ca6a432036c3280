"""Config defaults – schema registry, process-wide settings and option resolver.

Resolution order for ``default_limit``, ``max_limit`` and ``default_order``::

    explicit options  →  schema registered under opts["for"]  →  configured settings  →  None
"""
from querylinks.config.defaults.registry import (
    DefaultOrder,
    SchemaOptions,
    SchemaRegistry,
    default_registry,
    normalize_default_order,
)
from querylinks.config.defaults.resolver import get_option
from querylinks.config.defaults.runtime import configure, get_settings, reset

__all__ = [
    "DefaultOrder",
    "SchemaOptions",
    "SchemaRegistry",
    "configure",
    "default_registry",
    "get_option",
    "get_settings",
    "normalize_default_order",
    "reset",
]
