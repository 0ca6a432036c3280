"""Application options – component option defaults and deep merging."""
from querylinks.application.options.defaults import (
    CURSOR_PAGINATION_DEFAULTS,
    PAGINATION_DEFAULTS,
    TABLE_DEFAULTS,
    Component,
)
from querylinks.application.options.merge import add_class, deep_merge, resolve_options

__all__ = [
    "CURSOR_PAGINATION_DEFAULTS",
    "Component",
    "PAGINATION_DEFAULTS",
    "TABLE_DEFAULTS",
    "add_class",
    "deep_merge",
    "resolve_options",
]
