"""Testing support – builders, hypothesis strategies and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["querylinks.testing.fixtures"]
"""

from querylinks.testing.generators import (
    MetaBuilder,
    cursor_meta_strategy,
    filter_strategy,
    flop_strategy,
    meta_strategy,
)

__all__ = [
    "MetaBuilder",
    "cursor_meta_strategy",
    "filter_strategy",
    "flop_strategy",
    "meta_strategy",
]
