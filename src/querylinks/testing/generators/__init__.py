"""Testing generators – metadata builders and hypothesis strategies."""
from querylinks.testing.generators.builder import MetaBuilder
from querylinks.testing.generators.strategies import (
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
