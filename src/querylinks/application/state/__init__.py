"""Application state – pagination/sort/filter state and position metadata."""
from querylinks.application.state.flop import Filter, FilterOp, Flop, OrderDirection
from querylinks.application.state.meta import Meta
from querylinks.application.state.ordering import current_order, push_order
from querylinks.application.state.paging import CursorDirection, set_cursor, set_page, with_cursor
from querylinks.config.defaults import DefaultOrder

__all__ = [
    "CursorDirection",
    "DefaultOrder",
    "Filter",
    "FilterOp",
    "Flop",
    "Meta",
    "OrderDirection",
    "current_order",
    "push_order",
    "set_cursor",
    "set_page",
    "with_cursor",
]
