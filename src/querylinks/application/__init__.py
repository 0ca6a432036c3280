"""Application – link and view computation over query state (framework-agnostic)."""

from querylinks.application.forms import FilterForm, filter_fields, hidden_inputs_for_filter
from querylinks.application.pagination import (
    build_cursor_pagination,
    build_pagination,
    plan_page_links,
    resolve_cursor_links,
)
from querylinks.application.query import build_path, decode_query, encode_query, pop_filter, to_query
from querylinks.application.state import (
    Filter,
    FilterOp,
    Flop,
    Meta,
    OrderDirection,
    push_order,
    set_cursor,
    set_page,
)
from querylinks.application.table import Column, build_table_headers

__all__ = [
    "Column",
    "Filter",
    "FilterForm",
    "FilterOp",
    "Flop",
    "Meta",
    "OrderDirection",
    "build_cursor_pagination",
    "build_pagination",
    "build_path",
    "build_table_headers",
    "decode_query",
    "encode_query",
    "filter_fields",
    "hidden_inputs_for_filter",
    "plan_page_links",
    "pop_filter",
    "push_order",
    "resolve_cursor_links",
    "set_cursor",
    "set_page",
    "to_query",
]
