"""Application options – built-in defaults per component."""
from __future__ import annotations

from typing import Any, Literal, TypeAlias

Component: TypeAlias = Literal["pagination", "cursor_pagination", "table"]


def _page_aria_label(page: int) -> str:
    return f"Go to page {page}"


PAGINATION_DEFAULTS: dict[str, Any] = {
    "current_link_attrs": {"class": "pagination-link is-current", "aria-current": "page"},
    "disabled_class": "disabled",
    "ellipsis_attrs": {"class": "pagination-ellipsis"},
    "ellipsis_content": "…",
    "next_link_attrs": {"aria-label": "Go to next page", "class": "pagination-next"},
    "next_link_content": "Next",
    "page_links": "all",
    "pagination_link_aria_label": _page_aria_label,
    "pagination_link_attrs": {"class": "pagination-link"},
    "pagination_list_attrs": {"class": "pagination-list"},
    "previous_link_attrs": {"aria-label": "Go to previous page", "class": "pagination-previous"},
    "previous_link_content": "Previous",
    "wrapper_attrs": {"class": "pagination", "role": "navigation", "aria-label": "pagination"},
}

CURSOR_PAGINATION_DEFAULTS: dict[str, Any] = {
    "disabled_class": "disabled",
    "next_link_attrs": {"aria-label": "Go to next page", "class": "pagination-next"},
    "next_link_content": "Next",
    "previous_link_attrs": {"aria-label": "Go to previous page", "class": "pagination-previous"},
    "previous_link_content": "Previous",
    "wrapper_attrs": {"class": "pagination", "role": "navigation", "aria-label": "pagination"},
}

TABLE_DEFAULTS: dict[str, Any] = {
    "container": False,
    "container_attrs": {"class": "table-container"},
    "no_results_content": "No results.",
    "symbol_asc": "▴",
    "symbol_attrs": {"class": "order-direction"},
    "symbol_desc": "▾",
    "symbol_unsorted": None,
    "table_attrs": {},
    "th_wrapper_attrs": {},
    "thead_th_attrs": {},
    "thead_tr_attrs": {},
}

__all__ = ["CURSOR_PAGINATION_DEFAULTS", "Component", "PAGINATION_DEFAULTS", "TABLE_DEFAULTS"]
