"""Application query – Flop state to query parameters."""
from __future__ import annotations

from typing import Any, Mapping

from querylinks.application.state import Flop
from querylinks.config.defaults import DefaultOrder, SchemaRegistry, get_option
from querylinks.config.settings import QueryLinksSettings


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, (list, tuple, dict)) and not value)


def _maybe_put(params: dict[str, Any], key: str, value: Any, default: Any = None) -> dict[str, Any]:
    """Push *key* to the front unless *value* is empty or equals *default*."""
    if _is_empty(value) or value == default:
        return params
    return {key: value, **{k: v for k, v in params.items() if k != key}}


def _maybe_put_order(
    params: dict[str, Any], flop: Flop, default_order: DefaultOrder | None
) -> dict[str, Any]:
    order_by = list(flop.order_by or ())
    directions = [d.value for d in flop.order_directions or ()]
    if default_order is not None and (tuple(order_by), tuple(directions)) == tuple(default_order):
        return params
    params = _maybe_put(params, "order_by", order_by)
    return _maybe_put(params, "order_directions", directions)


def to_query(
    flop: Flop,
    opts: Mapping[str, Any] | None = None,
    *,
    registry: SchemaRegistry | None = None,
    settings: QueryLinksSettings | None = None,
) -> dict[str, Any]:
    """Convert *flop* into query parameters, omitting default values.

    Defaults come from ``opts`` (``default_limit``, ``default_order``, or a
    schema under ``"for"``), then the process-wide settings. Each parameter
    is pushed to the front as it is added, so later rules come first.

    >>> to_query(Flop())
    {}
    >>> to_query(Flop(order_by=["name", "age"], order_directions=["desc", "asc"]))
    {'order_directions': ['desc', 'asc'], 'order_by': ['name', 'age']}
    >>> to_query(Flop(page=5, page_size=20))
    {'page_size': 20, 'page': 5}
    >>> to_query(Flop(page=5, page_size=20), {"default_limit": 20})
    {'page': 5}
    """
    default_limit = get_option("default_limit", opts, registry=registry, settings=settings)
    default_order = get_option("default_order", opts, registry=registry, settings=settings)

    params: dict[str, Any] = {}
    params = _maybe_put(params, "offset", flop.offset, 0)
    params = _maybe_put(params, "page", flop.page, 1)
    params = _maybe_put(params, "after", flop.after)
    params = _maybe_put(params, "before", flop.before)
    params = _maybe_put(params, "page_size", flop.page_size, default_limit)
    params = _maybe_put(params, "limit", flop.limit, default_limit)
    params = _maybe_put(params, "first", flop.first, default_limit)
    params = _maybe_put(params, "last", flop.last, default_limit)
    params = _maybe_put_order(params, flop, default_order)
    filters = {str(index): f.to_params() for index, f in enumerate(flop.filters)}
    return _maybe_put(params, "filters", filters)


__all__ = ["to_query"]
