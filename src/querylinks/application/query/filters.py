"""Application query – removing a filter by field."""
from __future__ import annotations

from typing import Any, Mapping, overload

from querylinks.application.state import Filter, Flop
from querylinks.kernel.errors import UsageError
from querylinks.observability.logging import get_logger

logger = get_logger(__name__)


def _entry_field(entry: Any) -> Any:
    if isinstance(entry, Mapping):
        return entry.get("field")
    return getattr(entry, "field", None)


@overload
def pop_filter(source: Flop, field: str) -> tuple[Filter | None, Flop]: ...
@overload
def pop_filter(
    source: Mapping[str, Any], field: str
) -> tuple[dict[str, Any] | None, Mapping[str, Any]]: ...


def pop_filter(source: Any, field: str) -> tuple[Any, Any]:
    """Remove the first filter on *field* and return ``(filter, updated)``.

    Works on a :class:`Flop` or on parameters in the shape returned by
    :func:`~querylinks.application.query.to_query`; in the latter case the
    remaining filters are renumbered ``"0"``, ``"1"``, ... in their original
    order. Returns ``(None, source)`` unchanged when no filter matches.

    >>> params = {"filters": {"0": {"field": "a"}, "1": {"field": "b"}, "2": {"field": "c"}}}
    >>> pop_filter(params, "b")
    ({'field': 'b'}, {'filters': {'0': {'field': 'a'}, '1': {'field': 'c'}}})
    """
    if isinstance(source, Flop):
        return _pop_from_flop(source, field)
    if isinstance(source, Mapping):
        return _pop_from_params(source, field)
    raise UsageError(f"pop_filter expects a Flop or a parameter mapping, got {type(source).__name__}")


def _pop_from_flop(flop: Flop, field: str) -> tuple[Filter | None, Flop]:
    for index, entry in enumerate(flop.filters):
        if entry.field == field:
            remaining = flop.filters[:index] + flop.filters[index + 1 :]
            logger.debug("filter_popped", field=field, index=index)
            return entry, flop.replace(filters=remaining)
    return None, flop


def _pop_from_params(params: Mapping[str, Any], field: str) -> tuple[Any, Mapping[str, Any]]:
    filters = params.get("filters")
    if not filters:
        return None, params

    entries = [entry for _, entry in sorted(filters.items(), key=lambda item: int(item[0]))]
    for index, entry in enumerate(entries):
        if _entry_field(entry) == field:
            remaining = entries[:index] + entries[index + 1 :]
            updated = dict(params)
            updated["filters"] = {str(i): e for i, e in enumerate(remaining)}
            logger.debug("filter_popped", field=field, index=index)
            return entry, updated
    return None, params


__all__ = ["pop_filter"]
