"""Application table – sortable column headers.

A column is sortable when it names a field and, if the schema registered a
list of sortable fields, that list contains it. Following a header link
makes the column the primary order field (see :func:`push_order`).
"""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping, Sequence

from querylinks.application.options import resolve_options
from querylinks.application.query import build_path
from querylinks.application.state import Meta, OrderDirection, current_order, push_order
from querylinks.config.defaults import SchemaRegistry, default_registry
from querylinks.config.settings import QueryLinksSettings


@dataclasses.dataclass(frozen=True)
class Column:
    label: str
    field: str | None = None
    show: bool = True
    hide: bool = False

    @property
    def visible(self) -> bool:
        return self.show and not self.hide


@dataclasses.dataclass(frozen=True)
class HeaderCell:
    label: str
    field: str | None
    sortable: bool
    direction: OrderDirection | None = None
    symbol: Any = None
    symbol_attrs: dict[str, Any] = dataclasses.field(default_factory=dict)
    attrs: dict[str, Any] = dataclasses.field(default_factory=dict)
    path: Any = None
    event: str | None = None
    target: str | None = None
    value: dict[str, Any] | None = None


def _is_sortable(meta: Meta, field: str | None, registry: SchemaRegistry) -> bool:
    if field is None:
        return False
    options = registry.get(meta.schema)
    return options is None or options.is_sortable(field)


def _symbol(direction: OrderDirection | None, opts: Mapping[str, Any]) -> Any:
    match direction:
        case OrderDirection.ASC:
            return opts["symbol_asc"]
        case OrderDirection.DESC:
            return opts["symbol_desc"]
        case _:
            return opts["symbol_unsorted"]


def build_table_headers(
    meta: Meta,
    columns: Sequence[Column],
    *,
    path: Any = None,
    event: str | None = None,
    target: str | None = None,
    opts: Mapping[str, Any] | None = None,
    registry: SchemaRegistry | None = None,
    settings: QueryLinksSettings | None = None,
) -> list[HeaderCell]:
    """Build one :class:`HeaderCell` per visible column.

    Sortable cells carry the destination re-ordering by their field and, for
    event transport, the payload ``{"order": field}``.
    """
    opts = resolve_options("table", opts, settings=settings)
    if registry is None:
        registry = default_registry
    cells: list[HeaderCell] = []

    for column in columns:
        if not column.visible:
            continue
        attrs = dict(opts["thead_th_attrs"])
        if not _is_sortable(meta, column.field, registry):
            cells.append(HeaderCell(column.label, column.field, False, attrs=attrs))
            continue

        direction = current_order(meta.flop, column.field)
        destination = None
        if path is not None:
            destination = build_path(
                path,
                push_order(meta.flop, column.field),
                {"for": meta.schema},
                registry=registry,
                settings=settings,
            )
        if direction is not None:
            attrs["aria-sort"] = "ascending" if direction is OrderDirection.ASC else "descending"
        cells.append(
            HeaderCell(
                column.label,
                column.field,
                True,
                direction=direction,
                symbol=_symbol(direction, opts),
                symbol_attrs=dict(opts["symbol_attrs"]),
                attrs=attrs,
                path=destination,
                event=event,
                target=target,
                value={"order": column.field} if event else None,
            )
        )
    return cells


__all__ = ["Column", "HeaderCell", "build_table_headers"]
