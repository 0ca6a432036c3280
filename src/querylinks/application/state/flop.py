"""Application state – Flop, Filter, FilterOp, OrderDirection."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Sequence


class OrderDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class FilterOp(str, Enum):
    EQ = "=="
    NOT_EQ = "!="
    MATCHES = "=~"
    EMPTY = "empty"
    NOT_EMPTY = "not_empty"
    LTE = "<="
    LT = "<"
    GTE = ">="
    GT = ">"
    IN = "in"
    NOT_IN = "not_in"
    CONTAINS = "contains"
    NOT_CONTAINS = "not_contains"
    LIKE = "like"
    NOT_LIKE = "not_like"
    LIKE_AND = "like_and"
    LIKE_OR = "like_or"
    ILIKE = "ilike"
    NOT_ILIKE = "not_ilike"
    ILIKE_AND = "ilike_and"
    ILIKE_OR = "ilike_or"


@dataclasses.dataclass(frozen=True)
class Filter:
    """A single filter entry.

    ``default`` marks filters populated from a configured default rather than
    from user input. It never leaves the process.
    """

    field: str
    op: FilterOp = FilterOp.EQ
    value: Any = None
    default: bool = dataclasses.field(default=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.op, FilterOp):
            object.__setattr__(self, "op", FilterOp(self.op))

    def to_params(self) -> dict[str, Any]:
        """Plain projection used on the wire."""
        return {"field": self.field, "op": self.op.value, "value": self.value}


def _tuple_or_none(values: Sequence[Any] | str | None) -> tuple[Any, ...] | None:
    if values is None:
        return None
    if isinstance(values, str):
        return (values,)
    return tuple(values)


@dataclasses.dataclass(frozen=True)
class Flop:
    """Pagination, sort and filter state for one query attempt.

    Which pagination fields are populated depends on the pagination type the
    caller chose; nothing here enforces exclusivity.
    """

    offset: int | None = None
    page: int | None = None
    page_size: int | None = None
    limit: int | None = None
    first: int | None = None
    last: int | None = None
    after: str | None = None
    before: str | None = None
    order_by: tuple[str, ...] | None = None
    order_directions: tuple[OrderDirection, ...] | None = None
    filters: tuple[Filter, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "order_by", _tuple_or_none(self.order_by))
        directions = _tuple_or_none(self.order_directions)
        if directions is not None:
            directions = tuple(OrderDirection(d) for d in directions)
        object.__setattr__(self, "order_directions", directions)
        object.__setattr__(self, "filters", tuple(self.filters or ()))

    def replace(self, **changes: Any) -> Flop:
        return dataclasses.replace(self, **changes)

    @property
    def current_page_size(self) -> int | None:
        """The page size whatever the pagination type."""
        return self.page_size or self.limit or self.first or self.last


__all__ = ["Filter", "FilterOp", "Flop", "OrderDirection"]
