"""Config defaults – per-schema default options.

A schema is any hashable key, usually the entity class a query is made for.
Classes may also declare their options inline::

    class Pet:
        __querylinks__ = {"default_limit": 20, "sortable": ["name", "age"]}
"""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Hashable, Iterable, Mapping, NamedTuple


class DefaultOrder(NamedTuple):
    """Default ordering: field sequence plus direction sequence."""

    order_by: tuple[str, ...]
    order_directions: tuple[str, ...] = ()


def _plain(value: Any) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def normalize_default_order(value: Any) -> DefaultOrder | None:
    """Coerce a mapping, pair or :class:`DefaultOrder` into a :class:`DefaultOrder`."""
    if value is None:
        return None
    if isinstance(value, Mapping):
        order_by = value.get("order_by")
        directions = value.get("order_directions")
    else:
        order_by, directions = value
    if isinstance(order_by, str):
        order_by = (order_by,)
    return DefaultOrder(
        tuple(_plain(f) for f in order_by or ()),
        tuple(_plain(d) for d in directions or ()),
    )


@dataclasses.dataclass(frozen=True)
class SchemaOptions:
    """Options registered for one schema."""

    default_limit: int | None = None
    max_limit: int | None = None
    default_order: DefaultOrder | None = None
    sortable: tuple[str, ...] | None = None
    filterable: tuple[str, ...] | None = None

    def is_sortable(self, field: str) -> bool:
        return self.sortable is None or field in self.sortable

    def is_filterable(self, field: str) -> bool:
        return self.filterable is None or field in self.filterable


def _names(values: Iterable[Any] | None) -> tuple[str, ...] | None:
    if values is None:
        return None
    return tuple(_plain(v) for v in values)


class SchemaRegistry:
    """Registry of schema defaults.

    Registration is expected at application start-up; lookups afterwards are
    plain dict reads.
    """

    def __init__(self) -> None:
        self._schemas: dict[Hashable, SchemaOptions] = {}

    def register(
        self,
        schema: Hashable,
        *,
        default_limit: int | None = None,
        max_limit: int | None = None,
        default_order: Any = None,
        sortable: Iterable[Any] | None = None,
        filterable: Iterable[Any] | None = None,
    ) -> SchemaOptions:
        options = SchemaOptions(
            default_limit=default_limit,
            max_limit=max_limit,
            default_order=normalize_default_order(default_order),
            sortable=_names(sortable),
            filterable=_names(filterable),
        )
        self._schemas[schema] = options
        return options

    def unregister(self, schema: Hashable) -> None:
        self._schemas.pop(schema, None)

    def get(self, schema: Hashable | None) -> SchemaOptions | None:
        if schema is None:
            return None
        options = self._schemas.get(schema)
        if options is not None:
            return options
        declared = getattr(schema, "__querylinks__", None)
        if isinstance(declared, Mapping):
            return SchemaOptions(
                default_limit=declared.get("default_limit"),
                max_limit=declared.get("max_limit"),
                default_order=normalize_default_order(declared.get("default_order")),
                sortable=_names(declared.get("sortable")),
                filterable=_names(declared.get("filterable")),
            )
        return None

    def clear(self) -> None:
        self._schemas.clear()

    def __contains__(self, schema: object) -> bool:
        return schema in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)


default_registry = SchemaRegistry()

__all__ = [
    "DefaultOrder",
    "SchemaOptions",
    "SchemaRegistry",
    "default_registry",
    "normalize_default_order",
]
