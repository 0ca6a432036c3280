"""Application state – sort order helpers."""
from __future__ import annotations

from querylinks.application.state.flop import Flop, OrderDirection


def current_order(flop: Flop, field: str) -> OrderDirection | None:
    """Return the direction *field* is currently ordered by, or ``None``.

    Fields without an explicit direction are ordered ascending.
    """
    order_by = flop.order_by or ()
    if field not in order_by:
        return None
    index = order_by.index(field)
    directions = flop.order_directions or ()
    return directions[index] if index < len(directions) else OrderDirection.ASC


def push_order(flop: Flop, field: str) -> Flop:
    """Make *field* the primary order field.

    If *field* already is the primary field its direction is toggled;
    otherwise it is moved (or added) to the front, ascending. Pagination is
    reset: page-based states go back to page 1, offsets and cursors are
    cleared.

    >>> flop = push_order(Flop(order_by=("name",)), "name")
    >>> flop.order_directions
    (<OrderDirection.DESC: 'desc'>,)
    """
    order_by = list(flop.order_by or ())
    directions = list(flop.order_directions or ())
    directions += [OrderDirection.ASC] * (len(order_by) - len(directions))

    previous_index = order_by.index(field) if field in order_by else None
    if previous_index == 0 and directions[0] == OrderDirection.ASC:
        new_direction = OrderDirection.DESC
    else:
        new_direction = OrderDirection.ASC

    if previous_index is not None:
        del order_by[previous_index]
        del directions[previous_index]

    return flop.replace(
        order_by=(field, *order_by),
        order_directions=(new_direction, *directions),
        page=1 if flop.page is not None else None,
        offset=None,
        after=None,
        before=None,
    )


__all__ = ["current_order", "push_order"]
