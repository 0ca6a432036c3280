"""Application state – page and cursor navigation helpers."""
from __future__ import annotations

from enum import Enum
from typing import Literal

from querylinks.application.state.flop import Flop
from querylinks.application.state.meta import Meta


class CursorDirection(str, Enum):
    PREVIOUS = "previous"
    NEXT = "next"


def set_page(flop: Flop, page: int) -> Flop:
    """Return a page-based copy of *flop* pointing at *page*.

    Offset/limit states are converted to page/page_size; cursors are dropped.
    """
    return flop.replace(
        page=page,
        page_size=flop.page_size or flop.limit,
        offset=None,
        limit=None,
        first=None,
        last=None,
        after=None,
        before=None,
    )


def with_cursor(
    flop: Flop,
    param: Literal["after", "before"],
    cursor: str | None,
    page_size: int | None = None,
) -> Flop:
    """Point *flop* at *cursor*; ``after`` pairs with ``first``, ``before`` with ``last``."""
    page_size = page_size or flop.first or flop.last
    if param == "after":
        return flop.replace(after=cursor, before=None, first=page_size, last=None)
    return flop.replace(before=cursor, after=None, last=page_size, first=None)


def set_cursor(meta: Meta, direction: CursorDirection | str) -> Flop:
    """Return the state fetching the page next to *meta* in *direction*."""
    direction = CursorDirection(direction)
    page_size = meta.flop.first or meta.flop.last or meta.page_size
    if direction is CursorDirection.NEXT:
        return with_cursor(meta.flop, "after", meta.end_cursor, page_size)
    return with_cursor(meta.flop, "before", meta.start_cursor, page_size)


__all__ = ["CursorDirection", "set_cursor", "set_page", "with_cursor"]
