"""Application pagination – offset page-link planner.

Window policies:

* ``"all"`` – every page from 1 to ``total_pages``.
* ``"hide"`` – no page links at all.
* ``("ellipsis", n)`` – first and last page, the current page and up to ``n``
  additional pages around it. Gaps of two or more pages collapse into one
  ellipsis; a gap of a single page shows that page instead.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Literal, TypeAlias

from querylinks.kernel.errors import InvalidPageLinksError
from querylinks.observability.logging import get_logger

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class EllipsisWindow:
    """``("ellipsis", size)`` policy."""

    size: int


PageLinksPolicy: TypeAlias = Literal["all", "hide"] | EllipsisWindow


@dataclasses.dataclass(frozen=True)
class PageToken:
    """One entry of the planned page-link sequence.

    ``current`` is informational and does not take part in equality.
    """

    kind: Literal["page", "ellipsis"]
    page: int | None = None
    current: bool = dataclasses.field(default=False, compare=False)


ELLIPSIS = PageToken("ellipsis")


def page_token(page: int, current: bool = False) -> PageToken:
    return PageToken("page", page, current)


def parse_page_links(value: Any) -> PageLinksPolicy:
    """Accept ``"all"``, ``"hide"``, ``("ellipsis", n)``, ``"ellipsis:n"`` or an
    :class:`EllipsisWindow`."""
    match value:
        case "all" | "hide":
            return value
        case EllipsisWindow(size=int() as size) if size >= 0:
            return value
        case ("ellipsis", int() as size) if size >= 0:
            return EllipsisWindow(size)
        case str() if value.startswith("ellipsis:") and value[9:].isdigit():
            return EllipsisWindow(int(value[9:]))
        case _:
            raise InvalidPageLinksError(value)


def page_window(current_page: int, total_pages: int, size: int) -> tuple[int, int]:
    """First and last page of the window around *current_page*.

    The window holds the current page plus *size* more, centred on the
    current page with any odd page going after it, and is shifted back inside
    ``[1, total_pages]`` near either end.
    """
    before = size // 2
    start = current_page - before
    end = current_page + (size - before)
    if start < 1:
        end += 1 - start
        start = 1
    if end > total_pages:
        start -= end - total_pages
        end = total_pages
    return max(start, 1), end


def _ellipsis_tokens(current_page: int, total_pages: int, size: int) -> list[PageToken]:
    start, end = page_window(current_page, total_pages, size)
    tokens: list[PageToken] = []

    if start > 1:
        tokens.append(page_token(1, current_page == 1))
        if start == 3:
            tokens.append(page_token(2, current_page == 2))
        elif start > 3:
            tokens.append(ELLIPSIS)

    tokens.extend(page_token(p, p == current_page) for p in range(start, end + 1))

    if end < total_pages:
        if end == total_pages - 2:
            tokens.append(page_token(total_pages - 1, current_page == total_pages - 1))
        elif end < total_pages - 2:
            tokens.append(ELLIPSIS)
        tokens.append(page_token(total_pages, current_page == total_pages))

    return tokens


def plan_page_links(current_page: int, total_pages: int, policy: Any = "all") -> list[PageToken]:
    """Return the ordered page tokens to render.

    Previous/next links are not part of the plan; see
    :func:`~querylinks.application.pagination.offset.build_pagination`.

    >>> [t.page for t in plan_page_links(5, 10, ("ellipsis", 2))]
    [1, None, 4, 5, 6, None, 10]
    """
    policy = parse_page_links(policy)
    match policy:
        case "hide":
            tokens = []
        case "all":
            tokens = [page_token(p, p == current_page) for p in range(1, (total_pages or 0) + 1)]
        case EllipsisWindow(size=size):
            tokens = _ellipsis_tokens(current_page, total_pages or 0, size) if total_pages else []

    logger.debug(
        "page_links_planned",
        current_page=current_page,
        total_pages=total_pages,
        tokens=len(tokens),
    )
    return tokens


__all__ = [
    "ELLIPSIS",
    "EllipsisWindow",
    "PageLinksPolicy",
    "PageToken",
    "page_token",
    "page_window",
    "parse_page_links",
    "plan_page_links",
]
