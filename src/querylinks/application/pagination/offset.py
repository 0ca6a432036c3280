"""Application pagination – offset/page based pagination view."""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, Mapping

from querylinks.application.options import add_class, resolve_options
from querylinks.application.pagination.links import Link
from querylinks.application.pagination.page_links import PageToken, plan_page_links
from querylinks.application.query import build_path, to_query
from querylinks.application.state import Meta, set_page
from querylinks.config.defaults import SchemaRegistry
from querylinks.config.settings import QueryLinksSettings


@dataclasses.dataclass(frozen=True)
class PaginationView:
    """Previous link, page links and next link; ``show`` is false for a single page."""

    show: bool
    previous: Link
    pages: list[Link]
    next: Link
    wrapper_attrs: dict[str, Any] = dataclasses.field(default_factory=dict)
    list_attrs: dict[str, Any] = dataclasses.field(default_factory=dict)


def build_page_link_helper(
    meta: Meta,
    path: Any,
    *,
    registry: SchemaRegistry | None = None,
    settings: QueryLinksSettings | None = None,
) -> Callable[[int], Any]:
    """Return ``page -> destination`` for *meta*'s state.

    Offset/limit states are converted to page/page_size first; page 1 is
    left out of the parameters.
    """
    if path is None:
        return lambda page: None

    flop = set_page(meta.flop, meta.current_page or 1)
    params = to_query(flop, {"for": meta.schema}, registry=registry, settings=settings)
    base = {k: v for k, v in params.items() if k != "page"}

    def page_link(page: int) -> Any:
        query = base if page == 1 else {"page": page, **base}
        return build_path(path, query)

    return page_link


def _nav_link(
    kind: str,
    page: int,
    disabled: bool,
    opts: Mapping[str, Any],
    page_link: Callable[[int], Any],
    event: str | None,
    target: str | None,
) -> Link:
    attrs = opts[f"{kind}_link_attrs"]
    content = opts[f"{kind}_link_content"]
    if disabled:
        return Link(kind, content, add_class(attrs, opts["disabled_class"]), disabled=True)
    return Link(
        kind,
        content,
        dict(attrs),
        page=page,
        path=page_link(page),
        event=event,
        target=target,
        value={"page": page} if event else None,
    )


def _page_link(
    token: PageToken,
    opts: Mapping[str, Any],
    page_link: Callable[[int], Any],
    event: str | None,
    target: str | None,
) -> Link:
    if token.kind == "ellipsis":
        return Link("ellipsis", opts["ellipsis_content"], dict(opts["ellipsis_attrs"]))
    attrs = dict(opts["current_link_attrs"] if token.current else opts["pagination_link_attrs"])
    attrs["aria-label"] = opts["pagination_link_aria_label"](token.page)
    return Link(
        "page",
        str(token.page),
        attrs,
        page=token.page,
        path=page_link(token.page),
        event=event,
        target=target,
        value={"page": token.page} if event else None,
        current=token.current,
    )


def build_pagination(
    meta: Meta,
    *,
    path: Any = None,
    event: str | None = None,
    target: str | None = None,
    opts: Mapping[str, Any] | None = None,
    registry: SchemaRegistry | None = None,
    settings: QueryLinksSettings | None = None,
) -> PaginationView:
    """Compute the pagination links for *meta*.

    Pass *path* for URL navigation and/or *event* (with an optional
    *target*) for event dispatch; the event payload is ``{"page": n}``.
    """
    opts = resolve_options("pagination", opts, settings=settings)
    page_link = build_page_link_helper(meta, path, registry=registry, settings=settings)
    total_pages = meta.total_pages or 0
    current_page = meta.current_page or 1

    previous = _nav_link(
        "previous", current_page - 1, current_page <= 1, opts, page_link, event, target
    )
    next_ = _nav_link(
        "next", current_page + 1, current_page >= total_pages, opts, page_link, event, target
    )
    tokens = plan_page_links(current_page, total_pages, opts["page_links"])
    pages = [_page_link(token, opts, page_link, event, target) for token in tokens]

    return PaginationView(
        show=total_pages > 1,
        previous=previous,
        pages=pages,
        next=next_,
        wrapper_attrs=dict(opts["wrapper_attrs"]),
        list_attrs=dict(opts["pagination_list_attrs"]),
    )


__all__ = ["PaginationView", "build_page_link_helper", "build_pagination"]
