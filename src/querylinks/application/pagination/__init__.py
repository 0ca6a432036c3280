"""Application pagination – page-link planning, cursor resolution and link views."""
from querylinks.application.pagination.cursor import (
    CursorLinkTarget,
    CursorPaginationView,
    build_cursor_pagination,
    resolve_cursor_link,
    resolve_cursor_links,
)
from querylinks.application.pagination.links import Link
from querylinks.application.pagination.offset import (
    PaginationView,
    build_page_link_helper,
    build_pagination,
)
from querylinks.application.pagination.page_links import (
    ELLIPSIS,
    EllipsisWindow,
    PageLinksPolicy,
    PageToken,
    page_token,
    page_window,
    parse_page_links,
    plan_page_links,
)

__all__ = [
    "ELLIPSIS",
    "CursorLinkTarget",
    "CursorPaginationView",
    "EllipsisWindow",
    "Link",
    "PageLinksPolicy",
    "PageToken",
    "PaginationView",
    "build_cursor_pagination",
    "build_page_link_helper",
    "build_pagination",
    "page_token",
    "page_window",
    "parse_page_links",
    "plan_page_links",
    "resolve_cursor_link",
    "resolve_cursor_links",
]
