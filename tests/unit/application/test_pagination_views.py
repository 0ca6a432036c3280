"""Unit tests for the offset and cursor pagination views."""

from __future__ import annotations

import pytest

from querylinks.application.pagination import (
    CursorLinkTarget,
    build_cursor_pagination,
    build_page_link_helper,
    build_pagination,
    resolve_cursor_link,
    resolve_cursor_links,
)
from querylinks.application.state import CursorDirection, Flop, Meta
from querylinks.config.defaults import SchemaRegistry
from querylinks.config.settings import QueryLinksSettings
from querylinks.testing import MetaBuilder

PREVIOUS, NEXT = CursorDirection.PREVIOUS, CursorDirection.NEXT


@pytest.fixture
def page_meta() -> Meta:
    return MetaBuilder().page(2, page_size=10, total_count=35).build()


@pytest.fixture
def cursor_meta() -> Meta:
    return MetaBuilder().cursor("S", "E", has_previous_page=True, has_next_page=True).build()


# ---------------------------------------------------------------------------
# build_page_link_helper
# ---------------------------------------------------------------------------


class TestPageLinkHelper:
    def test_first_page_omits_page(self, page_meta: Meta) -> None:
        page_link = build_page_link_helper(page_meta, "/pets")
        assert page_link(1) == "/pets?page_size=10"
        assert page_link(3) == "/pets?page=3&page_size=10"

    def test_offset_state_converted(self) -> None:
        meta = Meta(flop=Flop(offset=20, limit=10), current_page=3, total_pages=5)
        assert build_page_link_helper(meta, "/pets")(4) == "/pets?page=4&page_size=10"

    def test_schema_default_limit_omitted(self) -> None:
        registry = SchemaRegistry()
        registry.register("pets", default_limit=10)
        meta = MetaBuilder().page(2, total_count=35).with_(schema="pets").build()
        assert build_page_link_helper(meta, "/pets", registry=registry)(3) == "/pets?page=3"

    def test_page_put_first_for_functions(self, page_meta: Meta) -> None:
        page_link = build_page_link_helper(page_meta, lambda params: list(params))
        assert page_link(3) == ["page", "page_size"]

    def test_no_path(self, page_meta: Meta) -> None:
        assert build_page_link_helper(page_meta, None)(3) is None


# ---------------------------------------------------------------------------
# build_pagination
# ---------------------------------------------------------------------------


class TestBuildPagination:
    def test_links(self, page_meta: Meta) -> None:
        view = build_pagination(page_meta, path="/pets")
        assert view.show
        assert view.previous.path == "/pets?page_size=10"
        assert view.next.path == "/pets?page=3&page_size=10"
        assert [link.content for link in view.pages] == ["1", "2", "3", "4"]
        assert [link.current for link in view.pages] == [False, True, False, False]

    def test_page_link_attrs(self, page_meta: Meta) -> None:
        view = build_pagination(page_meta, path="/pets")
        current = view.pages[1]
        assert current.attrs["aria-current"] == "page"
        assert current.attrs["aria-label"] == "Go to page 2"
        assert "is-current" in current.attrs["class"]
        assert view.pages[0].attrs == {"class": "pagination-link", "aria-label": "Go to page 1"}

    def test_first_page_disables_previous(self) -> None:
        view = build_pagination(MetaBuilder().page(1, total_count=35).build(), path="/pets")
        assert view.previous.disabled
        assert view.previous.path is None
        assert view.previous.attrs["class"] == "pagination-previous disabled"
        assert not view.next.disabled

    def test_last_page_disables_next(self) -> None:
        view = build_pagination(MetaBuilder().page(4, total_count=35).build(), path="/pets")
        assert view.next.disabled
        assert not view.next.navigable

    def test_single_page_hidden(self) -> None:
        assert not build_pagination(MetaBuilder().page(1, total_count=5).build()).show

    def test_event_transport(self, page_meta: Meta) -> None:
        view = build_pagination(page_meta, event="paginate-pets", target="#pets")
        assert view.next.path is None
        assert view.next.event == "paginate-pets"
        assert view.next.target == "#pets"
        assert view.next.value == {"page": 3}
        assert view.pages[0].value == {"page": 1}
        assert view.next.navigable

    def test_hide_page_links(self, page_meta: Meta) -> None:
        assert build_pagination(page_meta, opts={"page_links": "hide"}).pages == []

    def test_ellipsis_from_settings(self) -> None:
        meta = MetaBuilder().page(5, total_count=100).build()
        view = build_pagination(meta, settings=QueryLinksSettings(page_links="ellipsis:2"))
        assert [link.kind for link in view.pages] == [
            "page", "ellipsis", "page", "page", "page", "ellipsis", "page",
        ]
        assert view.pages[1].content == "…"
        assert view.pages[1].attrs == {"class": "pagination-ellipsis"}

    def test_option_overrides(self, page_meta: Meta) -> None:
        view = build_pagination(
            page_meta,
            opts={"next_link_content": "»", "next_link_attrs": {"class": "next"}},
        )
        assert view.next.content == "»"
        assert view.next.attrs == {"aria-label": "Go to next page", "class": "next"}


# ---------------------------------------------------------------------------
# Cursor link resolution
# ---------------------------------------------------------------------------


class TestResolveCursorLinks:
    def test_forward(self, cursor_meta: Meta) -> None:
        previous, next_ = resolve_cursor_links(cursor_meta)
        assert previous == CursorLinkTarget(PREVIOUS, PREVIOUS, "before", "S", True)
        assert next_ == CursorLinkTarget(NEXT, NEXT, "after", "E", True)

    def test_reverse_swaps_cursors_and_flags(self) -> None:
        meta = MetaBuilder().cursor("S", "E", has_previous_page=False, has_next_page=True).build()
        previous, next_ = resolve_cursor_links(meta, reverse=True)
        assert previous == CursorLinkTarget(PREVIOUS, NEXT, "before", "E", True)
        assert next_ == CursorLinkTarget(NEXT, PREVIOUS, None, None, False)

    def test_disabled_without_more_pages(self) -> None:
        meta = MetaBuilder().cursor("S", "E", has_previous_page=True).build()
        assert not resolve_cursor_link(meta, "next").enabled
        assert resolve_cursor_link(meta, "previous").enabled

    def test_errors_disable_both(self, cursor_meta: Meta) -> None:
        meta = MetaBuilder().cursor("S", "E", has_previous_page=True, has_next_page=True).errors().build()
        for target in resolve_cursor_links(meta):
            assert not target.enabled
            assert target.param_name is None
            assert target.cursor_value is None


# ---------------------------------------------------------------------------
# build_cursor_pagination
# ---------------------------------------------------------------------------


class TestBuildCursorPagination:
    def test_paths(self, cursor_meta: Meta) -> None:
        view = build_cursor_pagination(cursor_meta, path="/pets")
        assert view.show
        assert view.next.path == "/pets?after=E&first=10"
        assert view.previous.path == "/pets?before=S&last=10"

    def test_events(self, cursor_meta: Meta) -> None:
        view = build_cursor_pagination(cursor_meta, event="paginate-users")
        assert view.previous.value == {"to": "previous"}
        assert view.next.value == {"to": "next"}

    def test_reverse_event_direction(self, cursor_meta: Meta) -> None:
        view = build_cursor_pagination(cursor_meta, event="paginate-users", reverse=True)
        assert view.previous.value == {"to": "next"}
        assert view.next.value == {"to": "previous"}

    def test_reverse_paths_keep_slot_params(self, cursor_meta: Meta) -> None:
        view = build_cursor_pagination(cursor_meta, path="/pets", reverse=True)
        assert view.previous.path == "/pets?before=E&last=10"
        assert view.next.path == "/pets?after=S&first=10"

    def test_errors_hide_navigation(self) -> None:
        meta = MetaBuilder().cursor("S", "E", has_next_page=True).errors().build()
        view = build_cursor_pagination(meta, path="/pets", event="go")
        assert not view.show
        assert view.next.disabled
        assert view.next.path is None
        assert view.next.value is None
        assert view.next.attrs["class"] == "pagination-next disabled"
