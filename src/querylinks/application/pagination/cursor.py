"""Application pagination – cursor link resolution.

Each of the two visual slots keeps its parameter: the previous slot
navigates with ``before``, the next slot with ``after``. Without
``reverse`` the previous slot takes ``start_cursor``/``has_previous_page``
and the next slot ``end_cursor``/``has_next_page``; ``reverse`` swaps the
cursor and flag between the slots.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Literal, Mapping

from querylinks.application.options import add_class, resolve_options
from querylinks.application.pagination.links import Link
from querylinks.application.query import build_path
from querylinks.application.state import CursorDirection, Meta, with_cursor
from querylinks.config.defaults import SchemaRegistry
from querylinks.config.settings import QueryLinksSettings
from querylinks.observability.logging import get_logger

logger = get_logger(__name__)

_SLOT_PARAMS: dict[CursorDirection, Literal["after", "before"]] = {
    CursorDirection.PREVIOUS: "before",
    CursorDirection.NEXT: "after",
}


@dataclasses.dataclass(frozen=True)
class CursorLinkTarget:
    """Resolved destination of one cursor link slot.

    ``direction`` is the navigation the slot performs; it differs from
    ``slot`` when reversed. A disabled target has no parameter and no cursor.
    """

    slot: CursorDirection
    direction: CursorDirection
    param_name: Literal["after", "before"] | None
    cursor_value: str | None
    enabled: bool


def resolve_cursor_link(
    meta: Meta, slot: CursorDirection | str, reverse: bool = False
) -> CursorLinkTarget:
    """Resolve the link shown in the *slot* position."""
    slot = CursorDirection(slot)
    if reverse:
        direction = (
            CursorDirection.NEXT if slot is CursorDirection.PREVIOUS else CursorDirection.PREVIOUS
        )
    else:
        direction = slot

    if meta.errors:
        return CursorLinkTarget(slot, direction, None, None, False)

    if direction is CursorDirection.NEXT:
        cursor, enabled = meta.end_cursor, meta.has_next_page
    else:
        cursor, enabled = meta.start_cursor, meta.has_previous_page

    if not enabled:
        return CursorLinkTarget(slot, direction, None, None, False)
    return CursorLinkTarget(slot, direction, _SLOT_PARAMS[slot], cursor, True)


def resolve_cursor_links(
    meta: Meta, reverse: bool = False
) -> tuple[CursorLinkTarget, CursorLinkTarget]:
    """Resolve ``(previous_slot, next_slot)``; both are disabled when ``meta.errors`` is set."""
    if meta.errors:
        logger.warning("cursor_links_disabled", errors=len(meta.errors))
    previous = resolve_cursor_link(meta, CursorDirection.PREVIOUS, reverse)
    next_ = resolve_cursor_link(meta, CursorDirection.NEXT, reverse)
    logger.debug(
        "cursor_links_resolved",
        reverse=reverse,
        previous=previous.enabled,
        next=next_.enabled,
    )
    return previous, next_


@dataclasses.dataclass(frozen=True)
class CursorPaginationView:
    """``show`` is false when the metadata carries errors."""

    show: bool
    previous: Link
    next: Link
    wrapper_attrs: dict[str, Any] = dataclasses.field(default_factory=dict)


def _cursor_link(
    resolved: CursorLinkTarget,
    meta: Meta,
    opts: Mapping[str, Any],
    path: Any,
    event: str | None,
    target: str | None,
    registry: SchemaRegistry | None,
    settings: QueryLinksSettings | None,
) -> Link:
    kind = resolved.slot.value
    attrs = opts[f"{kind}_link_attrs"]
    content = opts[f"{kind}_link_content"]
    if not resolved.enabled:
        return Link(kind, content, add_class(attrs, opts["disabled_class"]), disabled=True)

    destination = None
    if path is not None:
        flop = with_cursor(meta.flop, resolved.param_name, resolved.cursor_value, meta.page_size)
        destination = build_path(
            path, flop, {"for": meta.schema}, registry=registry, settings=settings
        )
    value = {"to": resolved.direction.value} if event else None
    return Link(
        kind,
        content,
        dict(attrs),
        path=destination,
        event=event,
        target=target,
        value=value,
    )


def build_cursor_pagination(
    meta: Meta,
    *,
    path: Any = None,
    event: str | None = None,
    target: str | None = None,
    reverse: bool = False,
    opts: Mapping[str, Any] | None = None,
    registry: SchemaRegistry | None = None,
    settings: QueryLinksSettings | None = None,
) -> CursorPaginationView:
    """Compute the previous/next cursor links for *meta*.

    The event payload is ``{"to": direction}``.
    """
    opts = resolve_options("cursor_pagination", opts, settings=settings)
    previous, next_ = resolve_cursor_links(meta, reverse)
    return CursorPaginationView(
        show=not meta.errors,
        previous=_cursor_link(previous, meta, opts, path, event, target, registry, settings),
        next=_cursor_link(next_, meta, opts, path, event, target, registry, settings),
        wrapper_attrs=dict(opts["wrapper_attrs"]),
    )


__all__ = [
    "CursorLinkTarget",
    "CursorPaginationView",
    "build_cursor_pagination",
    "resolve_cursor_link",
    "resolve_cursor_links",
]
