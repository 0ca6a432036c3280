"""Config settings – Settings base class and the library settings."""
from __future__ import annotations

import dataclasses
import re
from typing import ClassVar

from querylinks.config.validation import InvalidSettingValueError

_DIRECTIONS = frozenset({"asc", "desc"})
_PAGE_LINKS_RE = re.compile(r"^(all|hide|ellipsis:[0-9]+)$")


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class QueryLinksSettings(Settings):
    """Process-wide defaults, the last step of the default-option chain.

    ``pagination_opts``, ``cursor_pagination_opts`` and ``table_opts`` are
    qualified references (``"package.module:function"``) to functions that
    return option overrides for the respective component.
    """

    _prefix: ClassVar[str] = "QUERYLINKS"

    default_limit: int | None = None
    max_limit: int | None = None
    default_order_by: list[str] = dataclasses.field(default_factory=list)
    default_order_directions: list[str] = dataclasses.field(default_factory=list)
    page_links: str = "all"
    pagination_opts: str | None = None
    cursor_pagination_opts: str | None = None
    table_opts: str | None = None

    def _validate(self) -> None:
        for name in ("default_limit", "max_limit"):
            value = getattr(self, name)
            if value is not None and value < 1:
                raise InvalidSettingValueError(name, value, "must be a positive integer")
        if self.default_order_directions:
            if len(self.default_order_directions) != len(self.default_order_by):
                raise InvalidSettingValueError(
                    "default_order_directions",
                    self.default_order_directions,
                    "must have the same length as default_order_by",
                )
            unknown = [d for d in self.default_order_directions if d not in _DIRECTIONS]
            if unknown:
                raise InvalidSettingValueError(
                    "default_order_directions", unknown, "directions must be 'asc' or 'desc'"
                )
        if not _PAGE_LINKS_RE.match(self.page_links):
            raise InvalidSettingValueError(
                "page_links", self.page_links, "expected 'all', 'hide' or 'ellipsis:<n>'"
            )

    @property
    def default_order(self) -> tuple[tuple[str, ...], tuple[str, ...]] | None:
        """``(order_by, order_directions)`` or ``None`` when no order is configured."""
        if not self.default_order_by:
            return None
        return tuple(self.default_order_by), tuple(self.default_order_directions)


__all__ = ["QueryLinksSettings", "Settings"]
