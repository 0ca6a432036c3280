"""Application state – Meta."""
from __future__ import annotations

import dataclasses
from typing import Any, Hashable, Mapping

from querylinks.application.state.flop import Flop


@dataclasses.dataclass(frozen=True)
class Meta:
    """Read-only position metadata produced by the query executor.

    A non-empty ``errors`` means the state failed validation and no position
    field can be trusted.
    """

    flop: Flop = dataclasses.field(default_factory=Flop)
    schema: Hashable | None = None
    total_count: int | None = None
    total_pages: int | None = None
    current_page: int | None = None
    current_offset: int | None = None
    page_size: int | None = None
    previous_page: int | None = None
    next_page: int | None = None
    has_previous_page: bool = False
    has_next_page: bool = False
    start_cursor: str | None = None
    end_cursor: str | None = None
    errors: tuple[Any, ...] = ()
    params: Mapping[str, Any] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", tuple(self.errors or ()))

    @property
    def valid(self) -> bool:
        return not self.errors


__all__ = ["Meta"]
