"""Application pagination – rendered link descriptor."""
from __future__ import annotations

import dataclasses
from typing import Any, Literal


@dataclasses.dataclass(frozen=True)
class Link:
    """What a template needs to render one navigation element.

    ``path`` is set for URL navigation, ``event``/``value`` for event
    dispatch. Disabled links carry neither a path nor a value.
    """

    kind: Literal["previous", "next", "page", "ellipsis"]
    content: Any
    attrs: dict[str, Any] = dataclasses.field(default_factory=dict)
    page: int | None = None
    path: Any = None
    event: str | None = None
    target: str | None = None
    value: dict[str, Any] | None = None
    disabled: bool = False
    current: bool = False

    @property
    def navigable(self) -> bool:
        return not self.disabled and (self.path is not None or self.event is not None)


__all__ = ["Link"]
