"""Usage errors – misuse by the integrating application.

These are raised immediately and never retried. Each one also derives from
the matching builtin so callers that only know ``TypeError``/``ValueError``
still catch them.
"""

from __future__ import annotations

from typing import Any

from querylinks.kernel.errors.base import BaseError


class UsageError(BaseError):
    """The library was called with arguments of an unsupported shape."""

    default_code = "usage_error"


class InvalidPathSpecError(UsageError, TypeError):
    """A path specification is not one of the supported variants."""

    default_code = "invalid_path_spec"

    def __init__(self, path: Any, reason: str | None = None, **kwargs: Any) -> None:
        msg = f"unsupported path specification: {path!r}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg, **kwargs)
        self.path = path


class PathArityError(UsageError, TypeError):
    """The path function cannot be called with the preset arguments plus params."""

    default_code = "path_arity_mismatch"

    def __init__(self, func: Any, arg_count: int, **kwargs: Any) -> None:
        name = getattr(func, "__qualname__", repr(func))
        super().__init__(f"{name} cannot be called with {arg_count} argument(s)", **kwargs)
        self.func = func
        self.arg_count = arg_count


class InvalidFilterFieldConfigError(UsageError, ValueError):
    """Filter fields must be names or ``(name, options)`` pairs."""

    default_code = "invalid_filter_field_config"

    def __init__(self, field: Any, **kwargs: Any) -> None:
        super().__init__(
            "Invalid filter field config. Filter fields must be passed as a list of "
            f"names or (name, dict) tuples. Got: {field!r}",
            **kwargs,
        )
        self.field = field


class InvalidFormError(UsageError, ValueError):
    """A filter-specific operation was given something other than a filter form."""

    default_code = "invalid_form"

    def __init__(self, expected: str, got: Any, **kwargs: Any) -> None:
        super().__init__(f"must be used with a {expected}, got {type(got).__name__}", **kwargs)
        self.expected = expected


class InvalidPageLinksError(UsageError, ValueError):
    """Unknown page link window policy."""

    default_code = "invalid_page_links"

    def __init__(self, value: Any, **kwargs: Any) -> None:
        super().__init__(
            f"invalid page_links value {value!r}: expected 'all', 'hide' or ('ellipsis', n)",
            **kwargs,
        )
        self.value = value


__all__ = [
    "InvalidFilterFieldConfigError",
    "InvalidFormError",
    "InvalidPageLinksError",
    "InvalidPathSpecError",
    "PathArityError",
    "UsageError",
]
