"""Kernel – framework-agnostic building blocks."""

from querylinks.kernel.errors import (
    BaseError,
    InvalidFilterFieldConfigError,
    InvalidFormError,
    InvalidPageLinksError,
    InvalidPathSpecError,
    PathArityError,
    UsageError,
)

__all__ = [
    "BaseError",
    "InvalidFilterFieldConfigError",
    "InvalidFormError",
    "InvalidPageLinksError",
    "InvalidPathSpecError",
    "PathArityError",
    "UsageError",
]
