"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── UsageError                       (usage.py)
    │   ├── InvalidPathSpecError
    │   ├── PathArityError
    │   ├── InvalidFilterFieldConfigError
    │   ├── InvalidFormError
    │   └── InvalidPageLinksError
    └── ConfigError                      (querylinks.config.validation)
"""

from querylinks.kernel.errors.base import BaseError
from querylinks.kernel.errors.usage import (
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
