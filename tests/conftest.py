"""Shared pytest configuration."""
from __future__ import annotations

import pytest

pytest_plugins = ["querylinks.testing.fixtures"]


@pytest.fixture(autouse=True)
def _isolated_configuration(querylinks_settings, schema_registry):
    """Every test starts with built-in settings and an empty default registry."""
    yield
