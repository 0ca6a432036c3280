"""Testing fixtures – pytest fixtures isolating process-wide configuration."""
try:
    import pytest  # noqa: F401

    from querylinks.testing.fixtures.config import querylinks_settings, schema_registry

except ImportError:
    pass

__all__ = ["querylinks_settings", "schema_registry"]
