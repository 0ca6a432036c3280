"""
querylinks – pagination, sorting and filter link computation.

Import path convention::

    from querylinks.application.state import Filter, Flop, Meta
    from querylinks.application.query import build_path, pop_filter, to_query
    from querylinks.application.pagination import build_pagination, plan_page_links
    from querylinks.config.defaults import configure, default_registry
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
