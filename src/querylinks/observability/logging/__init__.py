"""Observability – structlog configuration and logger helper."""
from querylinks.observability.logging.factory import JsonLoggerFactory
from querylinks.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
