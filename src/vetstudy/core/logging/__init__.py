"""Logging module with structured logging and request tracking."""

from vetstudy.core.logging.config import configure_logging
from vetstudy.core.logging.middleware import RequestLoggingMiddleware


__all__ = [
    "RequestLoggingMiddleware",
    "configure_logging",
]
