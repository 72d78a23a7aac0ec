"""Logging module with structured logging and request tracking."""

from foodstall.core.logging.config import configure_logging
from foodstall.core.logging.middleware import (
    RequestIdMiddleware,
    RequestLoggingMiddleware,
    get_client_ip,
)


__all__ = [
    "RequestIdMiddleware",
    "RequestLoggingMiddleware",
    "configure_logging",
    "get_client_ip",
]
