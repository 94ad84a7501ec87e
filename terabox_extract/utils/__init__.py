"""Utility functions."""
from .helpers import format_size, to_int
from .http import (
    browser_headers,
    create_connector,
    create_ssl_context,
    get_user_agent,
    DEFAULT_HEADERS,
)

__all__ = [
    # helpers
    "format_size",
    "to_int",
    # http
    "browser_headers",
    "create_connector",
    "create_ssl_context",
    "get_user_agent",
    "DEFAULT_HEADERS",
]
