"""Logging utilities for the BiteLogs API."""

from core.logging.config import setup_logging
from core.logging.context import (
    bind_request_context,
    clear_request_context,
    get_request_id,
    set_request_id,
)
from core.logging.filters import RequestIDFilter

__all__ = [
    "RequestIDFilter",
    "bind_request_context",
    "clear_request_context",
    "get_request_id",
    "set_request_id",
    "setup_logging",
]
