"""Request-scoped logging context backed by structlog contextvars.

Values bound here are merged into every structlog event and, through the
foreign pre-chain, into records emitted by the standard library loggers.
Context variables follow the request across threads and async tasks.
"""

from typing import Any

import structlog


def bind_request_context(request_id: str, **values: Any) -> None:
    """Start a fresh logging context for the current request.

    Args:
        request_id: The unique request identifier to store.
        **values: Additional request attributes (client_ip, method, path).
    """
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id, **values)


def set_request_id(request_id: str) -> None:
    """Store the request ID in the current logging context.

    Args:
        request_id: The unique request identifier to store.
    """
    structlog.contextvars.bind_contextvars(request_id=request_id)


def get_request_id() -> str | None:
    """Retrieve the request ID from the current logging context.

    Returns:
        The current request ID, or None if not set.
    """
    return structlog.contextvars.get_contextvars().get("request_id")


def clear_request_context() -> None:
    """Drop everything bound for the current request."""
    structlog.contextvars.clear_contextvars()
