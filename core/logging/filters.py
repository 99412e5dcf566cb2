"""Logging filters for enriching log records with request context."""

import logging

from core.logging.context import get_request_id


class RequestIDFilter(logging.Filter):
    """Add request ID to log records.

    Injects the current request ID into every record, so plain
    ``%(request_id)s`` formatters and third-party handlers can correlate
    lines of a single request. Uses 'N/A' outside a request.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Add request_id attribute to the log record.

        Args:
            record: The log record to enrich.

        Returns:
            True to indicate the record should be logged.
        """
        record.request_id = get_request_id() or "N/A"
        return True
