"""Logging filters for enriching log records with request context."""

import logging

from alerts.logging.context import get_request_id


class RequestIDFilter(logging.Filter):
    """Inject the current request ID into every log record ('N/A' if unset)."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Add request_id attribute to the log record.

        Args:
            record: The log record to enrich.

        Returns:
            True to indicate the record should be logged.
        """
        record.request_id = get_request_id() or "N/A"
        return True
