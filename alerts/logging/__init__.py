"""Logging utilities for the alert service."""

from alerts.logging.config import setup_logging
from alerts.logging.context import (
    clear_acting_user_id,
    get_acting_user_id,
    get_request_id,
    set_acting_user_id,
    set_request_id,
)
from alerts.logging.filters import RequestIDFilter

__all__ = [
    "RequestIDFilter",
    "clear_acting_user_id",
    "get_acting_user_id",
    "get_request_id",
    "set_acting_user_id",
    "set_request_id",
    "setup_logging",
]
