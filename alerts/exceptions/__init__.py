"""Exception handling utilities for the alert service."""

from alerts.exceptions.alert_exceptions import (
    AlertNotFoundError,
    AlertsError,
    AlertsNotFoundError,
    AlertsNotInitializedError,
    AlertTypeNotFoundError,
    FormatterNotFoundError,
)
from alerts.exceptions.handlers import custom_exception_handler

__all__ = [
    "AlertNotFoundError",
    "AlertTypeNotFoundError",
    "AlertsError",
    "AlertsNotFoundError",
    "AlertsNotInitializedError",
    "FormatterNotFoundError",
    "custom_exception_handler",
]
