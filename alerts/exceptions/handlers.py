"""Global exception handlers for the alert service."""

import logging
import traceback
from datetime import UTC, datetime
from typing import Any

from django.conf import settings
from django.core.exceptions import PermissionDenied
from django.http import Http404
from pydantic import ValidationError

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

from alerts.constants import REQUEST_ID_HEADER
from alerts.exceptions.alert_exceptions import AlertsNotFoundError
from alerts.logging.context import get_request_id

logger = logging.getLogger(__name__)


def custom_exception_handler(
    exc: Exception, context: dict[str, Any]
) -> Response | None:
    """Custom exception handler for Django REST Framework.

    Handles DRF, Django, pydantic and alert pipeline exceptions, returning the
    standard body {status, message, request_id, timestamp} and logging the
    error type, path and (in DEBUG) the stack trace.

    Args:
        exc: The exception that was raised.
        context: Context dictionary containing request and view information.

    Returns:
        A Response object with the error details.
    """
    view = context.get("view")
    request = view.request if view else None
    request_id = get_request_id()

    response = exception_handler(exc, context)

    if response is None:
        if isinstance(exc, AlertsNotFoundError):
            response = _error_response(
                status.HTTP_404_NOT_FOUND, str(exc), request_id
            )
        elif isinstance(exc, ValidationError):
            response = _error_response(
                status.HTTP_400_BAD_REQUEST,
                "Invalid request body.",
                request_id,
                errors=exc.errors(include_url=False, include_context=False),
            )
        elif isinstance(exc, Http404):
            response = _error_response(
                status.HTTP_404_NOT_FOUND,
                "The requested resource was not found.",
                request_id,
            )
        elif isinstance(exc, PermissionDenied):
            response = _error_response(
                status.HTTP_403_FORBIDDEN,
                "You do not have permission to perform this action.",
                request_id,
            )
        else:
            response = _error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "An internal server error occurred.",
                request_id,
            )

    if request_id and response:
        response[REQUEST_ID_HEADER] = request_id

    _log_exception(exc, request, response)

    return response


def _create_error_response(
    status_code: int, message: str, request_id: str | None
) -> dict[str, Any]:
    """Create a standardized error response body.

    Args:
        status_code: The HTTP status code.
        message: The error message to return to the client.
        request_id: The request ID for tracing.

    Returns:
        Dictionary with standard error response format.
    """
    return {
        "status": status_code,
        "message": message,
        "request_id": request_id,
        "timestamp": datetime.now(UTC).isoformat(),
    }


def _error_response(
    status_code: int,
    message: str,
    request_id: str | None,
    errors: list[Any] | None = None,
) -> Response:
    data = _create_error_response(status_code, message, request_id)
    if errors is not None:
        data["errors"] = errors
    return Response(data, status=status_code)


def _log_exception(
    exc: Exception,
    request: Any,
    response: Response | None,
) -> None:
    """Log exception details, with a stack trace in DEBUG mode.

    Args:
        exc: The exception that was raised.
        request: The HTTP request object.
        response: The response object (if available).
    """
    status_code = response.status_code if response else 500
    if isinstance(exc, (Http404, APIException, AlertsNotFoundError, ValidationError)):
        log_level = logging.WARNING if 400 <= status_code < 500 else logging.ERROR
    else:
        log_level = logging.ERROR

    request_path = request.path if request else "unknown"
    request_method = request.method if request else "unknown"

    log_message = (
        f"Exception occurred: {type(exc).__name__}: {exc} | "
        f"Path: {request_method} {request_path} | "
        f"Status: {status_code}"
    )

    if settings.DEBUG:
        stack_trace = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
        log_message += f"\nStack trace:\n{stack_trace}"

    logger.log(log_level, log_message)
