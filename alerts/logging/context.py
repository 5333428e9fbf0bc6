"""Thread-local request context used to correlate log lines."""

import threading

_request_context = threading.local()


def set_request_id(request_id: str) -> None:
    """Store the request ID for the current thread.

    Args:
        request_id: The unique request identifier to store.
    """
    _request_context.request_id = request_id


def get_request_id() -> str | None:
    """Return the request ID of the current thread, or None if unset."""
    return getattr(_request_context, "request_id", None)


def clear_request_id() -> None:
    """Forget the request ID once the request is finished."""
    if hasattr(_request_context, "request_id"):
        delattr(_request_context, "request_id")


def set_acting_user_id(user_id: int) -> None:
    """Store the ID of the user whose alerts are being processed.

    Args:
        user_id: Forum user ID of the acting user.
    """
    _request_context.acting_user_id = user_id


def get_acting_user_id() -> int | None:
    """Return the acting user ID of the current thread, or None if unset."""
    return getattr(_request_context, "acting_user_id", None)


def clear_acting_user_id() -> None:
    """Forget the acting user ID once the unit of work is finished."""
    if hasattr(_request_context, "acting_user_id"):
        delattr(_request_context, "acting_user_id")
