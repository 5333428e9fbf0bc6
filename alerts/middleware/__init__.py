"""Middleware for the alert service."""

from alerts.middleware.process_time import ProcessTimeMiddleware
from alerts.middleware.request_id import RequestIDMiddleware

__all__ = ["ProcessTimeMiddleware", "RequestIDMiddleware"]
