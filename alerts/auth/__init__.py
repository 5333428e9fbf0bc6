"""Authentication for the alert API."""

from alerts.auth.jwt_authentication import JWTAuthentication

__all__ = ["JWTAuthentication"]
