"""JWT bearer authentication for Django REST Framework.

Tokens are validated locally against the shared JWT_SECRET. The sub claim
carries the forum user ID, which is resolved to a User row.
"""

from typing import Any

import jwt
import structlog
from django.conf import settings
from rest_framework import authentication, exceptions

from alerts.models import User
from alerts.repositories import UserRepository

logger = structlog.get_logger(__name__)

ACCESS_TOKEN_TYPE = "access_token"


class JWTAuthentication(authentication.BaseAuthentication):
    """Authenticate requests carrying "Authorization: Bearer <jwt>"."""

    def authenticate(self, request) -> tuple[User, str] | None:
        """Authenticate the request using a Bearer token.

        Args:
            request: Django request object

        Returns:
            Tuple of (user, token) or None if no token was sent

        Raises:
            AuthenticationFailed: If the token is invalid or the user is unknown
        """
        auth_header = request.headers.get("authorization")
        if not auth_header:
            return None

        parts = auth_header.split()
        if len(parts) != 2 or parts[0].lower() != "bearer":
            raise exceptions.AuthenticationFailed("Invalid authorization header format")

        token = parts[1]
        payload = self._decode(token)

        try:
            user_id = int(payload.get("sub"))
        except (TypeError, ValueError) as e:
            raise exceptions.AuthenticationFailed("Token subject is not a user ID") from e

        user = UserRepository.get_user(user_id)
        if user is None:
            logger.warning("jwt_user_not_found", user_id=user_id)
            raise exceptions.AuthenticationFailed("User not found")

        return (user, token)

    def _decode(self, token: str) -> dict[str, Any]:
        """Verify the token signature and claims.

        Raises:
            AuthenticationFailed: If the token is invalid
        """
        if not settings.JWT_SECRET:
            logger.error("jwt_secret_not_configured")
            raise exceptions.AuthenticationFailed("JWT validation not configured")

        try:
            payload = jwt.decode(
                token,
                settings.JWT_SECRET,
                algorithms=["HS256", "HS384", "HS512"],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError as e:
            logger.info("jwt_expired")
            raise exceptions.AuthenticationFailed("Token has expired") from e
        except jwt.InvalidTokenError as e:
            logger.warning("jwt_invalid", error=str(e))
            raise exceptions.AuthenticationFailed("Invalid token") from e

        token_type = payload.get("type")
        if token_type != ACCESS_TOKEN_TYPE:
            logger.warning("jwt_invalid_type", token_type=token_type)
            raise exceptions.AuthenticationFailed(f"Invalid token type: {token_type}")

        return payload

    def authenticate_header(self, _request) -> str:
        """Return WWW-Authenticate header value for 401 responses."""
        return "Bearer"
