"""Unit tests for JWT bearer authentication."""

from datetime import UTC, datetime, timedelta

import jwt
from django.test import RequestFactory, TestCase, override_settings
from rest_framework.exceptions import AuthenticationFailed

from alerts.auth import JWTAuthentication
from tests.factories import create_user, make_access_token


class TestJWTAuthentication(TestCase):
    """Tests for JWTAuthentication."""

    def setUp(self):
        self.auth = JWTAuthentication()
        self.factory = RequestFactory()
        self.user = create_user()

    def _request(self, header=None):
        extra = {"HTTP_AUTHORIZATION": header} if header is not None else {}
        return self.factory.get("/api/v1/alerts/users/me/alerts", **extra)

    def test_no_header_returns_none(self):
        self.assertIsNone(self.auth.authenticate(self._request()))

    def test_valid_token_resolves_user(self):
        token = make_access_token(self.user)

        user, returned_token = self.auth.authenticate(self._request(f"Bearer {token}"))

        self.assertEqual(user.uid, self.user.uid)
        self.assertEqual(returned_token, token)

    def test_malformed_header_rejected(self):
        with self.assertRaisesMessage(AuthenticationFailed, "Invalid authorization header format"):
            self.auth.authenticate(self._request("Token abc"))

    def test_expired_token_rejected(self):
        token = make_access_token(
            self.user, exp=datetime.now(UTC) - timedelta(minutes=1)
        )

        with self.assertRaisesMessage(AuthenticationFailed, "Token has expired"):
            self.auth.authenticate(self._request(f"Bearer {token}"))

    def test_wrong_signature_rejected(self):
        token = jwt.encode(
            {"sub": str(self.user.uid), "type": "access_token",
             "exp": datetime.now(UTC) + timedelta(minutes=5)},
            "another-secret",
            algorithm="HS256",
        )

        with self.assertRaisesMessage(AuthenticationFailed, "Invalid token"):
            self.auth.authenticate(self._request(f"Bearer {token}"))

    def test_refresh_token_rejected(self):
        token = make_access_token(self.user, type="refresh_token")

        with self.assertRaisesMessage(AuthenticationFailed, "Invalid token type"):
            self.auth.authenticate(self._request(f"Bearer {token}"))

    def test_non_numeric_subject_rejected(self):
        token = make_access_token(self.user, sub="alice")

        with self.assertRaisesMessage(AuthenticationFailed, "Token subject is not a user ID"):
            self.auth.authenticate(self._request(f"Bearer {token}"))

    def test_unknown_user_rejected(self):
        token = make_access_token(self.user, sub=str(self.user.uid + 1000))

        with self.assertRaisesMessage(AuthenticationFailed, "User not found"):
            self.auth.authenticate(self._request(f"Bearer {token}"))

    @override_settings(JWT_SECRET="")
    def test_missing_secret_rejected(self):
        with self.assertRaisesMessage(AuthenticationFailed, "JWT validation not configured"):
            self.auth.authenticate(self._request("Bearer abc.def.ghi"))

    def test_authenticate_header(self):
        self.assertEqual(self.auth.authenticate_header(self._request()), "Bearer")
