"""Factory helpers for test data generation."""

import json
from datetime import UTC, datetime, timedelta

import jwt
from django.conf import settings
from faker import Faker

from alerts.models import Alert, AlertType, User

fake = Faker()


def create_user(disabled_alert_types: list[int] | None = None, **overrides) -> User:
    """Create a forum user row."""
    fields = {
        "username": fake.unique.user_name(),
        "avatar": fake.image_url(),
        "usergroup": 2,
        "displaygroup": 0,
        "myalerts_disabled_alert_types": json.dumps(disabled_alert_types or []),
    }
    fields.update(overrides)
    return User.objects.create(**fields)


def build_user(uid: int | None = None, disabled_alert_types: list[int] | None = None) -> User:
    """Build an unsaved forum user."""
    return User(
        uid=uid if uid is not None else fake.random_int(min=1, max=100000),
        username=fake.user_name(),
        myalerts_disabled_alert_types=json.dumps(disabled_alert_types or []),
    )


def create_alert_type(code: str | None = None, **overrides) -> AlertType:
    """Create an alert type row."""
    fields = {
        "code": code or fake.unique.slug(),
        "enabled": True,
        "can_be_user_disabled": True,
        "default_user_enabled": True,
    }
    fields.update(overrides)
    return AlertType.objects.create(**fields)


def build_alert_type(code: str | None = None, type_id: int | None = None, **overrides) -> AlertType:
    """Build an unsaved alert type."""
    fields = {
        "id": type_id if type_id is not None else fake.random_int(min=1, max=10000),
        "code": code or fake.slug(),
        "enabled": True,
        "can_be_user_disabled": True,
        "default_user_enabled": True,
    }
    fields.update(overrides)
    return AlertType(**fields)


def create_alert(
    user: User,
    alert_type: AlertType,
    from_user: User | None = None,
    extra_details: dict | None = None,
    **overrides,
) -> Alert:
    """Create an alert row for a recipient."""
    fields = {
        "user": user,
        "from_user": from_user,
        "alert_type": alert_type,
        "object_id": fake.random_int(min=1, max=100000),
        "extra_details_json": json.dumps(extra_details or {}),
    }
    fields.update(overrides)
    return Alert.objects.create(**fields)


def make_access_token(user: User, **claims) -> str:
    """Issue an access token for a forum user signed with JWT_SECRET."""
    payload = {
        "sub": str(user.uid),
        "type": "access_token",
        "iat": datetime.now(UTC),
        "exp": datetime.now(UTC) + timedelta(minutes=15),
    }
    payload.update(claims)
    return jwt.encode(payload, settings.JWT_SECRET, algorithm="HS256")
