"""Schemas for alert list and count responses."""

from pydantic import Field

from alerts.schemas.alert.response.user_alert import UserAlert
from alerts.schemas.base_schema_model import BaseSchemaModel


class UserAlertCountResponse(BaseSchemaModel):
    """Returned by GET /users/me/alerts/count."""

    total_count: int = Field(..., ge=0, description="Number of visible alerts")
    unread_count: int = Field(..., ge=0, description="Number of visible unread alerts")


class UserAlertListResponse(BaseSchemaModel):
    """Returned by GET /users/me/alerts."""

    alerts: list[UserAlert] = Field(..., description="Page of alerts, newest first")
    total_count: int = Field(..., ge=0, description="Number of visible alerts")
    unread_count: int = Field(..., ge=0, description="Number of visible unread alerts")
    start: int = Field(..., ge=0, description="Offset of the first alert")
    limit: int = Field(..., ge=1, description="Page size")
