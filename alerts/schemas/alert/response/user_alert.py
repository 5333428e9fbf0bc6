"""Schema for a rendered alert."""

from datetime import datetime
from typing import Any

from pydantic import Field

from alerts.schemas.base_schema_model import BaseSchemaModel


class AlertSender(BaseSchemaModel):
    """Snapshot of the user who triggered an alert."""

    uid: int = Field(..., description="Forum user ID")
    username: str = Field(..., description="Username")
    avatar: str = Field("", description="Avatar URL")
    usergroup: int = Field(..., description="Primary user group")
    displaygroup: int = Field(..., description="Display group (0 = primary)")


class UserAlert(BaseSchemaModel):
    """An alert with its formatted message and link.

    message and link are null when no formatter is registered for the type.
    """

    id: int = Field(..., description="Alert ID")
    user_id: int = Field(..., description="Recipient forum user ID")
    alert_type: str = Field(..., description="Alert type code")
    object_id: int = Field(..., ge=0, description="ID of the referenced object")
    dateline: datetime = Field(..., description="When the alert was created")
    unread: bool = Field(..., description="Whether the alert is unread")
    forced: bool = Field(False, description="Whether the alert bypassed opt-outs")
    extra_details: dict[str, Any] = Field(
        default_factory=dict, description="Formatter data"
    )
    from_user: AlertSender | None = Field(None, description="Sender, if known")
    message: str | None = Field(None, description="Formatted alert text")
    link: str | None = Field(None, description="Absolute URL to the referenced object")
