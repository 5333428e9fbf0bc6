"""Query parameters for the alert list endpoint."""

from pydantic import Field

from alerts.schemas.base_schema_model import BaseSchemaModel


class AlertListQuery(BaseSchemaModel):
    """Query string of GET /users/me/alerts.

    limit 0 means the configured page size.
    """

    start: int = Field(0, ge=0, description="Offset of the first alert")
    limit: int = Field(0, ge=0, le=100, description="Page size (0 = default)")
    unread_only: bool = Field(False, description="Only return unread alerts")
