"""Schema for alert mutation responses."""

from pydantic import Field

from alerts.schemas.base_schema_model import BaseSchemaModel


class AlertUpdateResponse(BaseSchemaModel):
    """Returned by the mark read, mark unread and delete endpoints."""

    affected_count: int = Field(..., ge=0, description="Number of alerts changed")
