"""Request schemas carrying alert IDs."""

from pydantic import Field

from alerts.schemas.base_schema_model import BaseSchemaModel


class MarkAlertsRequest(BaseSchemaModel):
    """Body of POST /users/me/alerts/read and /unread.

    An empty list on the read endpoint marks every alert as read.
    """

    alert_ids: list[int] = Field(
        default_factory=list,
        max_length=100,
        description="IDs of the alerts to update (max 100)",
    )


class DeleteAlertsRequest(BaseSchemaModel):
    """Body of DELETE /users/me/alerts."""

    alert_ids: list[int] = Field(
        ...,
        min_length=1,
        max_length=100,
        description="IDs of the alerts to delete (1-100)",
    )
