"""Alert API schemas."""

from alerts.schemas.alert.request.alert_ids_request import (
    DeleteAlertsRequest,
    MarkAlertsRequest,
)
from alerts.schemas.alert.request.alert_list_query import AlertListQuery
from alerts.schemas.alert.response.alert_update_response import AlertUpdateResponse
from alerts.schemas.alert.response.user_alert import AlertSender, UserAlert
from alerts.schemas.alert.response.user_alert_list_response import (
    UserAlertCountResponse,
    UserAlertListResponse,
)

__all__ = [
    "AlertListQuery",
    "AlertSender",
    "AlertUpdateResponse",
    "DeleteAlertsRequest",
    "MarkAlertsRequest",
    "UserAlert",
    "UserAlertCountResponse",
    "UserAlertListResponse",
]
