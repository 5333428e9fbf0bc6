"""Database models for the alerts application."""

from alerts.models.alert import Alert
from alerts.models.alert_type import AlertType
from alerts.models.user import User

__all__ = ["Alert", "AlertType", "User"]
