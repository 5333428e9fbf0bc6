"""Turns alerts into API response schemas using their formatters."""

import structlog

from alerts.exceptions import FormatterNotFoundError
from alerts.models import Alert
from alerts.schemas.alert import AlertSender, UserAlert
from alerts.services.alert_formatter_manager import AlertFormatterManager

logger = structlog.get_logger(__name__)

GUEST_USERNAME = "Guest"


def build_output_alert(alert: Alert) -> dict[str, str]:
    """Build the rendering context handed to a formatter."""
    sender = alert.from_user
    return {
        "from_user": sender.username if sender else GUEST_USERNAME,
        "from_user_id": str(sender.uid) if sender else "0",
        "avatar": sender.avatar if sender else "",
        "dateline": alert.dateline.isoformat(),
    }


def render_alert(alert: Alert, formatter_manager: AlertFormatterManager) -> UserAlert:
    """Render one alert.

    Alerts without a registered formatter are returned without message and
    link.

    Args:
        alert: Hydrated alert read through an AlertManager.
        formatter_manager: Formatter registry.

    Returns:
        The response schema for the alert.
    """
    message = None
    link = None
    try:
        formatter = formatter_manager.get_formatter_for_alert_type(alert.alert_type.code)
    except FormatterNotFoundError:
        logger.warning(
            "alert_formatter_missing",
            alert_id=alert.id,
            alert_type=alert.alert_type.code,
        )
    else:
        formatter.init()
        message = formatter.format_alert(alert, build_output_alert(alert))
        link = formatter.build_show_link(alert)

    return UserAlert(
        id=alert.id,
        user_id=alert.user_id,
        alert_type=alert.alert_type.code,
        object_id=alert.object_id,
        dateline=alert.dateline,
        unread=alert.unread,
        forced=alert.forced,
        extra_details=alert.extra_details,
        from_user=AlertSender.model_validate(alert.from_user) if alert.from_user else None,
        message=message,
        link=link,
    )


def render_alerts(
    alerts: list[Alert], formatter_manager: AlertFormatterManager
) -> list[UserAlert]:
    """Render several alerts, preserving order."""
    return [render_alert(alert, formatter_manager) for alert in alerts]
