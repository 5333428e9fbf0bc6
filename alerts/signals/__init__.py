"""Signals sent by the alert pipeline and their built-in receivers."""

from alerts.signals.hooks import (
    alert_manager_add_alert,
    alert_manager_delete_alerts,
    alert_manager_mark_all_read,
    alert_manager_mark_read,
    alert_manager_mark_unread,
    register_formatters,
)

__all__ = [
    "alert_manager_add_alert",
    "alert_manager_delete_alerts",
    "alert_manager_mark_all_read",
    "alert_manager_mark_read",
    "alert_manager_mark_unread",
    "register_formatters",
]
