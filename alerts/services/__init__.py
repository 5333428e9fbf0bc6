"""Alert pipeline services."""

from alerts.services.alert_formatter_manager import AlertFormatterManager
from alerts.services.alert_manager import AlertManager
from alerts.services.alert_type_manager import AlertTypeManager
from alerts.services.registry import (
    AlertRegistry,
    alert_unit_of_work,
    configure_alert_registry,
    get_alert_registry,
    get_current_alert_manager,
    reset_alert_registry,
)

__all__ = [
    "AlertFormatterManager",
    "AlertManager",
    "AlertRegistry",
    "AlertTypeManager",
    "alert_unit_of_work",
    "configure_alert_registry",
    "get_alert_registry",
    "get_current_alert_manager",
    "reset_alert_registry",
]
