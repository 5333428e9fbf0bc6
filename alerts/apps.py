"""Django application configuration for alerts."""

import structlog
from django.apps import AppConfig

logger = structlog.get_logger(__name__)


class AlertsConfig(AppConfig):
    """Configuration class for the alerts application."""

    default_auto_field = "django.db.models.AutoField"
    name = "alerts"

    def ready(self) -> None:
        """Connect signal receivers and build the alert registry."""
        import alerts.signals.formatter_signals  # noqa: F401, PLC0415
        from alerts.services.registry import configure_alert_registry  # noqa: PLC0415

        configure_alert_registry()
        logger.info("alert_registry_configured")
