"""Custom exceptions raised by the alert pipeline."""


class AlertsError(Exception):
    """Base exception for alert pipeline errors."""


class AlertsNotFoundError(AlertsError):
    """Base exception for lookups that found nothing."""


class AlertTypeNotFoundError(AlertsNotFoundError):
    """Alert type is not present in the alert type registry."""

    def __init__(self, code: str | None = None, type_id: int | None = None):
        """Initialize alert type not found error.

        Args:
            code: Code of the alert type that was not found
            type_id: ID of the alert type that was not found
        """
        self.code = code
        self.type_id = type_id
        if code is not None:
            message = f"Alert type with code '{code}' does not exist."
        else:
            message = f"Alert type with ID {type_id} does not exist."
        super().__init__(message)


class AlertNotFoundError(AlertsNotFoundError):
    """Alert does not exist or is not visible to the acting user."""

    def __init__(self, alert_id: int):
        """Initialize alert not found error.

        Args:
            alert_id: ID of the alert that was not found
        """
        self.alert_id = alert_id
        super().__init__(f"Alert with ID {alert_id} not found.")


class FormatterNotFoundError(AlertsNotFoundError):
    """No formatter is registered for an alert type."""

    def __init__(self, alert_type_name: str):
        """Initialize formatter not found error.

        Args:
            alert_type_name: Code of the alert type without a formatter
        """
        self.alert_type_name = alert_type_name
        super().__init__(
            f"No formatter registered for alert type '{alert_type_name}'"
        )


class AlertsNotInitializedError(AlertsError):
    """Alert registry or unit of work used before it was set up."""

    def __init__(self, message: str | None = None):
        """Initialize not initialized error.

        Args:
            message: Optional explanation of the missing precondition
        """
        super().__init__(
            message
            or "Alert registry has not been configured. "
            "Call configure_alert_registry() first."
        )
