"""Registry of alert formatters, populated on first use."""

import structlog

from alerts.exceptions import FormatterNotFoundError
from alerts.formatters.base import BaseFormatter
from alerts.signals.hooks import register_formatters

logger = structlog.get_logger(__name__)


class AlertFormatterManager:
    """Maps alert type codes to formatters.

    The first lookup sends the register_formatters signal so extensions can
    add their formatters. Once a send completes it is not repeated; if a
    receiver raises, the next lookup sends the signal again.
    Formatters registered directly are accepted at any time.
    """

    def __init__(self):
        """Initialize an empty formatter registry."""
        self.alert_formatters: dict[str, BaseFormatter] = {}
        self._registration_done = False

    def register_formatter(self, formatter: BaseFormatter) -> "AlertFormatterManager":
        """Register a formatter under its alert type name.

        A later registration for the same name replaces the earlier one.

        Args:
            formatter: The formatter to register.

        Returns:
            This manager, for chaining.
        """
        self.alert_formatters[formatter.alert_type_name] = formatter
        return self

    def get_formatter_for_alert_type(self, alert_type_name: str) -> BaseFormatter:
        """Return the formatter for an alert type code.

        Args:
            alert_type_name: Alert type code.

        Returns:
            The registered formatter.

        Raises:
            FormatterNotFoundError: If no formatter is registered for the code.
        """
        if not self._registration_done:
            register_formatters.send(sender=self.__class__, formatter_manager=self)
            self._registration_done = True
            logger.debug(
                "alert_formatters_registered",
                alert_types=sorted(self.alert_formatters),
            )

        formatter = self.alert_formatters.get(alert_type_name)
        if formatter is None:
            raise FormatterNotFoundError(alert_type_name)
        return formatter
