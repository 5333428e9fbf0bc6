"""Registers the built-in alert formatters."""

from django.dispatch import receiver

from alerts.formatters import get_builtin_formatters
from alerts.signals.hooks import register_formatters


@receiver(register_formatters)
def register_builtin_formatters(sender, formatter_manager, **kwargs) -> None:
    """Register a formatter for every core forum alert type.

    Args:
        sender: The formatter manager class
        formatter_manager: The manager being populated
        **kwargs: Additional signal arguments
    """
    for formatter in get_builtin_formatters():
        formatter_manager.register_formatter(formatter)
