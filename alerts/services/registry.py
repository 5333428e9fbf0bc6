"""Process-wide alert registry and per-request unit of work."""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

import structlog

from alerts.exceptions import AlertsNotInitializedError
from alerts.logging.context import clear_acting_user_id, set_acting_user_id
from alerts.models import User
from alerts.services.alert_formatter_manager import AlertFormatterManager
from alerts.services.alert_manager import AlertManager
from alerts.services.alert_type_manager import AlertTypeManager

logger = structlog.get_logger(__name__)

_registry: "AlertRegistry | None" = None
_unit_of_work_context = threading.local()


@dataclass
class AlertRegistry:
    """Long-lived alert services shared by every unit of work."""

    alert_type_manager: AlertTypeManager
    alert_formatter_manager: AlertFormatterManager

    def create_alert_manager(self, current_user: User) -> AlertManager:
        """Build an AlertManager for one unit of work."""
        return AlertManager(current_user, self.alert_type_manager)


def configure_alert_registry(
    alert_type_manager: AlertTypeManager | None = None,
    alert_formatter_manager: AlertFormatterManager | None = None,
) -> AlertRegistry:
    """Build the process-wide alert registry, replacing any existing one.

    Args:
        alert_type_manager: Defaults to a cache-backed AlertTypeManager
        alert_formatter_manager: Defaults to an empty AlertFormatterManager

    Returns:
        The configured registry.
    """
    global _registry
    _registry = AlertRegistry(
        alert_type_manager=alert_type_manager or AlertTypeManager(),
        alert_formatter_manager=alert_formatter_manager or AlertFormatterManager(),
    )
    return _registry


def get_alert_registry() -> AlertRegistry:
    """Return the process-wide alert registry.

    Raises:
        AlertsNotInitializedError: If configure_alert_registry() was never called.
    """
    if _registry is None:
        raise AlertsNotInitializedError()
    return _registry


def reset_alert_registry() -> None:
    """Forget the process-wide alert registry."""
    global _registry
    _registry = None


def get_current_alert_manager() -> AlertManager:
    """Return the AlertManager of the unit of work running on this thread.

    Raises:
        AlertsNotInitializedError: If no unit of work is active.
    """
    alert_manager = getattr(_unit_of_work_context, "alert_manager", None)
    if alert_manager is None:
        raise AlertsNotInitializedError("No alert unit of work is active.")
    return alert_manager


@contextmanager
def alert_unit_of_work(
    current_user: User, registry: AlertRegistry | None = None
) -> Iterator[AlertManager]:
    """Run a block with an AlertManager for the acting user.

    Queued alerts are committed when the block exits normally and discarded
    when it raises.

    Args:
        current_user: The acting user.
        registry: Defaults to the process-wide registry.

    Yields:
        The unit of work's AlertManager.

    Raises:
        AlertsNotInitializedError: If no registry is configured.
    """
    registry = registry or get_alert_registry()
    alert_manager = registry.create_alert_manager(current_user)

    previous = getattr(_unit_of_work_context, "alert_manager", None)
    _unit_of_work_context.alert_manager = alert_manager
    set_acting_user_id(current_user.uid)
    try:
        yield alert_manager
    except Exception:
        discarded = len(alert_manager.get_alert_queue())
        alert_manager.clear_queue()
        if discarded:
            logger.warning("alert_unit_of_work_discarded", discarded_alerts=discarded)
        raise
    else:
        alert_manager.commit()
    finally:
        _unit_of_work_context.alert_manager = previous
        if previous is None:
            clear_acting_user_id()
        else:
            set_acting_user_id(previous.current_user_id)
