"""Unit tests for the alert registry and unit of work."""

from unittest.mock import MagicMock, patch

from django.core.cache import cache
from django.test import TestCase

from alerts.exceptions import AlertsNotInitializedError
from alerts.logging.context import get_acting_user_id
from alerts.models import Alert
from alerts.services import registry as registry_module
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
from tests.factories import create_alert_type, create_user


class TestAlertRegistry(TestCase):
    """Tests for configuring and retrieving the registry."""

    def setUp(self):
        """Remember the registry configured at startup."""
        self.original = registry_module._registry
        self.addCleanup(setattr, registry_module, "_registry", self.original)

    def test_configured_at_startup(self):
        """Test that the app config builds the registry."""
        registry = get_alert_registry()

        self.assertIsInstance(registry.alert_type_manager, AlertTypeManager)
        self.assertIsInstance(registry.alert_formatter_manager, AlertFormatterManager)

    def test_get_before_configure_raises(self):
        """Test that using the registry before configuring it fails."""
        reset_alert_registry()

        with self.assertRaises(AlertsNotInitializedError):
            get_alert_registry()

    def test_configure_accepts_explicit_managers(self):
        """Test that configure_alert_registry uses the given managers."""
        type_manager = AlertTypeManager(cache=cache)
        formatter_manager = AlertFormatterManager()

        registry = configure_alert_registry(type_manager, formatter_manager)

        self.assertIs(get_alert_registry(), registry)
        self.assertIs(registry.alert_type_manager, type_manager)
        self.assertIs(registry.alert_formatter_manager, formatter_manager)


class TestAlertUnitOfWork(TestCase):
    """Tests for alert_unit_of_work."""

    def setUp(self):
        """Set up test fixtures."""
        cache.clear()
        self.pm = create_alert_type("pm")
        self.user = create_user()
        self.recipient = create_user()
        self.registry = AlertRegistry(
            alert_type_manager=AlertTypeManager(cache=cache),
            alert_formatter_manager=AlertFormatterManager(),
        )

    def queue_pm(self, alert_manager):
        alert_manager.add_alert(
            Alert.make(self.recipient.uid, alert_manager.alert_type_manager.get_by_code("pm"))
        )

    def test_commits_on_clean_exit(self):
        """Test that queued alerts are written when the block succeeds."""
        with alert_unit_of_work(self.user, self.registry) as alert_manager:
            self.assertIsInstance(alert_manager, AlertManager)
            self.queue_pm(alert_manager)

        self.assertEqual(Alert.objects.filter(user_id=self.recipient.uid).count(), 1)

    def test_discards_queue_when_block_raises(self):
        """Test that nothing is written when the block raises."""
        with self.assertRaises(RuntimeError):
            with alert_unit_of_work(self.user, self.registry) as alert_manager:
                self.queue_pm(alert_manager)
                raise RuntimeError("boom")

        self.assertEqual(alert_manager.get_alert_queue(), [])
        self.assertFalse(Alert.objects.exists())

    def test_current_alert_manager_available_inside_block(self):
        """Test that the manager is exposed for the duration of the block."""
        with alert_unit_of_work(self.user, self.registry) as alert_manager:
            self.assertIs(get_current_alert_manager(), alert_manager)
            self.assertEqual(get_acting_user_id(), self.user.uid)

        with self.assertRaises(AlertsNotInitializedError):
            get_current_alert_manager()
        self.assertIsNone(get_acting_user_id())

    def test_nested_unit_of_work_restores_outer(self):
        """Test that leaving an inner block restores the outer manager."""
        with alert_unit_of_work(self.user, self.registry) as outer:
            with alert_unit_of_work(self.recipient, self.registry) as inner:
                self.assertIs(get_current_alert_manager(), inner)
            self.assertIs(get_current_alert_manager(), outer)
            self.assertEqual(get_acting_user_id(), self.user.uid)

    def test_uses_global_registry_by_default(self):
        """Test that the configured registry is used when none is passed."""
        with patch.object(registry_module, "_registry", self.registry):
            with alert_unit_of_work(self.user) as alert_manager:
                self.assertIs(alert_manager.alert_type_manager, self.registry.alert_type_manager)

    def test_without_registry_raises(self):
        """Test that a missing registry fails before the block runs."""
        body = MagicMock()
        with patch.object(registry_module, "_registry", None):
            with self.assertRaises(AlertsNotInitializedError):
                with alert_unit_of_work(self.user):
                    body()

        body.assert_not_called()
