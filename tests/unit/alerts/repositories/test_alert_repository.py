"""Unit tests for alerts.repositories.alert_repository."""

from django.test import TestCase

from alerts.models import Alert
from alerts.repositories import AlertRepository
from tests.factories import create_alert, create_alert_type, create_user


class TestAlertRepository(TestCase):
    """Tests for AlertRepository against the test database."""

    def setUp(self):
        """Set up test fixtures."""
        self.user = create_user()
        self.other_user = create_user()
        self.pm = create_alert_type("pm")
        self.rep = create_alert_type("rep")
        self.mandatory = create_alert_type("announcement", can_be_user_disabled=False)
        self.disabled = create_alert_type("legacy", enabled=False)

    def test_visible_alerts_filtered_by_enabled_ids(self):
        """Test that only types in the enabled list are returned."""
        pm_alert = create_alert(self.user, self.pm)
        create_alert(self.user, self.rep)

        result = list(AlertRepository.get_visible_alerts(self.user.uid, [self.pm.id]))

        self.assertEqual(result, [pm_alert])

    def test_visible_alerts_include_forced_and_mandatory(self):
        """Test that forced alerts and non-disableable types bypass the list."""
        forced = create_alert(self.user, self.rep, forced=True)
        mandatory = create_alert(self.user, self.mandatory)

        result = set(AlertRepository.get_visible_alerts(self.user.uid, [self.pm.id]))

        self.assertEqual(result, {forced, mandatory})

    def test_visible_alerts_exclude_disabled_types(self):
        """Test that alerts of disabled types are never visible."""
        create_alert(self.user, self.disabled, forced=True)

        result = AlertRepository.get_visible_alerts(self.user.uid, [self.disabled.id])

        self.assertEqual(result.count(), 0)

    def test_visible_alerts_scoped_to_user_and_newest_first(self):
        """Test recipient scoping and descending ID order."""
        first = create_alert(self.user, self.pm)
        second = create_alert(self.user, self.pm)
        create_alert(self.other_user, self.pm)

        result = list(AlertRepository.get_visible_alerts(self.user.uid, [self.pm.id]))

        self.assertEqual(result, [second, first])

    def test_visible_alerts_unread_only(self):
        """Test the unread filter."""
        unread = create_alert(self.user, self.pm)
        create_alert(self.user, self.pm, unread=False)

        result = list(
            AlertRepository.get_visible_alerts(self.user.uid, [self.pm.id], unread_only=True)
        )

        self.assertEqual(result, [unread])

    def test_set_unread_only_touches_own_alerts(self):
        """Test that set_unread ignores other recipients' alerts."""
        own = create_alert(self.user, self.pm)
        foreign = create_alert(self.other_user, self.pm)

        updated = AlertRepository.set_unread(self.user.uid, [own.id, foreign.id], False)

        self.assertEqual(updated, 1)
        own.refresh_from_db()
        foreign.refresh_from_db()
        self.assertFalse(own.unread)
        self.assertTrue(foreign.unread)

    def test_mark_all_read(self):
        """Test that mark_all_read marks every unread alert of the user."""
        create_alert(self.user, self.pm)
        create_alert(self.user, self.rep)
        create_alert(self.other_user, self.pm)

        updated = AlertRepository.mark_all_read(self.user.uid)

        self.assertEqual(updated, 2)
        self.assertEqual(Alert.objects.filter(unread=True).count(), 1)

    def test_delete_for_user(self):
        """Test that delete_for_user only deletes the user's alerts."""
        own = create_alert(self.user, self.pm)
        foreign = create_alert(self.other_user, self.pm)

        deleted = AlertRepository.delete_for_user(self.user.uid, [own.id, foreign.id])

        self.assertEqual(deleted, 1)
        self.assertTrue(Alert.objects.filter(id=foreign.id).exists())
        self.assertFalse(Alert.objects.filter(id=own.id).exists())

    def test_insert_many(self):
        """Test that insert_many writes all alerts."""
        alerts = [
            Alert.make(self.user.uid, self.pm, object_id=1).prepare_for_commit(),
            Alert.make(self.user.uid, self.rep, object_id=2).prepare_for_commit(),
        ]

        AlertRepository.insert_many(alerts)

        self.assertEqual(Alert.objects.filter(user_id=self.user.uid).count(), 2)
