"""Unit tests for alert rendering."""

import unittest
from unittest.mock import MagicMock

from alerts.exceptions import FormatterNotFoundError
from alerts.formatters import PrivateMessageFormatter
from alerts.models import Alert, AlertType, User
from alerts.services.alert_formatter_manager import AlertFormatterManager
from alerts.services.alert_renderer import build_output_alert, render_alert, render_alerts


def make_alert(code="pm", object_id=5, extra_details=None, from_user=None, alert_id=11):
    alert = Alert.make(
        user_id=7,
        alert_type=AlertType(id=1, code=code),
        object_id=object_id,
        extra_details=extra_details,
    )
    alert.id = alert_id
    if from_user is not None:
        alert.from_user = from_user
    return alert


class TestBuildOutputAlert(unittest.TestCase):
    """Tests for build_output_alert."""

    def test_guest_sender(self):
        output = build_output_alert(make_alert())

        self.assertEqual(output["from_user"], "Guest")
        self.assertEqual(output["from_user_id"], "0")
        self.assertEqual(output["avatar"], "")

    def test_known_sender(self):
        sender = User(uid=3, username="alice", avatar="https://cdn.example.com/a.png")

        output = build_output_alert(make_alert(from_user=sender))

        self.assertEqual(output["from_user"], "alice")
        self.assertEqual(output["from_user_id"], "3")
        self.assertEqual(output["avatar"], "https://cdn.example.com/a.png")


class TestRenderAlert(unittest.TestCase):
    """Tests for render_alert."""

    def setUp(self):
        self.formatter_manager = AlertFormatterManager()
        self.formatter_manager.register_formatter(
            PrivateMessageFormatter("https://forum.example.com")
        )

    def test_renders_message_and_link(self):
        sender = User(uid=3, username="alice")
        alert = make_alert(extra_details={"pm_title": "Hello"}, from_user=sender)

        result = render_alert(alert, self.formatter_manager)

        self.assertEqual(result.id, 11)
        self.assertEqual(result.alert_type, "pm")
        self.assertEqual(result.message, 'alice sent you a new private message titled "Hello".')
        self.assertEqual(result.link, "https://forum.example.com/private.php?action=read&pmid=5")
        self.assertEqual(result.from_user.username, "alice")
        self.assertEqual(result.extra_details, {"pm_title": "Hello"})

    def test_missing_formatter_leaves_message_empty(self):
        result = render_alert(make_alert(code="custom_type"), self.formatter_manager)

        self.assertIsNone(result.message)
        self.assertIsNone(result.link)
        self.assertIsNone(result.from_user)
        self.assertEqual(result.alert_type, "custom_type")

    def test_render_alerts_preserves_order(self):
        formatter_manager = MagicMock()
        formatter_manager.get_formatter_for_alert_type.side_effect = FormatterNotFoundError("x")
        alerts = [make_alert(alert_id=3), make_alert(alert_id=2)]

        results = render_alerts(alerts, formatter_manager)

        self.assertEqual([r.id for r in results], [3, 2])
