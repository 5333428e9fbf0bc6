"""Unit tests for the built-in alert formatters."""

import unittest

from alerts.formatters import (
    BuddyListFormatter,
    PrivateMessageFormatter,
    QuotedFormatter,
    ReputationFormatter,
    ThreadReplyFormatter,
    get_builtin_formatters,
)
from alerts.models import Alert, AlertType

BASE_URL = "https://forum.example.com/"


def make_alert(code: str, object_id: int = 0, extra_details: dict | None = None) -> Alert:
    """Build an alert of the given type for user 7."""
    return Alert.make(
        user_id=7,
        alert_type=AlertType(id=1, code=code),
        object_id=object_id,
        extra_details=extra_details,
    )


class TestBaseFormatterBehaviour(unittest.TestCase):
    """Tests for behaviour shared by all formatters."""

    def test_init_loads_messages_once(self):
        """Test that init() is idempotent."""
        formatter = PrivateMessageFormatter(BASE_URL)

        formatter.init()
        messages = formatter.messages
        formatter.init()

        self.assertIs(formatter.messages, messages)
        self.assertIn("message", messages)

    def test_base_url_defaults_to_setting(self):
        """Test that links use FORUM_BASE_URL when no base URL is given."""
        formatter = BuddyListFormatter()

        self.assertEqual(
            formatter.build_show_link(make_alert("buddylist")),
            "https://forum.example.com/usercp.php?action=editlists",
        )

    def test_missing_placeholder_uses_fallback(self):
        """Test that a missing detail falls back to the short message."""
        formatter = PrivateMessageFormatter(BASE_URL)
        formatter.init()

        text = formatter.format_alert(make_alert("pm"), {"from_user": "alice"})

        self.assertEqual(text, "alice sent you a new private message.")

    def test_sender_from_output_alert_wins_over_details(self):
        """Test that extra details cannot override the sender name."""
        formatter = BuddyListFormatter(BASE_URL)
        formatter.init()
        alert = make_alert("buddylist", extra_details={"from_user": "mallory"})

        text = formatter.format_alert(alert, {"from_user": "alice"})

        self.assertEqual(text, "alice added you to their buddy list.")


class TestBuiltinFormatters(unittest.TestCase):
    """Tests for each built-in formatter."""

    def test_private_message(self):
        """Test PM text and link."""
        formatter = PrivateMessageFormatter(BASE_URL)
        formatter.init()
        alert = make_alert("pm", object_id=31, extra_details={"pm_title": "Hello"})

        self.assertEqual(
            formatter.format_alert(alert, {"from_user": "alice"}),
            'alice sent you a new private message titled "Hello".',
        )
        self.assertEqual(
            formatter.build_show_link(alert),
            "https://forum.example.com/private.php?action=read&pmid=31",
        )

    def test_quoted(self):
        """Test quoted text and link to the post."""
        formatter = QuotedFormatter(BASE_URL)
        formatter.init()
        alert = make_alert("quoted", object_id=88, extra_details={"tid": 4, "subject": "Intro"})

        self.assertEqual(
            formatter.format_alert(alert, {"from_user": "bob"}),
            'bob quoted you in "Intro".',
        )
        self.assertEqual(
            formatter.build_show_link(alert),
            "https://forum.example.com/showthread.php?pid=88#pid88",
        )

    def test_thread_reply_types(self):
        """Test post_threadauthor and subscribed_thread links."""
        for code in ("post_threadauthor", "subscribed_thread"):
            formatter = ThreadReplyFormatter(code, BASE_URL)
            formatter.init()
            alert = make_alert(code, object_id=42, extra_details={"subject": "News"})

            self.assertIn('"News"', formatter.format_alert(alert, {"from_user": "carol"}))
            self.assertEqual(
                formatter.build_show_link(alert),
                "https://forum.example.com/showthread.php?tid=42&action=newpost",
            )

    def test_reputation(self):
        """Test reputation text and link to the recipient's reputation page."""
        formatter = ReputationFormatter(BASE_URL)
        formatter.init()
        alert = make_alert("rep", extra_details={"points": 3})

        self.assertEqual(
            formatter.format_alert(alert, {"from_user": "dave"}),
            "dave gave you a reputation rating of 3.",
        )
        self.assertEqual(
            formatter.build_show_link(alert),
            "https://forum.example.com/reputation.php?uid=7",
        )

    def test_get_builtin_formatters_covers_core_types(self):
        """Test that one formatter exists per core alert type."""
        names = [f.alert_type_name for f in get_builtin_formatters(BASE_URL)]

        self.assertEqual(
            sorted(names),
            sorted(["pm", "quoted", "post_threadauthor", "subscribed_thread", "rep", "buddylist"]),
        )
