"""Formatters for the alert types the forum ships with."""

from typing import Any

from alerts.constants import (
    BUDDYLIST_ALERT_TYPE,
    PM_ALERT_TYPE,
    POST_THREADAUTHOR_ALERT_TYPE,
    QUOTED_ALERT_TYPE,
    REP_ALERT_TYPE,
    SUBSCRIBED_THREAD_ALERT_TYPE,
)
from alerts.formatters.base import BaseFormatter
from alerts.models import Alert


class PrivateMessageFormatter(BaseFormatter):
    """New private message. object_id is the PM ID."""

    def __init__(self, base_url: str | None = None):
        super().__init__(PM_ALERT_TYPE, base_url)

    def format_alert(self, alert: Alert, output_alert: dict[str, Any]) -> str:
        return self.render_message(output_alert, alert.extra_details)

    def build_show_link(self, alert: Alert) -> str:
        return self.build_url("private.php", action="read", pmid=alert.object_id)


class QuotedFormatter(BaseFormatter):
    """Quoted in a post. object_id is the quoting post ID, extra tid/subject."""

    def __init__(self, base_url: str | None = None):
        super().__init__(QUOTED_ALERT_TYPE, base_url)

    def format_alert(self, alert: Alert, output_alert: dict[str, Any]) -> str:
        return self.render_message(output_alert, alert.extra_details)

    def build_show_link(self, alert: Alert) -> str:
        return self.build_url(
            "showthread.php",
            fragment=f"pid{alert.object_id}",
            pid=alert.object_id,
        )


class ThreadReplyFormatter(BaseFormatter):
    """Reply in a thread. object_id is the thread ID."""

    def format_alert(self, alert: Alert, output_alert: dict[str, Any]) -> str:
        return self.render_message(output_alert, alert.extra_details)

    def build_show_link(self, alert: Alert) -> str:
        return self.build_url("showthread.php", tid=alert.object_id, action="newpost")


class ReputationFormatter(BaseFormatter):
    """Reputation given to the recipient."""

    def __init__(self, base_url: str | None = None):
        super().__init__(REP_ALERT_TYPE, base_url)

    def format_alert(self, alert: Alert, output_alert: dict[str, Any]) -> str:
        return self.render_message(output_alert, alert.extra_details)

    def build_show_link(self, alert: Alert) -> str:
        return self.build_url("reputation.php", uid=alert.user_id)


class BuddyListFormatter(BaseFormatter):
    """Recipient added to the sender's buddy list."""

    def __init__(self, base_url: str | None = None):
        super().__init__(BUDDYLIST_ALERT_TYPE, base_url)

    def format_alert(self, alert: Alert, output_alert: dict[str, Any]) -> str:
        return self.render_message(output_alert)

    def build_show_link(self, alert: Alert) -> str:
        return self.build_url("usercp.php", action="editlists")


def get_builtin_formatters(base_url: str | None = None) -> list[BaseFormatter]:
    """Return one instance of every built-in formatter."""
    return [
        PrivateMessageFormatter(base_url),
        QuotedFormatter(base_url),
        ThreadReplyFormatter(POST_THREADAUTHOR_ALERT_TYPE, base_url),
        ThreadReplyFormatter(SUBSCRIBED_THREAD_ALERT_TYPE, base_url),
        ReputationFormatter(base_url),
        BuddyListFormatter(base_url),
    ]
