"""Message strings for the built-in alert formatters.

Placeholders are filled with str.format() from the rendered alert context
(from_user, etc.) and the alert's extra details.
"""

from typing import TypedDict

from alerts.constants import (
    BUDDYLIST_ALERT_TYPE,
    PM_ALERT_TYPE,
    POST_THREADAUTHOR_ALERT_TYPE,
    QUOTED_ALERT_TYPE,
    REP_ALERT_TYPE,
    SUBSCRIBED_THREAD_ALERT_TYPE,
)


class AlertMessageConfig(TypedDict):
    """Message strings for one alert type."""

    message: str
    fallback: str


ALERT_MESSAGES: dict[str, AlertMessageConfig] = {
    PM_ALERT_TYPE: {
        "message": '{from_user} sent you a new private message titled "{pm_title}".',
        "fallback": "{from_user} sent you a new private message.",
    },
    QUOTED_ALERT_TYPE: {
        "message": '{from_user} quoted you in "{subject}".',
        "fallback": "{from_user} quoted you in a post.",
    },
    POST_THREADAUTHOR_ALERT_TYPE: {
        "message": '{from_user} replied to your thread "{subject}".',
        "fallback": "{from_user} replied to your thread.",
    },
    SUBSCRIBED_THREAD_ALERT_TYPE: {
        "message": '{from_user} replied to your subscribed thread "{subject}".',
        "fallback": "{from_user} replied to a thread you subscribed to.",
    },
    REP_ALERT_TYPE: {
        "message": "{from_user} gave you a reputation rating of {points}.",
        "fallback": "{from_user} gave you a reputation rating.",
    },
    BUDDYLIST_ALERT_TYPE: {
        "message": "{from_user} added you to their buddy list.",
        "fallback": "{from_user} added you to their buddy list.",
    },
}
