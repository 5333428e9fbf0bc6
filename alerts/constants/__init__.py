"""Constants package for the alerts application."""

from alerts.constants.alerts import (
    ALERT_TYPES_CACHE_KEY,
    BUDDYLIST_ALERT_TYPE,
    DEFAULT_ALERTS_PER_PAGE,
    FIND_USERS_BY_UID,
    FIND_USERS_BY_USERNAME,
    PM_ALERT_TYPE,
    POST_THREADAUTHOR_ALERT_TYPE,
    QUOTED_ALERT_TYPE,
    REP_ALERT_TYPE,
    SUBSCRIBED_THREAD_ALERT_TYPE,
)
from alerts.constants.http import (
    PROCESS_TIME_HEADER,
    REQUEST_ID_HEADER,
    SLOW_REQUEST_THRESHOLD,
)

__all__ = [
    "ALERT_TYPES_CACHE_KEY",
    "BUDDYLIST_ALERT_TYPE",
    "DEFAULT_ALERTS_PER_PAGE",
    "FIND_USERS_BY_UID",
    "FIND_USERS_BY_USERNAME",
    "PM_ALERT_TYPE",
    "POST_THREADAUTHOR_ALERT_TYPE",
    "PROCESS_TIME_HEADER",
    "QUOTED_ALERT_TYPE",
    "REP_ALERT_TYPE",
    "REQUEST_ID_HEADER",
    "SLOW_REQUEST_THRESHOLD",
    "SUBSCRIBED_THREAD_ALERT_TYPE",
]
