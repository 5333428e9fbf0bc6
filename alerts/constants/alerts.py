"""Constants for the alert pipeline."""

# Cache key holding the serialized alert type snapshot
ALERT_TYPES_CACHE_KEY = "alerts:alert_types"

# Lookup modes for AlertManager.do_users_want_alert
FIND_USERS_BY_UID = 0
FIND_USERS_BY_USERNAME = 1

# Alert type codes that ship with formatters
PM_ALERT_TYPE = "pm"
QUOTED_ALERT_TYPE = "quoted"
POST_THREADAUTHOR_ALERT_TYPE = "post_threadauthor"
SUBSCRIBED_THREAD_ALERT_TYPE = "subscribed_thread"
REP_ALERT_TYPE = "rep"
BUDDYLIST_ALERT_TYPE = "buddylist"

DEFAULT_ALERTS_PER_PAGE = 10
