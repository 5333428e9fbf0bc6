"""Extension points of the alert pipeline.

Receivers are called synchronously with Signal.send(), so an exception raised
by a receiver propagates to the operation that sent the signal.

register_formatters
    Sent once per AlertFormatterManager, on its first formatter lookup.
    Keyword args: formatter_manager.
alert_manager_add_alert
    Sent for every admitted alert before it is queued. Receivers may mutate
    the alert. Keyword args: alert_manager, alert.
alert_manager_mark_read / alert_manager_mark_unread
    Keyword args: alert_manager, alert_ids, affected_rows.
alert_manager_mark_all_read
    Keyword args: alert_manager, affected_rows.
alert_manager_delete_alerts
    Keyword args: alert_manager, alert_ids, affected_rows.
"""

from django.dispatch import Signal

register_formatters = Signal()
alert_manager_add_alert = Signal()
alert_manager_mark_read = Signal()
alert_manager_mark_unread = Signal()
alert_manager_mark_all_read = Signal()
alert_manager_delete_alerts = Signal()
