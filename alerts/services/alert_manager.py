"""Per-unit-of-work alert queue, commit engine and read surface."""

import json
from collections.abc import Iterable

import structlog
from django.conf import settings
from django.db import DatabaseError

from alerts.constants import (
    FIND_USERS_BY_UID,
    FIND_USERS_BY_USERNAME,
    POST_THREADAUTHOR_ALERT_TYPE,
    QUOTED_ALERT_TYPE,
)
from alerts.exceptions import AlertNotFoundError, AlertTypeNotFoundError
from alerts.models import Alert, AlertType, User
from alerts.repositories import AlertRepository, UserRepository
from alerts.services.alert_type_manager import AlertTypeManager
from alerts.signals.hooks import (
    alert_manager_add_alert,
    alert_manager_delete_alerts,
    alert_manager_mark_all_read,
    alert_manager_mark_read,
    alert_manager_mark_unread,
)

logger = structlog.get_logger(__name__)

AlertKey = tuple[str, int, int]


def parse_disabled_alert_types(raw: str | None) -> set[int]:
    """Parse a user's JSON list of opted-out alert type IDs.

    Malformed data counts as no opt-outs.

    Args:
        raw: Contents of the user's myalerts_disabled_alert_types column.

    Returns:
        Set of alert type IDs the user opted out of.
    """
    if not raw:
        return set()
    try:
        decoded = json.loads(raw)
    except ValueError:
        logger.debug("disabled_alert_types_malformed", raw=raw)
        return set()
    if not isinstance(decoded, list):
        return set()

    type_ids = set()
    for value in decoded:
        try:
            type_ids.add(int(value))
        except (TypeError, ValueError):
            continue
    return type_ids


class AlertManager:
    """Queues alerts for one acting user and commits them in one batch.

    An instance belongs to a single unit of work (typically one request).
    Alerts are deduplicated by (type code, recipient, object ID), keeping the
    latest. Nothing is written until commit(), which drains the queue with one
    batch insert.

    Reads are scoped to the acting user and filtered by alert type policy and
    the acting user's opt-outs, which are resolved once at construction.
    """

    def __init__(
        self,
        current_user: User,
        alert_type_manager: AlertTypeManager,
        alert_repository: AlertRepository | None = None,
        user_repository: UserRepository | None = None,
    ):
        """Initialize the manager for one unit of work.

        Args:
            current_user: The acting user; recipient scope for reads and
                default sender for queued alerts
            alert_type_manager: Alert type registry
            alert_repository: Alert storage; defaults to AlertRepository
            user_repository: User storage; defaults to UserRepository
        """
        self.current_user = current_user
        self.alert_type_manager = alert_type_manager
        self.alert_repository = alert_repository or AlertRepository()
        self.user_repository = user_repository or UserRepository()

        self._alert_queue: dict[AlertKey, Alert] = {}
        self._num_alerts: int | None = None
        self._num_unread_alerts: int | None = None
        self._enabled_alert_type_ids = self._current_user_enabled_alerts()

    @property
    def current_user_id(self) -> int:
        """Forum user ID of the acting user."""
        return self.current_user.uid

    @property
    def enabled_alert_type_ids(self) -> list[int]:
        """Alert type IDs the acting user receives."""
        return list(self._enabled_alert_type_ids)

    def _current_user_enabled_alerts(self) -> list[int]:
        disabled = parse_disabled_alert_types(
            self.current_user.myalerts_disabled_alert_types
        )
        return [
            alert_type.id
            for alert_type in self.alert_type_manager.get_alert_types().values()
            if alert_type.id not in disabled or not alert_type.can_be_user_disabled
        ]

    # Queue

    def add_alert(self, alert: Alert) -> "AlertManager":
        """Queue an alert if its type and recipient allow it.

        The alert is dropped when its type is disabled, when the recipient
        opted out of a type they are allowed to disable, or when it is a
        quoted alert for a thread whose author is already being alerted of a
        reply. Admitted alerts are passed to the alert_manager_add_alert
        signal and then queued, replacing any queued alert with the same key.

        Args:
            alert: Unsaved alert.

        Returns:
            This manager, for chaining.
        """
        if alert.from_user_id is None:
            alert.from_user = self.current_user

        alert_type = alert.alert_type
        if not alert_type.enabled:
            logger.debug(
                "alert_dropped_type_disabled",
                alert_type=alert_type.code,
                recipient_id=alert.user_id,
            )
            return self

        if alert_type.can_be_user_disabled and not self.do_users_want_alert(
            alert_type, [alert.user_id]
        ):
            logger.debug(
                "alert_dropped_user_opted_out",
                alert_type=alert_type.code,
                recipient_id=alert.user_id,
            )
            return self

        if alert_type.code == QUOTED_ALERT_TYPE and self._thread_author_queued(alert):
            logger.debug(
                "alert_dropped_thread_author_queued",
                recipient_id=alert.user_id,
                object_id=alert.object_id,
            )
            return self

        alert_manager_add_alert.send(
            sender=self.__class__, alert_manager=self, alert=alert
        )

        self._alert_queue[alert.dedup_key] = alert
        return self

    def add_alerts(self, alerts: Iterable[Alert]) -> "AlertManager":
        """Queue several alerts; see add_alert()."""
        for alert in alerts:
            self.add_alert(alert)
        return self

    def _thread_author_queued(self, alert: Alert) -> bool:
        try:
            thread_id = int(alert.extra_details.get("tid"))
        except (TypeError, ValueError):
            return False
        key = (POST_THREADAUTHOR_ALERT_TYPE, alert.user_id, thread_id)
        return key in self._alert_queue

    def do_users_want_alert(
        self,
        alert_type: AlertType,
        users: list[int] | list[str],
        find_users_by: int = FIND_USERS_BY_UID,
    ) -> list[User]:
        """Return the users who have not opted out of an alert type.

        Users are always included when the type cannot be disabled. Users
        that do not exist are never returned.

        Args:
            alert_type: The alert type being sent.
            users: User IDs, or usernames with FIND_USERS_BY_USERNAME.
            find_users_by: FIND_USERS_BY_UID or FIND_USERS_BY_USERNAME.

        Returns:
            The users that want the alert.

        Raises:
            ValueError: If find_users_by is not a known lookup mode.
        """
        if not users:
            return []

        if find_users_by == FIND_USERS_BY_UID:
            candidates = self.user_repository.get_users_by_ids(list(users))
        elif find_users_by == FIND_USERS_BY_USERNAME:
            candidates = self.user_repository.get_users_by_usernames(list(users))
        else:
            raise ValueError(f"Unknown user lookup mode: {find_users_by}")

        return [
            user
            for user in candidates
            if not alert_type.can_be_user_disabled
            or alert_type.id
            not in parse_disabled_alert_types(user.myalerts_disabled_alert_types)
        ]

    def get_alert_queue(self) -> list[Alert]:
        """Return the queued alerts in insertion order."""
        return list(self._alert_queue.values())

    def clear_queue(self) -> None:
        """Discard all queued alerts."""
        self._alert_queue.clear()

    def commit(self) -> bool:
        """Write all queued alerts with one batch insert.

        The queue is emptied before the alerts are serialized and inserted.
        Serialization and storage failures are logged with the number of
        dropped alerts and are not retried.

        Returns:
            True if the queue was empty or the insert succeeded.
        """
        if not self._alert_queue:
            return True

        alerts = self.get_alert_queue()
        self.clear_queue()

        try:
            self.alert_repository.insert_many(
                [alert.prepare_for_commit() for alert in alerts]
            )
        except (DatabaseError, TypeError, ValueError) as e:
            logger.error(
                "alert_commit_failed",
                dropped_alerts=len(alerts),
                alert_types=sorted({alert.alert_type.code for alert in alerts}),
                error=str(e),
            )
            return False

        logger.info("alerts_committed", count=len(alerts))
        return True

    # Reads

    def _hydrate(self, alert: Alert) -> Alert | None:
        try:
            alert.alert_type = self.alert_type_manager.get_by_code(alert.alert_type.code)
            alert.extra_details  # noqa: B018
        except (AlertTypeNotFoundError, ValueError) as e:
            logger.warning("alert_row_skipped", alert_id=alert.id, error=str(e))
            return None
        return alert

    def get_alerts(
        self, start: int = 0, limit: int = 0, unread_only: bool = False
    ) -> list[Alert]:
        """Return a page of the acting user's visible alerts, newest first.

        Args:
            start: Offset of the first alert.
            limit: Page size; 0 means the ALERTS_PER_PAGE setting.
            unread_only: Restrict to unread alerts.

        Returns:
            Hydrated alerts with sender and cached alert type attached.
        """
        if not self._enabled_alert_type_ids:
            return []

        if limit <= 0:
            limit = settings.ALERTS_PER_PAGE

        queryset = self.alert_repository.get_visible_alerts(
            self.current_user_id, self._enabled_alert_type_ids, unread_only
        )[start : start + limit]

        return [alert for alert in map(self._hydrate, queryset) if alert is not None]

    def get_unread_alerts(self) -> list[Alert]:
        """Return all of the acting user's visible unread alerts, newest first."""
        if not self._enabled_alert_type_ids:
            return []

        queryset = self.alert_repository.get_visible_alerts(
            self.current_user_id, self._enabled_alert_type_ids, unread_only=True
        )
        return [alert for alert in map(self._hydrate, queryset) if alert is not None]

    def get_alert(self, alert_id: int) -> Alert:
        """Return one of the acting user's visible alerts.

        Raises:
            AlertNotFoundError: If it does not exist, belongs to someone else,
                is filtered out by policy, or its type cannot be resolved.
        """
        row = (
            self.alert_repository.get_visible_alerts(
                self.current_user_id, self._enabled_alert_type_ids
            )
            .filter(id=alert_id)
            .first()
        )
        alert = self._hydrate(row) if row is not None else None
        if alert is None:
            raise AlertNotFoundError(alert_id)
        return alert

    def get_num_alerts(self) -> int:
        """Return the number of visible alerts, counted once per manager."""
        if self._num_alerts is None:
            if not self._enabled_alert_type_ids:
                self._num_alerts = 0
            else:
                self._num_alerts = self.alert_repository.get_visible_alerts(
                    self.current_user_id, self._enabled_alert_type_ids
                ).count()
        return self._num_alerts

    def get_num_unread_alerts(self, force_recount: bool = False) -> int:
        """Return the number of visible unread alerts.

        Args:
            force_recount: Ignore the memoised count.
        """
        if self._num_unread_alerts is None or force_recount:
            if not self._enabled_alert_type_ids:
                self._num_unread_alerts = 0
            else:
                self._num_unread_alerts = self.alert_repository.get_visible_alerts(
                    self.current_user_id,
                    self._enabled_alert_type_ids,
                    unread_only=True,
                ).count()
        return self._num_unread_alerts

    # Writes

    def mark_read(self, alert_ids: list[int]) -> int:
        """Mark the acting user's alerts as read; see mark_read_or_unread()."""
        return self.mark_read_or_unread(alert_ids, read_status=True)

    def mark_unread(self, alert_ids: list[int]) -> int:
        """Mark the acting user's alerts as unread; see mark_read_or_unread()."""
        return self.mark_read_or_unread(alert_ids, read_status=False)

    def mark_read_or_unread(self, alert_ids: list[int], read_status: bool) -> int:
        """Set the read state of the acting user's alerts.

        IDs of alerts belonging to other users are ignored.

        Args:
            alert_ids: Alert IDs to update.
            read_status: True to mark read, False to mark unread.

        Returns:
            Number of alerts updated.
        """
        alert_ids = [int(alert_id) for alert_id in alert_ids]
        if not alert_ids:
            return 0

        affected_rows = self.alert_repository.set_unread(
            self.current_user_id, alert_ids, unread=not read_status
        )

        signal = alert_manager_mark_read if read_status else alert_manager_mark_unread
        signal.send(
            sender=self.__class__,
            alert_manager=self,
            alert_ids=alert_ids,
            affected_rows=affected_rows,
        )
        logger.info(
            "alerts_marked_read" if read_status else "alerts_marked_unread",
            alert_ids=alert_ids,
            affected_rows=affected_rows,
        )
        return affected_rows

    def mark_all_read(self) -> int:
        """Mark every alert of the acting user as read.

        Returns:
            Number of alerts updated.
        """
        affected_rows = self.alert_repository.mark_all_read(self.current_user_id)
        alert_manager_mark_all_read.send(
            sender=self.__class__, alert_manager=self, affected_rows=affected_rows
        )
        logger.info("alerts_marked_all_read", affected_rows=affected_rows)
        return affected_rows

    def delete_alerts(self, alert_ids: list[int]) -> int:
        """Delete the acting user's alerts with the given IDs.

        Returns:
            Number of alerts deleted.
        """
        alert_ids = [int(alert_id) for alert_id in alert_ids]
        if not alert_ids:
            return 0

        affected_rows = self.alert_repository.delete_for_user(
            self.current_user_id, alert_ids
        )
        alert_manager_delete_alerts.send(
            sender=self.__class__,
            alert_manager=self,
            alert_ids=alert_ids,
            affected_rows=affected_rows,
        )
        logger.info("alerts_deleted", alert_ids=alert_ids, affected_rows=affected_rows)
        return affected_rows
