"""Repository for alert rows."""

from django.db import transaction
from django.db.models import Q, QuerySet

from alerts.models import Alert


class AlertRepository:
    """Encapsulates reads and writes against the alerts table.

    Every query is scoped to a single recipient.
    """

    @staticmethod
    def insert_many(alerts: list[Alert]) -> list[Alert]:
        """Insert a batch of alerts in one statement.

        Args:
            alerts: Unsaved alerts with serialized extra details

        Returns:
            The inserted alerts

        Raises:
            DatabaseError: If the insert fails
        """
        with transaction.atomic():
            return Alert.objects.bulk_create(alerts)

    @staticmethod
    def get_visible_alerts(
        user_id: int,
        enabled_type_ids: list[int],
        unread_only: bool = False,
    ) -> QuerySet[Alert]:
        """Return the recipient's alerts that pass alert type policy.

        An alert is visible when its type is enabled and the type is one the
        recipient receives, the alert is forced, or the type cannot be
        disabled by users. Newest first, with type and sender joined in.

        Args:
            user_id: Forum user ID of the recipient
            enabled_type_ids: Alert type IDs the recipient has not opted out of
            unread_only: Restrict to unread alerts

        Returns:
            QuerySet of visible alerts
        """
        queryset = (
            Alert.objects.filter(user_id=user_id, alert_type__enabled=True)
            .filter(
                Q(alert_type_id__in=enabled_type_ids)
                | Q(forced=True)
                | Q(alert_type__can_be_user_disabled=False)
            )
            .select_related("alert_type", "from_user")
            .order_by("-id")
        )
        if unread_only:
            queryset = queryset.filter(unread=True)
        return queryset

    @staticmethod
    def set_unread(user_id: int, alert_ids: list[int], unread: bool) -> int:
        """Set the unread flag on the recipient's alerts with the given IDs.

        Returns:
            Number of rows updated
        """
        return Alert.objects.filter(user_id=user_id, id__in=alert_ids).update(
            unread=unread
        )

    @staticmethod
    def mark_all_read(user_id: int) -> int:
        """Mark every alert of the recipient as read.

        Returns:
            Number of rows updated
        """
        return Alert.objects.filter(user_id=user_id, unread=True).update(unread=False)

    @staticmethod
    def delete_for_user(user_id: int, alert_ids: list[int]) -> int:
        """Delete the recipient's alerts with the given IDs.

        Returns:
            Number of rows deleted
        """
        deleted, _ = Alert.objects.filter(user_id=user_id, id__in=alert_ids).delete()
        return deleted
