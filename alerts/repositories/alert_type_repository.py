"""Repository for alert type rows."""

from django.db import transaction
from django.db.models import QuerySet

from alerts.models import AlertType


class AlertTypeRepository:
    """Encapsulates reads and writes against the alert_types table."""

    @staticmethod
    def get_all() -> QuerySet[AlertType]:
        """Return every alert type row."""
        return AlertType.objects.all()

    @staticmethod
    def insert(alert_type: AlertType) -> AlertType:
        """Insert one alert type; storage assigns the ID.

        Args:
            alert_type: Unsaved alert type

        Returns:
            The saved alert type

        Raises:
            DatabaseError: If the insert fails
        """
        alert_type.id = None
        with transaction.atomic():
            alert_type.save(force_insert=True)
        return alert_type

    @staticmethod
    def insert_many(alert_types: list[AlertType]) -> list[AlertType]:
        """Insert several alert types in one batch.

        Raises:
            DatabaseError: If the insert fails
        """
        for alert_type in alert_types:
            alert_type.id = None
        with transaction.atomic():
            return AlertType.objects.bulk_create(alert_types)

    @staticmethod
    def update_flags(alert_type: AlertType) -> int:
        """Overwrite the policy flags of the row with the type's ID.

        Returns:
            Number of rows updated
        """
        return AlertType.objects.filter(id=alert_type.id).update(
            enabled=alert_type.enabled,
            can_be_user_disabled=alert_type.can_be_user_disabled,
            default_user_enabled=alert_type.default_user_enabled,
        )

    @staticmethod
    def delete_by_id(type_id: int) -> int:
        """Delete the row with the given ID.

        Returns:
            Number of rows deleted
        """
        deleted, _ = AlertType.objects.filter(id=type_id).delete()
        return deleted
