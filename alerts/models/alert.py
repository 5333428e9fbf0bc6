"""Alert model.

An Alert is built in memory by a producer, buffered by an AlertManager for the
duration of a unit of work, and inserted in one batch on commit. Rows read
back are hydrated into the same model, with the alert type replaced by the
registry's cached copy.
"""

import json
from typing import Any, ClassVar

from django.core.serializers.json import DjangoJSONEncoder
from django.db import models
from django.utils import timezone

from alerts.models.alert_type import AlertType


def decode_extra_details(raw: str | None) -> dict[str, Any]:
    """Decode the stored extra details text.

    Args:
        raw: JSON text as stored in the extra_details column.

    Returns:
        The decoded mapping; empty text decodes to an empty dict.

    Raises:
        ValueError: If the text is not JSON or does not hold an object.
    """
    if not raw:
        return {}
    decoded = json.loads(raw)
    if not isinstance(decoded, dict):
        raise ValueError(f"Extra details must be a JSON object, got {type(decoded).__name__}")
    return decoded


class Alert(models.Model):
    """A single alert for one recipient.

    Attributes:
        id: Storage-assigned identifier (None until committed).
        user: Recipient. The column is uid.
        from_user: Optional sender; defaults to the acting user when queued.
        alert_type: The alert type; alert_type_id always follows it.
        object_id: ID of the object the alert is about (0 if none).
        dateline: Creation time.
        unread: Whether the recipient has not read the alert yet.
        forced: Shown to the recipient even if they opted out of the type.
    """

    id = models.AutoField(primary_key=True)
    user = models.ForeignKey(
        "alerts.User",
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="alerts",
        db_column="uid",
    )
    from_user = models.ForeignKey(
        "alerts.User",
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="sent_alerts",
        db_column="from_user_id",
        null=True,
        blank=True,
    )
    alert_type = models.ForeignKey(
        AlertType,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="alerts",
        db_column="alert_type_id",
    )
    object_id = models.PositiveIntegerField(default=0)
    dateline = models.DateTimeField(default=timezone.now)
    extra_details_json = models.TextField(
        db_column="extra_details",
        default="{}",
        blank=True,
    )
    unread = models.BooleanField(default=True)
    forced = models.BooleanField(default=False)

    class Meta:
        """Django model metadata."""

        db_table = "alerts"
        managed = False
        ordering: ClassVar[list[str]] = ["-id"]
        indexes: ClassVar[list] = [
            models.Index(fields=["user", "unread"]),
        ]

    @classmethod
    def make(
        cls,
        user_id: int,
        alert_type: AlertType,
        object_id: int = 0,
        extra_details: dict[str, Any] | None = None,
        forced: bool = False,
    ) -> "Alert":
        """Build an unsaved alert ready to be queued.

        Args:
            user_id: Forum user ID of the recipient.
            alert_type: Alert type, usually from AlertTypeManager.get_by_code().
            object_id: ID of the object the alert refers to.
            extra_details: Data the type's formatter needs to render the alert.
            forced: Whether to bypass the recipient's opt-out list.

        Returns:
            A new, uncommitted Alert.
        """
        alert = cls(
            user_id=user_id,
            alert_type=alert_type,
            object_id=object_id,
            forced=forced,
        )
        alert.extra_details = extra_details or {}
        return alert

    @property
    def extra_details(self) -> dict[str, Any]:
        """Formatter data, decoded lazily from the stored JSON text.

        Raises:
            ValueError: If the stored text is malformed.
        """
        if "_extra_details" not in self.__dict__:
            self._extra_details = decode_extra_details(self.extra_details_json)
        return self._extra_details

    @extra_details.setter
    def extra_details(self, value: dict[str, Any]) -> None:
        self._extra_details = dict(value)

    @property
    def dedup_key(self) -> tuple[str, int, int]:
        """Key under which a queue keeps only the latest alert."""
        return (self.alert_type.code, self.user_id, self.object_id)

    def prepare_for_commit(self) -> "Alert":
        """Serialize extra details into the column value before insertion."""
        self.extra_details_json = json.dumps(self.extra_details, cls=DjangoJSONEncoder)
        return self

    def __str__(self) -> str:
        """Return string representation of alert."""
        return f"{self.alert_type.code} alert for user {self.user_id}"

    def __repr__(self) -> str:
        """Return detailed representation of alert."""
        return (
            f"<Alert(id={self.id}, type_id={self.alert_type_id}, "
            f"user={self.user_id}, object_id={self.object_id}, "
            f"unread={self.unread})>"
        )
