"""Alert type model."""

from typing import Any, ClassVar

from django.db import models


class AlertType(models.Model):
    """A category of alert and its delivery policy.

    Attributes:
        id: Storage-assigned identifier (None until inserted).
        code: Unique, stable code such as "pm" or "quoted".
        enabled: Disabled types are never admitted into an alert queue.
        can_be_user_disabled: Whether users may opt out of this type.
        default_user_enabled: Whether new users receive this type by default.
    """

    id = models.AutoField(primary_key=True)
    code = models.CharField(max_length=100, unique=True)
    enabled = models.BooleanField(default=True)
    can_be_user_disabled = models.BooleanField(default=True)
    default_user_enabled = models.BooleanField(default=True)

    class Meta:
        """Django model metadata."""

        db_table = "alert_types"
        managed = False
        ordering: ClassVar[list[str]] = ["id"]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the plain mapping stored in the alert type cache."""
        return {
            "id": self.id,
            "code": self.code,
            "enabled": self.enabled,
            "can_be_user_disabled": self.can_be_user_disabled,
            "default_user_enabled": self.default_user_enabled,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AlertType":
        """Build an alert type from a cached mapping.

        Missing flags default to False so a truncated cache entry never
        enables a type by accident.
        """
        return cls(
            id=data.get("id"),
            code=data.get("code", ""),
            enabled=bool(data.get("enabled", False)),
            can_be_user_disabled=bool(data.get("can_be_user_disabled", False)),
            default_user_enabled=bool(data.get("default_user_enabled", False)),
        )

    def __str__(self) -> str:
        """Return string representation of alert type."""
        return self.code

    def __repr__(self) -> str:
        """Return detailed representation of alert type."""
        return (
            f"<AlertType(id={self.id}, code='{self.code}', "
            f"enabled={self.enabled})>"
        )
