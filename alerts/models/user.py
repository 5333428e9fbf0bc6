"""Forum user model."""

from typing import ClassVar

from django.db import models


class User(models.Model):
    """Forum user matching the users table.

    The table is owned by the forum, so the model is unmanaged. The alert
    service only reads identity fields and the user's alert opt-out list.
    """

    uid = models.AutoField(primary_key=True)
    username = models.CharField(max_length=120, unique=True)
    avatar = models.CharField(max_length=200, default="", blank=True)
    usergroup = models.PositiveSmallIntegerField(default=2)
    displaygroup = models.PositiveSmallIntegerField(default=0)
    myalerts_disabled_alert_types = models.TextField(
        default="[]",
        blank=True,
        help_text="JSON list of alert type IDs the user has opted out of",
    )

    class Meta:
        """Django model metadata."""

        db_table = "users"
        managed = False
        ordering: ClassVar[list[str]] = ["uid"]

    @property
    def is_authenticated(self) -> bool:
        """Always True; instances only exist for resolved forum users."""
        return True

    def __str__(self) -> str:
        """Return string representation of user."""
        return self.username

    def __repr__(self) -> str:
        """Return detailed representation of user."""
        return f"<User(uid={self.uid}, username='{self.username}')>"
