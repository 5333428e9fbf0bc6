"""Repositories wrapping ORM access for the alert pipeline."""

from alerts.repositories.alert_repository import AlertRepository
from alerts.repositories.alert_type_repository import AlertTypeRepository
from alerts.repositories.user_repository import UserRepository

__all__ = ["AlertRepository", "AlertTypeRepository", "UserRepository"]
