"""Cache-coherent registry of alert types."""

from collections.abc import Iterable

import structlog
from django.conf import settings
from django.core.cache import caches
from django.core.cache.backends.base import BaseCache
from django.db import DatabaseError

from alerts.constants import ALERT_TYPES_CACHE_KEY
from alerts.exceptions import AlertTypeNotFoundError
from alerts.models import AlertType
from alerts.repositories import AlertTypeRepository

logger = structlog.get_logger(__name__)


class AlertTypeManager:
    """Loads, caches and mutates alert type metadata.

    The full set of alert types is kept in the cache under a single key and
    rebuilt from storage on a miss. Every mutation writes to storage and then
    forces a reload, so the cache never serves a snapshot older than the last
    mutation made through this manager.

    Lookups return fresh AlertType instances built from the snapshot, so
    callers cannot alter the cached data.
    """

    def __init__(
        self,
        cache: BaseCache | None = None,
        repository: AlertTypeRepository | None = None,
    ):
        """Initialize the manager.

        Args:
            cache: Cache backend; defaults to the ALERTS_CACHE_ALIAS cache
            repository: Alert type storage; defaults to AlertTypeRepository
        """
        self._cache = cache
        self.repository = repository or AlertTypeRepository()
        self._snapshot: dict[str, dict] | None = None

    @property
    def cache(self) -> BaseCache:
        """Cache backend holding the alert type snapshot."""
        if self._cache is None:
            self._cache = caches[settings.ALERTS_CACHE_ALIAS]
        return self._cache

    def get_alert_types(self, force_database: bool = False) -> dict[str, AlertType]:
        """Return all alert types keyed by code.

        Reads through the cache; storage is queried when forced or when the
        cache holds no snapshot, and the fresh snapshot is written back
        without expiry.

        Args:
            force_database: Skip the cache and reload from storage.

        Returns:
            Mapping of alert type code to AlertType.
        """
        snapshot = None if force_database else self.cache.get(ALERT_TYPES_CACHE_KEY)

        if snapshot is None:
            snapshot = {
                alert_type.code: alert_type.to_dict()
                for alert_type in self.repository.get_all()
            }
            self.cache.set(ALERT_TYPES_CACHE_KEY, snapshot, None)
            logger.debug(
                "alert_types_loaded_from_database",
                count=len(snapshot),
                forced=force_database,
            )

        self._snapshot = snapshot
        return {code: AlertType.from_dict(data) for code, data in snapshot.items()}

    def _current_snapshot(self) -> dict[str, dict]:
        if self._snapshot is None:
            self.get_alert_types()
        return self._snapshot

    def add(self, alert_type: AlertType) -> bool:
        """Register a new alert type.

        A type whose code already exists is left untouched and reported as
        success.

        Args:
            alert_type: The type to insert; its ID is assigned by storage.

        Returns:
            True if the type exists afterwards, False if the insert failed.
        """
        if alert_type.code in self._current_snapshot():
            return True

        try:
            self.repository.insert(alert_type)
        except DatabaseError as e:
            logger.error(
                "alert_type_insert_failed",
                code=alert_type.code,
                error=str(e),
            )
            return False

        logger.info("alert_type_added", code=alert_type.code, type_id=alert_type.id)
        self.get_alert_types(force_database=True)
        return True

    def add_types(self, alert_types: Iterable[AlertType]) -> bool:
        """Register several alert types with one batch insert.

        Codes that already exist are skipped. The snapshot is reloaded once,
        whether or not the insert succeeded.

        Args:
            alert_types: Types to insert.

        Returns:
            False if the batch insert failed, True otherwise.
        """
        existing = self._current_snapshot()
        to_insert: dict[str, AlertType] = {}
        for alert_type in alert_types:
            if alert_type.code not in existing:
                to_insert[alert_type.code] = alert_type

        success = True
        if to_insert:
            try:
                self.repository.insert_many(list(to_insert.values()))
                logger.info("alert_types_added", codes=list(to_insert))
            except DatabaseError as e:
                success = False
                logger.error(
                    "alert_types_insert_failed",
                    codes=list(to_insert),
                    error=str(e),
                )

        self.get_alert_types(force_database=True)
        return success

    def update_alert_types(self, alert_types: Iterable[AlertType]) -> None:
        """Overwrite the policy flags of existing alert types.

        Items that are not AlertType instances, or have no ID, are skipped.
        The snapshot is reloaded once after all updates, also when an update
        fails partway.

        Args:
            alert_types: Types carrying the new flag values.
        """
        try:
            for alert_type in alert_types:
                if not isinstance(alert_type, AlertType) or not alert_type.id:
                    continue
                self.repository.update_flags(alert_type)
                logger.info(
                    "alert_type_updated",
                    type_id=alert_type.id,
                    code=alert_type.code,
                    enabled=alert_type.enabled,
                    can_be_user_disabled=alert_type.can_be_user_disabled,
                    default_user_enabled=alert_type.default_user_enabled,
                )
        finally:
            self.get_alert_types(force_database=True)

    def get_by_code(self, code: str) -> AlertType:
        """Return the alert type with the given code.

        Raises:
            AlertTypeNotFoundError: If no such type is registered.
        """
        data = self._current_snapshot().get(code)
        if data is None:
            raise AlertTypeNotFoundError(code=code)
        return AlertType.from_dict(data)

    def get_by_id(self, type_id: int) -> AlertType:
        """Return the alert type with the given ID.

        Raises:
            AlertTypeNotFoundError: If no such type is registered.
        """
        for data in self._current_snapshot().values():
            if data["id"] == type_id:
                return AlertType.from_dict(data)
        raise AlertTypeNotFoundError(type_id=type_id)

    def delete_by_code(self, code: str) -> bool:
        """Delete the alert type with the given code.

        Raises:
            AlertTypeNotFoundError: If no such type is registered.
        """
        return self.delete_by_id(self.get_by_code(code).id)

    def delete_by_id(self, type_id: int) -> bool:
        """Delete the alert type with the given ID and reload the snapshot.

        Raises:
            AlertTypeNotFoundError: If no row had that ID.
        """
        deleted = self.repository.delete_by_id(type_id)
        self.get_alert_types(force_database=True)
        if not deleted:
            raise AlertTypeNotFoundError(type_id=type_id)
        logger.info("alert_type_deleted", type_id=type_id)
        return True
