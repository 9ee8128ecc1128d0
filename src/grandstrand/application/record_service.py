"""Shared add/get/delete/update flow for the per-kind record services."""

import logging
import threading
from typing import Any, Generic, TypeVar

from grandstrand.application.ports import RecordRepository
from grandstrand.domain import DuplicateRecord, InvalidOperation, RecordNotFound

logger = logging.getLogger(__name__)

R = TypeVar("R")


class RecordService(Generic[R]):
    """
    Keyed store over one entity kind.
    Enforces id uniqueness on add and existence on update. Each instance owns
    its repository; the lock makes check-then-store atomic across threads.
    """

    kind = "Record"
    record_type: type = object

    def __init__(self, repository: RecordRepository[R]) -> None:
        self._repo = repository
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._repo)

    def __contains__(self, record_id: object) -> bool:
        if not isinstance(record_id, str):
            return False
        with self._lock:
            return self._repo.get_by_id(record_id) is not None

    def _add(self, record: R | None) -> None:
        if record is None:
            raise InvalidOperation(f"{self.kind} cannot be null.")
        if not isinstance(record, self.record_type):
            raise InvalidOperation(
                f"Expected {self.kind}, got {type(record).__name__}."
            )
        record_id = record.id
        with self._lock:
            if self._repo.get_by_id(record_id) is not None:
                raise DuplicateRecord(self.kind, record_id)
            self._repo.add(record)
        logger.info("Added %s %r", self.kind.lower(), record_id)

    def _get(self, record_id: str | None) -> R | None:
        if record_id is None:
            return None
        with self._lock:
            return self._repo.get_by_id(record_id)

    def _delete(self, record_id: str | None) -> bool:
        if record_id is None:
            return False
        with self._lock:
            removed = self._repo.remove(record_id)
        if removed:
            logger.info("Deleted %s %r", self.kind.lower(), record_id)
        else:
            logger.debug("Delete missed: no %s %r", self.kind.lower(), record_id)
        return removed

    def _list(self) -> list[R]:
        with self._lock:
            return self._repo.list_all()

    def _require(self, record_id: str | None) -> R:
        """Return the stored record or raise InvalidOperation. Caller holds the lock."""
        if record_id is None:
            raise InvalidOperation(f"{self.kind} ID cannot be null.")
        record = self._repo.get_by_id(record_id)
        if record is None:
            logger.debug("Lookup missed: no %s %r", self.kind.lower(), record_id)
            raise RecordNotFound(self.kind, record_id)
        return record

    def _update(self, record_id: str | None, field: str, value: Any) -> None:
        """Assign through the entity's validating setter; ValidationError propagates."""
        with self._lock:
            record = self._require(record_id)
            setattr(record, field, value)
        logger.info("Updated %s %r: %s", self.kind.lower(), record_id, field)
