"""In-memory implementation of RecordRepository (no DB)."""

from typing import Generic, TypeVar

from grandstrand.domain import DuplicateRecord

R = TypeVar("R")


class InMemoryRecordRepository(Generic[R]):
    """Stores records in memory keyed by id. Order preserved by insertion."""

    def __init__(self) -> None:
        self._by_id: dict[str, R] = {}

    def __len__(self) -> int:
        return len(self._by_id)

    def add(self, record: R) -> None:
        if record.id in self._by_id:
            raise DuplicateRecord(type(record).__name__, record.id)
        self._by_id[record.id] = record

    def get_by_id(self, record_id: str) -> R | None:
        return self._by_id.get(record_id)

    def remove(self, record_id: str) -> bool:
        return self._by_id.pop(record_id, None) is not None

    def list_all(self) -> list[R]:
        return list(self._by_id.values())
