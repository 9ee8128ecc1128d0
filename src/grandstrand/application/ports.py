"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol, TypeVar

R = TypeVar("R")


class RecordRepository(Protocol[R]):
    """Stores records of one kind keyed by their id."""

    def add(self, record: R) -> None:
        """Store a record. Raises DuplicateRecord if the id is already stored."""
        ...

    def get_by_id(self, record_id: str) -> R | None:
        """Return the record with the given id, or None."""
        ...

    def remove(self, record_id: str) -> bool:
        """Remove a record. Returns True if removed, False if not found."""
        ...

    def list_all(self) -> list[R]:
        """Return all records in insertion order."""
        ...

    def __len__(self) -> int: ...
