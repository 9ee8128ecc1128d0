"""Errors raised by entities and record services."""


class RecordError(Exception):
    """Base exception for record errors."""

    pass


class ValidationError(RecordError, ValueError):
    """A field value violates its constraint, or an immutable field was reassigned."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class InvalidOperation(RecordError):
    """A service precondition was violated (missing record, duplicate id, None argument)."""

    pass


class DuplicateRecord(InvalidOperation):
    """Raised when adding a record whose id is already stored."""

    def __init__(self, kind: str, record_id: str) -> None:
        super().__init__(f"{kind} ID '{record_id}' already exists.")
        self.record_id = record_id


class RecordNotFound(InvalidOperation):
    """Raised when an update targets an id that is not stored."""

    def __init__(self, kind: str, record_id: str) -> None:
        super().__init__(f"{kind} '{record_id}' not found.")
        self.record_id = record_id
