"""Error types raised by field metadata services."""

from __future__ import annotations


class FieldMetadataError(RuntimeError):
    """Base class for field metadata service failures."""


class FieldValidationError(FieldMetadataError):
    """User input is malformed or would break a field metadata invariant."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class FieldNotFoundError(FieldMetadataError):
    """A referenced record does not exist."""

    def __init__(self, kind: str, record_id: int) -> None:
        super().__init__(f"{kind} {record_id} not found")
        self.kind = kind
        self.record_id = record_id


class FieldWriteError(FieldMetadataError):
    """A write that was expected to succeed affected no rows."""
