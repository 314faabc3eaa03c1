"""Session-bound repositories for field, dimension, and field values records.

Repositories never commit. Services own the transaction boundary and decide
when a unit of work is committed or rolled back.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from fieldmeta.models.dimension import Dimension
from fieldmeta.models.field import Field
from fieldmeta.models.field_values import FieldValues


class FieldRepository:
    """Read and update field rows."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def get(self, field_id: int) -> Field | None:
        return self.db.scalar(select(Field).where(Field.id == field_id))

    def exists(self, field_id: int) -> bool:
        return self.db.scalar(select(Field.id).where(Field.id == field_id)) is not None

    def update(self, field_id: int, attrs: Mapping[str, Any]) -> int:
        """Apply a partial update and return the number of affected rows."""

        result = self.db.execute(update(Field).where(Field.id == field_id).values(**attrs))
        return result.rowcount


class DimensionRepository:
    """Read and write the single dimension row owned by a field."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def get_by_field(self, field_id: int) -> Dimension | None:
        return self.db.scalar(select(Dimension).where(Dimension.field_id == field_id))

    def insert(self, attrs: Mapping[str, Any]) -> int:
        row = Dimension(**attrs)
        self.db.add(row)
        self.db.flush()
        return row.id

    def update(self, dimension_id: int, attrs: Mapping[str, Any]) -> int:
        result = self.db.execute(update(Dimension).where(Dimension.id == dimension_id).values(**attrs))
        return result.rowcount

    def delete_by_field(self, field_id: int) -> int:
        result = self.db.execute(delete(Dimension).where(Dimension.field_id == field_id))
        return result.rowcount

    def delete_by_id(self, dimension_id: int) -> int:
        result = self.db.execute(delete(Dimension).where(Dimension.id == dimension_id))
        return result.rowcount


class FieldValuesRepository:
    """Read and write the cached values row owned by a field."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def get_by_field(self, field_id: int) -> FieldValues | None:
        return self.db.scalar(select(FieldValues).where(FieldValues.field_id == field_id))

    def insert(self, attrs: Mapping[str, Any]) -> int:
        row = FieldValues(**attrs)
        self.db.add(row)
        self.db.flush()
        return row.id

    def update(self, field_values_id: int, attrs: Mapping[str, Any]) -> int:
        result = self.db.execute(
            update(FieldValues).where(FieldValues.id == field_values_id).values(**attrs)
        )
        return result.rowcount
