"""Field values cache services."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from fieldmeta.models.field_values import FieldValues
from fieldmeta.repositories import FieldRepository, FieldValuesRepository
from fieldmeta.schemas.field_values import FieldValuesRead
from fieldmeta.services.errors import FieldNotFoundError, FieldValidationError, FieldWriteError

logger = logging.getLogger(__name__)

MIXED_HUMAN_READABLE_VALUES_MESSAGE = (
    "If remapped values are specified, they must be specified for all field values"
)


def validate_human_readable_pairs(value_pairs: Sequence[Sequence[object]]) -> bool:
    """Check that labels are given for every value or for none.

    Returns whether the pairs carry human-readable labels.
    """

    has_labels = all(len(pair) > 1 for pair in value_pairs)
    if not has_labels and not all(len(pair) < 2 for pair in value_pairs):
        raise FieldValidationError("values", MIXED_HUMAN_READABLE_VALUES_MESSAGE)
    return has_labels


def field_values_to_pairs(field_values: FieldValues) -> list[tuple[object, ...]]:
    """Render cached values as `(value,)` or `(value, label)` tuples."""

    if field_values.human_readable_values:
        return list(zip(field_values.values, field_values.human_readable_values, strict=True))
    return [(value,) for value in field_values.values]


def get_field_values(db: Session, field_id: int) -> FieldValuesRead:
    """Return cached values for a field, or an empty list when none are cached yet."""

    if not FieldRepository(db).exists(field_id):
        raise FieldNotFoundError("Field", field_id)
    field_values = FieldValuesRepository(db).get_by_field(field_id)
    if field_values is None:
        return FieldValuesRead(field_id=field_id, values=[])
    return FieldValuesRead(field_id=field_id, values=field_values_to_pairs(field_values))


def upsert_field_values(
    db: Session,
    field_id: int,
    value_pairs: Sequence[Sequence[object]],
) -> FieldValues:
    """Replace a field's cached values and labels, creating the record if needed."""

    if not FieldRepository(db).exists(field_id):
        raise FieldNotFoundError("Field", field_id)
    has_labels = validate_human_readable_pairs(value_pairs)

    repository = FieldValuesRepository(db)
    attrs = {
        "values": [pair[0] for pair in value_pairs],
        "human_readable_values": [pair[1] for pair in value_pairs] if has_labels else None,
    }
    existing = repository.get_by_field(field_id)
    try:
        if existing is not None:
            if repository.update(existing.id, attrs) == 0:
                raise FieldWriteError(f"Update of field values {existing.id} affected no rows")
        else:
            repository.insert({"field_id": field_id, **attrs})
        db.commit()
    except Exception:
        db.rollback()
        raise

    stored = repository.get_by_field(field_id)
    if stored is None:
        raise FieldWriteError(f"Field values for field {field_id} missing after write")
    logger.info(
        "fieldmeta.field_values_upserted field_id=%s count=%d has_labels=%s created=%s",
        field_id,
        len(attrs["values"]),
        has_labels,
        existing is None,
    )
    return stored
