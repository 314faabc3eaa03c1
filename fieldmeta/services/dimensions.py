"""Dimension upsert and delete services."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from fieldmeta.models.dimension import Dimension
from fieldmeta.repositories import DimensionRepository, FieldRepository
from fieldmeta.schemas.dimension import DimensionUpsertRequest, ExternalDimensionRequest
from fieldmeta.services.errors import FieldNotFoundError, FieldValidationError, FieldWriteError

logger = logging.getLogger(__name__)


def upsert_dimension(db: Session, field_id: int, payload: DimensionUpsertRequest) -> Dimension:
    """Create or replace the dimension for a field and return the stored row."""

    fields = FieldRepository(db)
    dimensions = DimensionRepository(db)
    if not fields.exists(field_id):
        raise FieldNotFoundError("Field", field_id)

    human_readable_field_id = None
    if isinstance(payload, ExternalDimensionRequest):
        human_readable_field_id = payload.human_readable_field_id
    if human_readable_field_id is not None and not fields.exists(human_readable_field_id):
        raise FieldValidationError("human_readable_field_id", "Invalid human readable field")

    attrs = {
        "type": payload.type,
        "name": payload.name,
        "human_readable_field_id": human_readable_field_id,
    }
    existing = dimensions.get_by_field(field_id)
    try:
        if existing is not None:
            if dimensions.update(existing.id, attrs) == 0:
                raise FieldWriteError(f"Update of dimension {existing.id} affected no rows")
        else:
            dimensions.insert({"field_id": field_id, **attrs})
        db.commit()
    except Exception:
        db.rollback()
        raise

    dimension = dimensions.get_by_field(field_id)
    if dimension is None:
        raise FieldWriteError(f"Dimension for field {field_id} missing after write")
    logger.info(
        "fieldmeta.dimension_upserted field_id=%s dimension_id=%s type=%s created=%s",
        field_id,
        dimension.id,
        dimension.type,
        existing is None,
    )
    return dimension


def delete_dimension(db: Session, field_id: int) -> int:
    """Remove any dimension attached to a field. Missing dimensions are not an error."""

    if not FieldRepository(db).exists(field_id):
        raise FieldNotFoundError("Field", field_id)
    deleted = DimensionRepository(db).delete_by_field(field_id)
    db.commit()
    logger.info("fieldmeta.dimension_deleted field_id=%s rows=%d", field_id, deleted)
    return deleted
