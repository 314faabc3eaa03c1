"""Field read and classification update services."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import Session

from fieldmeta.config import get_settings
from fieldmeta.models.dimension import EXTERNAL_DIMENSION
from fieldmeta.models.field import Field
from fieldmeta.repositories import DimensionRepository, FieldRepository
from fieldmeta.schema.semantic_types import (
    ROOT_TYPE,
    SemanticTypeHierarchy,
    get_type_hierarchy,
    normalize_semantic_type,
)
from fieldmeta.schemas.dimension import DimensionRead
from fieldmeta.schemas.field import FieldRead, FieldWithDimensionRead
from fieldmeta.services.changes import FieldChanges
from fieldmeta.services.errors import FieldNotFoundError, FieldValidationError, FieldWriteError

logger = logging.getLogger(__name__)

# Written whenever present in the request, null included.
_PRESENT_KEYS = (
    "caveats",
    "description",
    "points_of_interest",
    "special_type",
    "visibility_type",
)
# Written only when the request value is not null.
_NON_NULL_KEYS = ("display_name",)


def get_field(db: Session, field_id: int) -> Field:
    """Return one field or raise `FieldNotFoundError`."""

    field = FieldRepository(db).get(field_id)
    if field is None:
        raise FieldNotFoundError("Field", field_id)
    return field


def get_field_detail(db: Session, field_id: int) -> FieldWithDimensionRead:
    """Return a field together with its dimension."""

    field = get_field(db, field_id)
    dimension = DimensionRepository(db).get_by_field(field_id)
    return FieldWithDimensionRead(
        **FieldRead.model_validate(field).model_dump(),
        dimension=DimensionRead.model_validate(dimension) if dimension is not None else None,
    )


def removed_fk_special_type(
    old_special_type: str | None,
    new_special_type: str | None,
    hierarchy: SemanticTypeHierarchy | None = None,
) -> bool:
    """True when a field moves from a foreign-key type to anything that is not one."""

    hierarchy = hierarchy or get_type_hierarchy()
    return (
        old_special_type != new_special_type
        and hierarchy.is_foreign_key(old_special_type)
        and not hierarchy.is_foreign_key(new_special_type)
    )


def update_field(db: Session, field_id: int, changes: FieldChanges) -> Field:
    """Update field classification attributes.

    Moving a field away from a foreign-key special type clears its
    `fk_target_field_id` and deletes an external dimension in the same
    transaction as the field update.
    """

    fields = FieldRepository(db)
    dimensions = DimensionRepository(db)
    hierarchy = get_type_hierarchy()

    field = fields.get(field_id)
    if field is None:
        raise FieldNotFoundError("Field", field_id)

    old_special_type = normalize_semantic_type(field.special_type)
    if changes.is_set("special_type"):
        new_special_type = normalize_semantic_type(changes.special_type)
    else:
        new_special_type = old_special_type
    removed_fk = removed_fk_special_type(old_special_type, new_special_type, hierarchy)

    if removed_fk:
        fk_target_field_id = None
    elif changes.is_set("fk_target_field_id"):
        fk_target_field_id = changes.fk_target_field_id
    else:
        fk_target_field_id = field.fk_target_field_id

    _validate_changes(fields, hierarchy, changes, new_special_type, fk_target_field_id)

    attrs = _build_update_attrs(changes, new_special_type, fk_target_field_id)
    deleted_dimension_id: int | None = None
    try:
        if removed_fk:
            deleted_dimension_id = _clear_dimension_on_fk_change(dimensions, field_id)
        if fields.update(field_id, attrs) == 0:
            raise FieldWriteError(f"Update of field {field_id} affected no rows")
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("fieldmeta.field_update_failed field_id=%s removed_fk=%s", field_id, removed_fk)
        raise

    db.refresh(field)
    logger.info(
        "fieldmeta.field_updated field_id=%s keys=%s removed_fk=%s deleted_dimension_id=%s",
        field_id,
        ",".join(sorted(attrs)),
        removed_fk,
        deleted_dimension_id,
    )
    return field


def _validate_changes(
    fields: FieldRepository,
    hierarchy: SemanticTypeHierarchy,
    changes: FieldChanges,
    new_special_type: str | None,
    fk_target_field_id: int | None,
) -> None:
    if changes.is_set("special_type") and new_special_type is not None:
        if not hierarchy.isa(new_special_type, ROOT_TYPE):
            raise FieldValidationError("special_type", "value must be a valid field type.")

    if changes.is_set("visibility_type"):
        allowed = get_settings().field_visibility_types
        if changes.visibility_type not in allowed:
            raise FieldValidationError(
                "visibility_type",
                f"value must be one of: {', '.join(allowed)}.",
            )

    # TODO: also require the target field to live in the same database once tables are modeled.
    if fk_target_field_id is not None and not fields.exists(fk_target_field_id):
        raise FieldValidationError("fk_target_field_id", "Invalid target field")


def _build_update_attrs(
    changes: FieldChanges,
    new_special_type: str | None,
    fk_target_field_id: int | None,
) -> dict[str, Any]:
    present = changes.present()
    attrs = {key: present[key] for key in _PRESENT_KEYS if key in present}
    if "special_type" in attrs:
        attrs["special_type"] = new_special_type
    attrs["fk_target_field_id"] = fk_target_field_id
    for key in _NON_NULL_KEYS:
        if present.get(key) is not None:
            attrs[key] = present[key]
    return attrs


def _clear_dimension_on_fk_change(dimensions: DimensionRepository, field_id: int) -> int | None:
    dimension = dimensions.get_by_field(field_id)
    if dimension is None or dimension.type != EXTERNAL_DIMENSION:
        return None
    dimensions.delete_by_id(dimension.id)
    return dimension.id
