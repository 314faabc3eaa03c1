"""Field request and response schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from fieldmeta.schemas.dimension import DimensionRead
from fieldmeta.services.changes import FieldChanges

NonBlankString = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class FieldUpdateRequest(BaseModel):
    """Allowed mutable fields for a field row.

    Keys left out of the request body stay untouched; keys sent as null are
    cleared (except `display_name`, where null is ignored).
    """

    caveats: NonBlankString | None = None
    description: NonBlankString | None = None
    display_name: NonBlankString | None = None
    fk_target_field_id: int | None = Field(default=None, ge=1)
    points_of_interest: NonBlankString | None = None
    special_type: NonBlankString | None = None
    visibility_type: NonBlankString | None = None

    def to_changes(self) -> FieldChanges:
        """Convert to three-state changes, keeping absent keys unset."""

        return FieldChanges(**{name: getattr(self, name) for name in self.model_fields_set})


class FieldRead(BaseModel):
    """Serialized field."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    base_type: str
    display_name: str
    special_type: str | None
    fk_target_field_id: int | None
    visibility_type: str
    caveats: str | None
    description: str | None
    points_of_interest: str | None
    created_at: datetime
    updated_at: datetime


class FieldWithDimensionRead(FieldRead):
    """Field plus its display remapping, if any."""

    dimension: DimensionRead | None = None
