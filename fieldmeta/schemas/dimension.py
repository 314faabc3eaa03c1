"""Dimension request and response schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Discriminator, Field, StringConstraints


class InternalDimensionRequest(BaseModel):
    """Remap values using the field's own cached human-readable labels."""

    type: Literal["internal"]
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class ExternalDimensionRequest(BaseModel):
    """Remap values by joining to another field."""

    type: Literal["external"]
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    human_readable_field_id: int | None = Field(default=None, ge=1)


DimensionUpsertRequest = Annotated[
    InternalDimensionRequest | ExternalDimensionRequest,
    Discriminator("type"),
]


class DimensionRead(BaseModel):
    """Serialized dimension."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    field_id: int
    type: Literal["internal", "external"]
    name: str
    human_readable_field_id: int | None
    created_at: datetime
    updated_at: datetime
