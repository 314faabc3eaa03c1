"""Field values request and response schemas."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, StringConstraints

FieldValue = bool | int | float | str
HumanReadableValue = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
ValuePair = tuple[FieldValue] | tuple[FieldValue, HumanReadableValue]


class FieldValuesUpdateRequest(BaseModel):
    """Replacement values for a field, each `[value]` or `[value, label]`."""

    values: list[ValuePair]


class FieldValuesRead(BaseModel):
    """Cached distinct values for a field, rendered as pairs."""

    field_id: int | None = None
    values: list[ValuePair]
