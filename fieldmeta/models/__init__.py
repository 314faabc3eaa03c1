"""ORM models package exports."""

from fieldmeta.models.dimension import Dimension
from fieldmeta.models.field import Field
from fieldmeta.models.field_values import FieldValues

__all__ = [
    "Field",
    "Dimension",
    "FieldValues",
]
