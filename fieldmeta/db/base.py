"""SQLAlchemy metadata registry import for Alembic."""

from fieldmeta.models import Dimension, Field, FieldValues
from fieldmeta.models.base import Base

__all__ = ["Base", "Field", "Dimension", "FieldValues"]
