"""Cached distinct values for a field."""

from sqlalchemy import JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from fieldmeta.models.base import Base, CreatedAtMixin, IdMixin, UpdatedAtMixin


class FieldValues(Base, IdMixin, CreatedAtMixin, UpdatedAtMixin):
    """Snapshot of a field's distinct values with optional remapped labels."""

    __tablename__ = "field_values"

    field_id: Mapped[int] = mapped_column(
        ForeignKey("fields.id", ondelete="CASCADE"),
        unique=True,
        index=True,
        nullable=False,
    )
    values: Mapped[list[object]] = mapped_column(JSON, default=list, nullable=False)
    human_readable_values: Mapped[list[str] | None] = mapped_column(JSON(none_as_null=True), nullable=True)
