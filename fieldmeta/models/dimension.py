"""Dimension ORM model."""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from fieldmeta.models.base import Base, CreatedAtMixin, IdMixin, UpdatedAtMixin

INTERNAL_DIMENSION = "internal"
EXTERNAL_DIMENSION = "external"


class Dimension(Base, IdMixin, CreatedAtMixin, UpdatedAtMixin):
    """Display remapping rule attached to exactly one field."""

    __tablename__ = "dimensions"

    field_id: Mapped[int] = mapped_column(
        ForeignKey("fields.id", ondelete="CASCADE"),
        unique=True,
        index=True,
        nullable=False,
    )
    type: Mapped[str] = mapped_column(String(16), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    human_readable_field_id: Mapped[int | None] = mapped_column(
        ForeignKey("fields.id", ondelete="SET NULL"),
        nullable=True,
    )
