"""Field ORM model."""

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from fieldmeta.models.base import Base, CreatedAtMixin, IdMixin, UpdatedAtMixin


class Field(Base, IdMixin, CreatedAtMixin, UpdatedAtMixin):
    """Descriptor for one column of a source table."""

    __tablename__ = "fields"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    base_type: Mapped[str] = mapped_column(String(64), default="type/*", nullable=False)
    display_name: Mapped[str] = mapped_column(String(255), nullable=False)
    special_type: Mapped[str | None] = mapped_column(String(64), index=True, nullable=True)
    fk_target_field_id: Mapped[int | None] = mapped_column(
        ForeignKey("fields.id", ondelete="SET NULL"),
        index=True,
        nullable=True,
    )
    visibility_type: Mapped[str] = mapped_column(String(32), default="normal", nullable=False)
    caveats: Mapped[str | None] = mapped_column(Text, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    points_of_interest: Mapped[str | None] = mapped_column(Text, nullable=True)
