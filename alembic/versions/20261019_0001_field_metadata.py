"""field metadata tables

Revision ID: 20261019_0001
Revises:
Create Date: 2026-10-19 00:00:01
"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "20261019_0001"
down_revision: str | None = None
branch_labels: Sequence[str] | None = None
depends_on: Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "fields",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("base_type", sa.String(length=64), nullable=False, server_default="type/*"),
        sa.Column("display_name", sa.String(length=255), nullable=False),
        sa.Column("special_type", sa.String(length=64), nullable=True),
        sa.Column("fk_target_field_id", sa.Integer(), nullable=True),
        sa.Column("visibility_type", sa.String(length=32), nullable=False, server_default="normal"),
        sa.Column("caveats", sa.Text(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("points_of_interest", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(["fk_target_field_id"], ["fields.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_fields_special_type", "fields", ["special_type"], unique=False)
    op.create_index("ix_fields_fk_target_field_id", "fields", ["fk_target_field_id"], unique=False)

    op.create_table(
        "dimensions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("field_id", sa.Integer(), nullable=False),
        sa.Column("type", sa.String(length=16), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("human_readable_field_id", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(["field_id"], ["fields.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["human_readable_field_id"], ["fields.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_dimensions_field_id", "dimensions", ["field_id"], unique=True)

    op.create_table(
        "field_values",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("field_id", sa.Integer(), nullable=False),
        sa.Column("values", sa.JSON(), nullable=False),
        sa.Column("human_readable_values", sa.JSON(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(["field_id"], ["fields.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_field_values_field_id", "field_values", ["field_id"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_field_values_field_id", table_name="field_values")
    op.drop_table("field_values")
    op.drop_index("ix_dimensions_field_id", table_name="dimensions")
    op.drop_table("dimensions")
    op.drop_index("ix_fields_fk_target_field_id", table_name="fields")
    op.drop_index("ix_fields_special_type", table_name="fields")
    op.drop_table("fields")
