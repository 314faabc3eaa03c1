"""Seed a small orders/statuses schema for exploring field metadata.

Usage (from repository root):
    python scripts/seed_demo.py
    # or
    python -m scripts.seed_demo
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from sqlalchemy import delete

# Make `fieldmeta` imports work when the script is run by path.
PROJECT_DIR = Path(__file__).resolve().parents[1]
if str(PROJECT_DIR) not in sys.path:
    sys.path.insert(0, str(PROJECT_DIR))

from fieldmeta.db.base import Base
from fieldmeta.db.session import SessionLocal, engine
from fieldmeta.models.dimension import Dimension
from fieldmeta.models.field import Field
from fieldmeta.models.field_values import FieldValues
from fieldmeta.schemas.dimension import ExternalDimensionRequest, InternalDimensionRequest
from fieldmeta.services.changes import FieldChanges
from fieldmeta.services.dimensions import upsert_dimension
from fieldmeta.services.field_values import upsert_field_values
from fieldmeta.services.fields import update_field

DEMO_STATUS_PAIRS: list[tuple[object, ...]] = [
    (1, "Pending"),
    (2, "Shipped"),
    (3, "Delivered"),
    (4, "Cancelled"),
]


def reset_demo(db) -> None:
    """Remove all field metadata rows."""

    db.execute(delete(FieldValues))
    db.execute(delete(Dimension))
    db.execute(delete(Field))
    db.commit()


def seed_fields(db) -> dict[str, Field]:
    """Insert demo fields and return them by name."""

    rows = {
        "statuses.id": Field(name="id", display_name="ID", base_type="type/Integer", special_type="type/PK"),
        "statuses.label": Field(name="label", display_name="Label", base_type="type/Text", special_type="type/Name"),
        "orders.status": Field(name="status", display_name="Status", base_type="type/Integer"),
        "orders.status_id": Field(name="status_id", display_name="Status ID", base_type="type/Integer"),
    }
    db.add_all(rows.values())
    db.commit()
    return rows


def parse_args() -> argparse.Namespace:
    """Parse script CLI arguments."""

    parser = argparse.ArgumentParser(description="Seed demo fields, dimensions and cached values.")
    parser.add_argument(
        "--no-reset",
        action="store_true",
        help="Do not delete existing field metadata before seeding.",
    )
    return parser.parse_args()


def main() -> None:
    """Seed demo data and print a short summary."""

    args = parse_args()
    Base.metadata.create_all(engine)

    with SessionLocal() as db:
        if not args.no_reset:
            reset_demo(db)
        rows = seed_fields(db)

        status = update_field(db, rows["orders.status"].id, FieldChanges(special_type="type/Category"))
        upsert_field_values(db, status.id, DEMO_STATUS_PAIRS)
        upsert_dimension(db, status.id, InternalDimensionRequest(type="internal", name="Status"))

        status_fk = update_field(
            db,
            rows["orders.status_id"].id,
            FieldChanges(special_type="type/FK", fk_target_field_id=rows["statuses.id"].id),
        )
        upsert_dimension(
            db,
            status_fk.id,
            ExternalDimensionRequest(
                type="external",
                name="Status",
                human_readable_field_id=rows["statuses.label"].id,
            ),
        )
        field_ids = {name: row.id for name, row in rows.items()}

    print("Seed complete")
    for name, field_id in field_ids.items():
        print(f"{name}={field_id}")
    print()
    print("Inspect:")
    print(f"  GET /fields/{field_ids['orders.status']}/values")
    print(f"  GET /fields/{field_ids['orders.status_id']}")


if __name__ == "__main__":
    main()
