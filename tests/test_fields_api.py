"""HTTP contract tests for field metadata routes."""

from __future__ import annotations

import unittest

from fastapi.testclient import TestClient
from sqlalchemy import create_engine, delete, select
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from fieldmeta.db.dependencies import get_db
from fieldmeta.main import app
from fieldmeta.models.base import Base
from fieldmeta.models.dimension import Dimension
from fieldmeta.models.field import Field
from fieldmeta.models.field_values import FieldValues


class FieldRoutesTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.engine = create_engine(
            "sqlite+pysqlite:///:memory:",
            future=True,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        cls.SessionLocal = sessionmaker(bind=cls.engine, autoflush=False, autocommit=False, future=True)
        Base.metadata.create_all(cls.engine)

        def _override_get_db():
            db = cls.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = _override_get_db
        cls.client = TestClient(app)

    @classmethod
    def tearDownClass(cls) -> None:
        app.dependency_overrides.pop(get_db, None)
        Base.metadata.drop_all(cls.engine)
        cls.engine.dispose()

    def setUp(self) -> None:
        self.db: Session = self.SessionLocal()
        self.db.execute(delete(FieldValues))
        self.db.execute(delete(Dimension))
        self.db.execute(delete(Field))
        self.db.commit()

        self.target = Field(name="id", display_name="ID", base_type="type/Integer", special_type="type/PK")
        self.db.add(self.target)
        self.db.flush()
        self.fk_field = Field(
            name="status_id",
            display_name="Status ID",
            base_type="type/Integer",
            special_type="type/FK",
            fk_target_field_id=self.target.id,
        )
        self.db.add(self.fk_field)
        self.db.commit()
        self.target_id = self.target.id
        self.fk_field_id = self.fk_field.id

    def tearDown(self) -> None:
        self.db.close()

    def test_get_field_returns_field_with_dimension(self) -> None:
        response = self.client.get(f"/fields/{self.fk_field_id}")

        self.assertEqual(response.status_code, 200)
        data = response.json()["data"]
        self.assertEqual(data["special_type"], "type/FK")
        self.assertEqual(data["fk_target_field_id"], self.target_id)
        self.assertIsNone(data["dimension"])

    def test_get_missing_field_is_404(self) -> None:
        self.assertEqual(self.client.get("/fields/424242").status_code, 404)

    def test_put_null_special_type_cascades_external_dimension(self) -> None:
        created = self.client.post(
            f"/fields/{self.fk_field_id}/dimension",
            json={"type": "external", "name": "Status", "human_readable_field_id": self.target_id},
        )
        self.assertEqual(created.status_code, 200)

        response = self.client.put(
            f"/fields/{self.fk_field_id}",
            json={"special_type": None, "fk_target_field_id": self.target_id},
        )

        self.assertEqual(response.status_code, 200)
        data = response.json()["data"]
        self.assertIsNone(data["special_type"])
        self.assertIsNone(data["fk_target_field_id"])
        self.assertIsNone(self.db.scalar(select(Dimension).where(Dimension.field_id == self.fk_field_id)))

    def test_put_invalid_fk_target_is_field_scoped_400(self) -> None:
        response = self.client.put(f"/fields/{self.fk_field_id}", json={"fk_target_field_id": 999_999})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.json()["detail"],
            {"errors": {"fk_target_field_id": "Invalid target field"}},
        )

    def test_put_rejects_blank_strings(self) -> None:
        response = self.client.put(f"/fields/{self.fk_field_id}", json={"description": "   "})

        self.assertEqual(response.status_code, 422)

    def test_dimension_upsert_and_delete(self) -> None:
        first = self.client.post(
            f"/fields/{self.fk_field_id}/dimension",
            json={"type": "internal", "name": "Status"},
        )
        second = self.client.post(
            f"/fields/{self.fk_field_id}/dimension",
            json={"type": "internal", "name": "Order status"},
        )

        self.assertEqual(first.status_code, 200)
        self.assertEqual(second.json()["data"]["id"], first.json()["data"]["id"])
        self.assertEqual(second.json()["data"]["name"], "Order status")

        self.assertEqual(self.client.delete(f"/fields/{self.fk_field_id}/dimension").status_code, 204)
        self.assertEqual(self.client.delete(f"/fields/{self.fk_field_id}/dimension").status_code, 204)

    def test_dimension_rejects_unknown_type(self) -> None:
        response = self.client.post(
            f"/fields/{self.fk_field_id}/dimension",
            json={"type": "lookup", "name": "Status"},
        )

        self.assertEqual(response.status_code, 422)

    def test_values_round_trip_as_pairs(self) -> None:
        posted = self.client.post(
            f"/fields/{self.target_id}/values",
            json={"values": [[1, "Pending"], [2, "Shipped"]]},
        )
        self.assertEqual(posted.status_code, 200)

        response = self.client.get(f"/fields/{self.target_id}/values")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"]["values"], [[1, "Pending"], [2, "Shipped"]])

    def test_mixed_values_are_400(self) -> None:
        response = self.client.post(
            f"/fields/{self.target_id}/values",
            json={"values": [[1, "Pending"], [2]]},
        )

        self.assertEqual(response.status_code, 400)
        self.assertIn("values", response.json()["detail"]["errors"])

    def test_field_literal_values_are_empty(self) -> None:
        response = self.client.get("/fields/field-literal%2Ccreated_at%2Ctype%2FDateTime/values")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"]["values"], [])


if __name__ == "__main__":
    unittest.main()
