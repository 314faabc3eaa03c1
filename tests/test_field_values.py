"""Tests for human-readable pair validation and the field values cache upsert."""

from __future__ import annotations

import unittest
from unittest import mock

from pydantic import ValidationError
from sqlalchemy import create_engine, delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from fieldmeta.models.base import Base
from fieldmeta.models.field import Field
from fieldmeta.models.field_values import FieldValues
from fieldmeta.repositories import FieldValuesRepository
from fieldmeta.schemas.field_values import FieldValuesUpdateRequest
from fieldmeta.services.errors import FieldNotFoundError, FieldValidationError, FieldWriteError
from fieldmeta.services.field_values import (
    MIXED_HUMAN_READABLE_VALUES_MESSAGE,
    field_values_to_pairs,
    get_field_values,
    upsert_field_values,
    validate_human_readable_pairs,
)


class ValidateHumanReadablePairsTests(unittest.TestCase):
    def test_all_labelled_pairs_have_labels(self) -> None:
        self.assertTrue(validate_human_readable_pairs([(1, "Pending"), (2, "Shipped")]))

    def test_all_unlabelled_pairs_have_no_labels(self) -> None:
        self.assertFalse(validate_human_readable_pairs([(1,), (2,), (3,)]))

    def test_empty_pairs_count_as_labelled(self) -> None:
        self.assertTrue(validate_human_readable_pairs([]))

    def test_mixed_pairs_are_rejected(self) -> None:
        with self.assertRaises(FieldValidationError) as ctx:
            validate_human_readable_pairs([(1, "Pending"), (2,)])

        self.assertEqual(ctx.exception.field, "values")
        self.assertEqual(ctx.exception.message, MIXED_HUMAN_READABLE_VALUES_MESSAGE)

    def test_request_schema_parses_one_and_two_element_pairs(self) -> None:
        payload = FieldValuesUpdateRequest.model_validate({"values": [[1, "Pending"], [2]]})
        self.assertEqual(payload.values, [(1, "Pending"), (2,)])

        with self.assertRaises(ValidationError):
            FieldValuesUpdateRequest.model_validate({"values": [[1, "Pending", "extra"]]})
        with self.assertRaises(ValidationError):
            FieldValuesUpdateRequest.model_validate({"values": [[1, None]]})


class FieldValuesUpsertServiceTests(unittest.TestCase):
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

    @classmethod
    def tearDownClass(cls) -> None:
        Base.metadata.drop_all(cls.engine)
        cls.engine.dispose()

    def setUp(self) -> None:
        self.db: Session = self.SessionLocal()
        self.db.execute(delete(FieldValues))
        self.db.execute(delete(Field))
        self.db.commit()

        self.field = Field(
            name="status",
            display_name="Status",
            base_type="type/Integer",
            special_type="type/Category",
        )
        self.db.add(self.field)
        self.db.commit()

    def tearDown(self) -> None:
        self.db.close()

    def _row_count(self) -> int:
        return self.db.scalar(select(func.count(FieldValues.id)).where(FieldValues.field_id == self.field.id))

    def test_labelled_pairs_round_trip_in_order(self) -> None:
        pairs = [(3, "Delivered"), (1, "Pending"), (2, "Shipped")]

        stored = upsert_field_values(self.db, self.field.id, pairs)

        self.assertEqual(stored.values, [3, 1, 2])
        self.assertEqual(stored.human_readable_values, ["Delivered", "Pending", "Shipped"])
        self.assertEqual(get_field_values(self.db, self.field.id).values, pairs)

    def test_unlabelled_pairs_store_no_labels(self) -> None:
        stored = upsert_field_values(self.db, self.field.id, [("b",), ("a",)])

        self.assertEqual(stored.values, ["b", "a"])
        self.assertIsNone(stored.human_readable_values)
        self.assertEqual(field_values_to_pairs(stored), [("b",), ("a",)])

    def test_second_upsert_replaces_both_sequences(self) -> None:
        upsert_field_values(self.db, self.field.id, [(1, "Pending"), (2, "Shipped")])

        stored = upsert_field_values(self.db, self.field.id, [(1,), (2,), (3,)])

        self.assertEqual(stored.values, [1, 2, 3])
        self.assertIsNone(stored.human_readable_values)
        self.assertEqual(self._row_count(), 1)

    def test_mixed_pairs_do_not_create_a_record(self) -> None:
        with self.assertRaises(FieldValidationError):
            upsert_field_values(self.db, self.field.id, [(1, "Pending"), (2,)])

        self.assertEqual(self._row_count(), 0)

    def test_mixed_pairs_do_not_alter_existing_record(self) -> None:
        upsert_field_values(self.db, self.field.id, [(1, "Pending")])

        with self.assertRaises(FieldValidationError):
            upsert_field_values(self.db, self.field.id, [(5,), (6, "Lost")])

        self.db.expire_all()
        stored = FieldValuesRepository(self.db).get_by_field(self.field.id)
        self.assertEqual(stored.values, [1])
        self.assertEqual(stored.human_readable_values, ["Pending"])

    def test_zero_row_update_is_an_internal_error(self) -> None:
        upsert_field_values(self.db, self.field.id, [(1,)])

        with mock.patch.object(FieldValuesRepository, "update", return_value=0):
            with self.assertRaises(FieldWriteError):
                upsert_field_values(self.db, self.field.id, [(2,)])

    def test_second_values_row_for_a_field_is_rejected_by_the_database(self) -> None:
        self.db.add(FieldValues(field_id=self.field.id, values=[1]))
        self.db.commit()

        self.db.add(FieldValues(field_id=self.field.id, values=[2]))
        with self.assertRaises(IntegrityError):
            self.db.commit()
        self.db.rollback()

        self.assertEqual(self._row_count(), 1)

    def test_labels_of_a_different_length_are_not_silently_truncated(self) -> None:
        cached = FieldValues(field_id=self.field.id, values=[1, 2, 3], human_readable_values=["Pending"])

        with self.assertRaises(ValueError):
            field_values_to_pairs(cached)

    def test_missing_field_raises_not_found(self) -> None:
        with self.assertRaises(FieldNotFoundError):
            upsert_field_values(self.db, 555_555, [(1,)])
        with self.assertRaises(FieldNotFoundError):
            get_field_values(self.db, 555_555)

    def test_uncached_field_reads_as_empty(self) -> None:
        payload = get_field_values(self.db, self.field.id)

        self.assertEqual(payload.field_id, self.field.id)
        self.assertEqual(payload.values, [])


if __name__ == "__main__":
    unittest.main()
