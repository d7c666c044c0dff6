import os
import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

from sqlalchemy import func, select
from sqlalchemy.exc import DataError

from stockroom.config import get_settings
from stockroom.core.exceptions import ConstraintViolation
from stockroom.models import InventoryItem
from stockroom.repositories.categories import delete_category, get_category, list_categories
from stockroom.repositories.inventory_items import (
    create_item,
    delete_item,
    find_low_stock,
    get_item,
    save_item,
    update_item,
)
from tests.db_case import DatabaseTestCase

T0 = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)


class InventoryItemLifecycleTest(DatabaseTestCase):
    def setUp(self):
        super().setUp()
        self.category = self.make_category()

    def _count_items(self):
        return self.db.execute(select(func.count(InventoryItem.item_id))).scalar_one()

    def test_first_save_assigns_id_and_equal_timestamps(self):
        item = save_item(
            self.db,
            InventoryItem(
                item_name="Widget Pro",
                quantity=3,
                price=19.5,
                category_id=self.category.category_id,
            ),
        )

        self.assertIsNotNone(item.item_id)
        self.assertIsNotNone(item.created_at)
        self.assertEqual(item.created_at, item.updated_at)

    def test_caller_supplied_timestamps_are_overwritten(self):
        stale = datetime(2001, 1, 1, tzinfo=timezone.utc)
        with patch("stockroom.core.dates.utcnow", return_value=T0):
            item = self.make_item(self.category, created_at=stale, updated_at=stale)

        self.assertEqual(item.created_at, T0)
        self.assertEqual(item.updated_at, T0)

    def test_update_keeps_created_at_and_advances_updated_at(self):
        later = T0 + timedelta(minutes=5)
        with patch("stockroom.core.dates.utcnow", side_effect=[T0, later]):
            item = self.make_item(self.category)
            item.quantity = 42
            save_item(self.db, item)

        self.assertEqual(item.created_at, T0)
        self.assertEqual(item.updated_at, later)
        self.assertGreater(item.updated_at, item.created_at)

    def test_successive_updates_never_move_updated_at_backwards(self):
        item = self.make_item(self.category)
        previous = item.updated_at
        for quantity in (6, 7, 8):
            item.quantity = quantity
            update_item(self.db, item)
            self.assertGreaterEqual(item.updated_at, previous)
            previous = item.updated_at

    def test_created_at_change_is_discarded_on_update(self):
        with patch("stockroom.core.dates.utcnow", side_effect=[T0, T0 + timedelta(hours=1)]):
            item = self.make_item(self.category)
            item.created_at = datetime(1999, 12, 31, tzinfo=timezone.utc)
            update_item(self.db, item)

        self.db.expire_all()
        reloaded = get_item(self.db, item.item_id)
        self.assertEqual(reloaded.created_at.replace(tzinfo=timezone.utc), T0)

    def test_created_at_change_is_discarded_after_failed_update(self):
        times = [T0, T0 + timedelta(hours=1), T0 + timedelta(hours=2)]
        with patch("stockroom.core.dates.utcnow", side_effect=times):
            item = self.make_item(self.category)
            item.item_name = "x" * 151
            with self.assertRaises(ConstraintViolation):
                update_item(self.db, item)

            item.item_name = "Widget Mk2"
            item.created_at = datetime(1999, 1, 1, tzinfo=timezone.utc)
            update_item(self.db, item)

        self.assertEqual(item.created_at, T0)
        self.db.expire_all()
        reloaded = get_item(self.db, item.item_id)
        self.assertEqual(reloaded.item_name, "Widget Mk2")
        self.assertEqual(reloaded.created_at.replace(tzinfo=timezone.utc), T0)
        self.assertEqual(reloaded.updated_at.replace(tzinfo=timezone.utc), times[2])

    def test_create_rejects_persisted_item(self):
        item = self.make_item(self.category)
        with self.assertRaises(ValueError):
            create_item(self.db, item)

    def test_update_rejects_transient_item(self):
        item = InventoryItem(item_name="Loose", quantity=1, price=1.0, category_id=self.category.category_id)
        with self.assertRaises(ValueError):
            update_item(self.db, item)

    def test_overlong_name_is_rejected_and_not_written(self):
        with self.assertRaises(ConstraintViolation):
            self.make_item(self.category, name="x" * 151)
        self.assertEqual(self._count_items(), 0)

    def test_truncation_error_is_reported_as_constraint_violation(self):
        # Backends with real VARCHAR limits raise DataError instead of IntegrityError.
        truncated = DataError(
            "INSERT INTO inventory_items ...",
            {},
            Exception("value too long for type character varying(150)"),
        )
        with patch.object(self.db, "commit", side_effect=truncated):
            with self.assertRaises(ConstraintViolation) as ctx:
                self.make_item(self.category, name="x" * 151)

        self.assertIs(ctx.exception.__cause__, truncated)
        self.assertEqual(self._count_items(), 0)

    def test_name_at_limit_is_accepted(self):
        item = self.make_item(self.category, name="x" * 150)
        self.assertIsNotNone(item.item_id)

    def test_missing_required_fields_are_rejected(self):
        cases = {
            "item_name": dict(item_name=None, quantity=1, price=1.0),
            "quantity": dict(item_name="A", quantity=None, price=1.0),
            "price": dict(item_name="A", quantity=1, price=None),
        }
        for field_name, values in cases.items():
            with self.subTest(field=field_name):
                item = InventoryItem(category_id=self.category.category_id, **values)
                with self.assertRaises(ConstraintViolation):
                    create_item(self.db, item)
                self.assertIsNone(item.item_id)
        self.assertEqual(self._count_items(), 0)

    def test_missing_or_unknown_category_is_rejected(self):
        for category_id in (None, 9999):
            with self.subTest(category_id=category_id):
                item = InventoryItem(item_name="Orphan", quantity=1, price=1.0, category_id=category_id)
                with self.assertRaises(ConstraintViolation):
                    create_item(self.db, item)
        self.assertEqual(self._count_items(), 0)

    def test_category_is_loaded_on_access(self):
        item = self.make_item(self.category)
        self.db.expire_all()

        reloaded = get_item(self.db, item.item_id)
        self.assertEqual(reloaded.category_id, self.category.category_id)
        self.assertEqual(reloaded.category.category_name, "Tools")

    def test_get_missing_item_returns_none(self):
        self.assertIsNone(get_item(self.db, 12345))

    def test_delete_item(self):
        item = self.make_item(self.category)
        self.assertTrue(delete_item(self.db, item.item_id))
        self.assertFalse(delete_item(self.db, item.item_id))
        self.assertEqual(self._count_items(), 0)

    def test_reorder_level_defaults_from_settings(self):
        self.addCleanup(get_settings.cache_clear)
        with patch.dict(os.environ, {"DEFAULT_REORDER_LEVEL": "5"}):
            get_settings.cache_clear()
            item = self.make_item(self.category)

        self.assertEqual(item.reorder_level, 5)

    def test_find_low_stock(self):
        self.make_item(self.category, name="Low", quantity=2)
        self.make_item(self.category, name="Edge", quantity=10)
        self.make_item(self.category, name="Plenty", quantity=50)

        names = [item.item_name for item in find_low_stock(self.db)]
        self.assertEqual(names, ["Low", "Edge"])

    def test_category_with_items_cannot_be_deleted(self):
        self.make_item(self.category)
        with self.assertRaises(ConstraintViolation):
            delete_category(self.db, self.category.category_id)
        self.assertIsNotNone(get_category(self.db, self.category.category_id))

    def test_empty_category_can_be_deleted(self):
        empty = self.make_category("Empty")
        self.assertTrue(delete_category(self.db, empty.category_id))
        self.assertFalse(delete_category(self.db, empty.category_id))

    def test_list_categories_orders_by_name(self):
        self.make_category("Seeds")
        self.make_category("Chemicals")

        names = [category.category_name for category in list_categories(self.db)]
        self.assertEqual(names, ["Chemicals", "Seeds", "Tools"])

    def test_duplicate_category_name_is_rejected(self):
        with self.assertRaises(ConstraintViolation):
            self.make_category("Tools")


if __name__ == "__main__":
    unittest.main()
