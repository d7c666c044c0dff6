import unittest

from stockroom.schemas.category import CategoryRead
from stockroom.schemas.item import InventoryItemCreate, InventoryItemRead, InventoryItemUpdate
from tests.db_case import DatabaseTestCase


class ItemSchemaTest(unittest.TestCase):
    def test_create_defaults_reorder_level(self):
        payload = InventoryItemCreate(item_name="Rake", quantity=4, price=11.0, category_id=1)
        self.assertEqual(payload.reorder_level, 10)
        self.assertIsNone(payload.location)

    def test_update_only_dumps_fields_that_were_set(self):
        payload = InventoryItemUpdate(quantity=3, description=None)
        self.assertEqual(payload.model_dump(exclude_unset=True), {"quantity": 3, "description": None})


class ReadSchemaTest(DatabaseTestCase):
    def test_read_models_load_from_orm_rows(self):
        category = self.make_category("Glassware")
        item = self.make_item(category, name="Beaker", quantity=4, price=2.5)

        item_read = InventoryItemRead.model_validate(item)
        category_read = CategoryRead.model_validate(category)

        self.assertEqual(item_read.item_id, item.item_id)
        self.assertEqual(item_read.total_value, 10.0)
        self.assertEqual(item_read.created_at, item_read.updated_at)
        self.assertEqual(category_read.category_name, "Glassware")


if __name__ == "__main__":
    unittest.main()
