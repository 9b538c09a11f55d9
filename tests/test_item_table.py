# tests/test_item_table.py
import json
import os
import tempfile
from tests.fixtures import BagTestBase, TEST_ITEMS
from itembag.items.item import ItemDescriptor
from itembag.items.item_table import ItemTable, UnknownItemError

class TestItemTable(BagTestBase):

    def test_lookup(self):
        potion = self.item_table[1]
        self.assertEqual(potion.name, "Healing Potion")
        self.assertEqual(potion.icon, "potion")
        self.assertIn(2, self.item_table)
        self.assertNotIn(99, self.item_table)
        self.assertIsNone(self.item_table.get(99))
        self.assertEqual(len(self.item_table), len(TEST_ITEMS))
        self.assertEqual(sorted(self.item_table.ids()), [1, 2, 3, 4])

    def test_require_unknown_id(self):
        with self.assertRaises(UnknownItemError):
            self.item_table.require(99)
        with self.assertRaises(KeyError):
            self.item_table[99]

    def test_descriptors_are_immutable(self):
        with self.assertRaises(AttributeError):
            self.item_table[1].name = "Poison" # type: ignore[misc]

    def test_malformed_and_duplicate_entries_are_skipped(self):
        table = ItemTable.from_list([
            {"item_id": 1, "name": "First"},
            {"item_id": 1, "name": "Second"},
            {"name": "No id"},
            {"item_id": "7", "name": "String id"},
        ])
        self.assertEqual(len(table), 1)
        self.assertEqual(table[1].name, "First")
        self.assertIn("Duplicate item id 1", self.log_output)
        self.assertIn("Skipping malformed", self.log_output)

    def test_descriptor_dict_round_trip(self):
        descriptor = ItemDescriptor(5, "Coin", "coin", "Shiny.")
        self.assertEqual(ItemDescriptor.from_dict(descriptor.to_dict()), descriptor)

    def test_load_from_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "items.json")
            with open(path, "w", encoding="utf-8") as f:
                json.dump({"items": TEST_ITEMS}, f)
            table = ItemTable.load_from_file(path)
        self.assertEqual(len(table), 4)

    def test_load_missing_or_broken_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(len(ItemTable.load_from_file(os.path.join(tmp, "none.json"))), 0)

            path = os.path.join(tmp, "broken.json")
            with open(path, "w", encoding="utf-8") as f:
                f.write("[{")
            self.assertEqual(len(ItemTable.load_from_file(path)), 0)

            path = os.path.join(tmp, "number.json")
            with open(path, "w", encoding="utf-8") as f:
                f.write("42")
            self.assertEqual(len(ItemTable.load_from_file(path)), 0)

    def test_bundled_item_file_loads(self):
        from itembag.config import ITEM_TABLE_FILE
        table = ItemTable.load_from_file(ITEM_TABLE_FILE)
        self.assertGreaterEqual(len(table), 8)
