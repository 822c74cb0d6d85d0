import unittest
from grocery.domain.GroceryList import GroceryList, GroceryListItem


class TestGroceryList(unittest.TestCase):

    def setUp(self):
        self.grocery_list = GroceryList()

    def test_add_item_defaults(self):
        item = self.grocery_list.add_item("  Chicken thighs ")
        self.assertEqual(item.name, "Chicken thighs")
        self.assertEqual(item.amount, "1")
        self.assertEqual(item.unit, "")
        self.assertEqual(item.category, "Meat & Seafood")
        self.assertFalse(item.checked)
        self.assertIn(item, self.grocery_list.get_items())

    def test_add_item_explicit_category(self):
        item = self.grocery_list.add_item("lemons", "3", "pcs", category="Fruit")
        self.assertEqual(item.category, "Fruit")
        self.assertEqual(item.unit, "pcs")

    def test_add_item_requires_name(self):
        with self.assertRaises(ValueError):
            self.grocery_list.add_item("   ")

    def test_update_only_given_fields(self):
        item = self.grocery_list.add_item("milk", "1", "l")
        self.grocery_list.update_item(item.id, checked=True, amount=None, name=" oat milk ")
        self.assertTrue(item.checked)
        self.assertEqual(item.amount, "1")
        self.assertEqual(item.name, "oat milk")

    def test_update_and_delete_unknown(self):
        with self.assertRaises(KeyError):
            self.grocery_list.update_item("missing", checked=True)
        with self.assertRaises(KeyError):
            self.grocery_list.delete_item("missing")

    def test_delete(self):
        keep = self.grocery_list.add_item("rice")
        drop = self.grocery_list.add_item("beans")
        self.grocery_list.delete_item(drop.id)
        self.assertEqual(self.grocery_list.get_items(), [keep])

    def test_clear_checked_and_clear(self):
        self.grocery_list.add_item("rice", checked=True)
        self.grocery_list.add_item("beans", checked=True)
        self.grocery_list.add_item("corn")
        self.assertEqual(self.grocery_list.clear_checked(), 2)
        self.assertEqual(len(self.grocery_list), 1)
        self.assertEqual(self.grocery_list.clear(), 1)
        self.assertEqual(len(self.grocery_list), 0)

    def test_dict_round_trip(self):
        item = self.grocery_list.add_item("butter", "250", "g")
        restored = GroceryList.from_dict(self.grocery_list.to_dict())
        copy = restored.find(item.id)
        self.assertEqual(copy.to_dict(), item.to_dict())

    def test_from_dict_tolerates_legacy_ids(self):
        item = GroceryListItem.from_dict({"_id": "1700000000000", "name": "tea", "addedAt": "bad date"})
        self.assertEqual(item.id, "1700000000000")
        self.assertEqual(item.amount, "1")
