import unittest, json, tempfile, shutil
from pathlib import Path
from unittest.mock import patch
from grocery.infra import paths
from grocery.infra.Recipe_Repository import reading_from_recipes, find_recipes
from grocery.infra.GroceryList_Repository import load_grocery_list, save_grocery_list


class TestRepositories(unittest.TestCase):

    def setUp(self):
        self.tmp = Path(tempfile.mkdtemp())
        self.addCleanup(shutil.rmtree, self.tmp, True)
        self.recipes_file = self.tmp / 'recipes.json'
        self.list_file = self.tmp / 'nested' / 'grocery_list.json'
        for name, value in (('RECIPES_FILE', self.recipes_file), ('GROCERY_LIST_FILE', self.list_file)):
            patcher = patch.object(paths, name, value)
            patcher.start()
            self.addCleanup(patcher.stop)

    def test_missing_and_invalid_recipe_file(self):
        self.assertEqual(reading_from_recipes(), [])
        self.recipes_file.write_text("{not json", encoding='utf-8')
        self.assertEqual(reading_from_recipes(), [])

    def test_recipe_file_holding_an_object(self):
        self.recipes_file.write_text(json.dumps({"a": {"id": "a", "name": "A"}}), encoding='utf-8')
        self.assertEqual(reading_from_recipes(), [])
        self.assertEqual(find_recipes(["a"]), ([], ["a"]))

    def test_find_recipes(self):
        self.recipes_file.write_text(json.dumps([
            {"id": "a", "name": "A", "ingredients": []},
            {"id": "b", "name": "B", "ingredients": [{"name": "egg", "amount": 2}]},
        ]), encoding='utf-8')
        found, missing = find_recipes(["b", "x", "a", "b"])
        self.assertEqual([r.id for r in found], ["b", "a"])
        self.assertEqual(missing, ["x"])
        self.assertEqual(found[0].ingredients[0].amount, "2")

    def test_grocery_list_round_trip(self):
        self.assertEqual(len(load_grocery_list()), 0)
        grocery_list = load_grocery_list()
        grocery_list.add_item("coffee", "1", "bag")
        save_grocery_list(grocery_list)
        self.assertEqual([i.name for i in load_grocery_list().get_items()], ["coffee"])
        self.assertEqual(list(self.list_file.parent.glob(".grocery_list_*")), [])

    def test_grocery_list_bad_file(self):
        self.list_file.parent.mkdir(parents=True)
        self.list_file.write_text('{"a": 1}', encoding='utf-8')
        self.assertEqual(len(load_grocery_list()), 0)
