import unittest
from grocery.domain.Ingredient import IngredientLine
from grocery.domain.Recipe import RecipeRef
from grocery.logic.shopping.collector import collect, normalize
from grocery.logic.shopping.errors import InvalidInput


class TestCollector(unittest.TestCase):

    def setUp(self):
        self.soup = RecipeRef("r1", "Soup", 4, [
            IngredientLine(" Tomato ", "2", "", "2 tomatoes"),
            IngredientLine("Onion", "1", "cup", "1 cup onion"),
        ])
        self.salad = RecipeRef("r2", "Salad", 2, [
            IngredientLine("lettuce", "1", "head", "1 head lettuce"),
        ])

    def test_normalize(self):
        self.assertEqual(normalize(" Tomato "), "tomato")
        self.assertEqual(normalize(normalize(" Tomato ")), normalize("tomato"))

    def test_order_and_provenance(self):
        lines = collect([self.soup, self.salad], {"r2": 1.5})
        self.assertEqual([l.normalized_name for l in lines], ["tomato", "onion", "lettuce"])
        self.assertEqual(lines[0].display_name, " Tomato ")
        self.assertEqual(lines[0].recipe_id, "r1")
        self.assertEqual(lines[2].recipe_name, "Salad")
        self.assertEqual(lines[2].multiplier, 1.5)

    def test_multiplier_defaults_to_one(self):
        lines = collect([self.soup], {"other": 3})
        self.assertTrue(all(l.multiplier == 1.0 for l in lines))
        lines = collect([self.soup], {"r1": 0})
        self.assertEqual(lines[0].multiplier, 1.0)
        lines = collect((self.soup,))
        self.assertEqual(lines[0].multiplier, 1.0)

    def test_raw_amount_is_not_scaled(self):
        lines = collect([self.soup], {"r1": 3})
        self.assertEqual(lines[0].raw_amount, "2")

    def test_invalid_input(self):
        with self.assertRaises(InvalidInput):
            collect([])
        with self.assertRaises(InvalidInput):
            collect(None)
        with self.assertRaises(InvalidInput):
            collect({"r1": self.soup})
        with self.assertRaises(InvalidInput):
            collect(["not a recipe"])
