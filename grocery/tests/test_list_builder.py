import unittest
from grocery.domain.Ingredient import IngredientLine
from grocery.domain.Recipe import RecipeRef
from grocery.logic.shopping.categorizer import build_taxonomy
from grocery.logic.shopping.errors import InvalidInput
from grocery.logic.shopping.list_builder import generate_grocery_list
from grocery.utilities.constants import MEAT_TIP


class TestGenerateGroceryList(unittest.TestCase):

    def setUp(self):
        self.omelette = RecipeRef("a", "Omelette", 1, [
            IngredientLine("egg", "2", "", "2 eggs"),
            IngredientLine("Cheddar", "50", "g", "50 g cheddar"),
            IngredientLine("salt", "to taste", "", "salt to taste"),
        ])
        self.quiche = RecipeRef("b", "Quiche", 4, [
            IngredientLine("Egg ", "1", "", "1 egg"),
            IngredientLine("bacon", "100", "g", "100 g bacon"),
            IngredientLine("cheddar", "1", "cup", "1 cup cheddar"),
        ])

    def test_egg_scenario(self):
        report = generate_grocery_list([self.omelette, self.quiche], {"a": 1, "b": 2})
        egg = next(i for i in report.grocery_list if i.name == "egg")
        self.assertEqual(egg.amount.format(), "4")
        self.assertEqual(len(egg.recipes), 2)
        self.assertEqual(egg.category, "Dairy & Eggs")

    def test_report(self):
        report = generate_grocery_list([self.omelette, self.quiche], {"b": 2})
        names = [i.name for i in report.grocery_list]
        self.assertEqual(names, ["Cheddar", "egg", "bacon", "salt"])
        cheddar = report.grocery_list[0]
        self.assertEqual(cheddar.amount.format(), "50")
        self.assertEqual(cheddar.alternative_amounts[0].amount, "2")
        self.assertEqual(report.summary.total_items, 4)
        self.assertEqual(report.summary.recipes_used, 2)
        self.assertEqual(report.summary.categories,
                         ["Dairy & Eggs", "Meat & Seafood", "Pantry & Dry Goods"])
        self.assertIn(MEAT_TIP, report.shopping_tips)
        self.assertEqual(report.to_dict()["groceryList"][3]["amount"], "to taste")

    def test_deterministic(self):
        first = generate_grocery_list([self.omelette, self.quiche], {"b": 2}).to_dict()
        second = generate_grocery_list([self.omelette, self.quiche], {"b": 2}).to_dict()
        self.assertEqual(first, second)

    def test_custom_taxonomy(self):
        taxonomy = build_taxonomy([("Breakfast", ["egg", "bacon"])])
        report = generate_grocery_list([self.quiche], taxonomy=taxonomy)
        self.assertEqual(list(report.categorized_list), ["Breakfast", "Other"])

    def test_empty_recipes(self):
        with self.assertRaises(InvalidInput):
            generate_grocery_list([])
