"""Categorized grocery report returned by the aggregation pipeline."""
from typing import Dict, List, Any, Optional
from grocery.domain.AggregatedItem import AggregatedItem


class Summary:
    def __init__(self, total_items: int, recipes_used: int, categories: List[str],
                 estimated_shopping_time_minutes: int):
        self.total_items = total_items
        self.recipes_used = recipes_used
        # Distinct categories, first-appearance order
        self.categories = categories
        self.estimated_shopping_time_minutes = estimated_shopping_time_minutes

    def to_dict(self):
        return {
            "totalItems": self.total_items,
            "recipesUsed": self.recipes_used,
            "categories": list(self.categories),
            "estimatedShoppingTimeMinutes": self.estimated_shopping_time_minutes,
        }


class CategorizedReport:
    def __init__(self, grocery_list: List[AggregatedItem],
                 categorized_list: Dict[str, List[AggregatedItem]],
                 shopping_tips: List[str], summary: Summary,
                 recipes: Optional[List[Dict[str, Any]]] = None):
        self.grocery_list = grocery_list
        self.categorized_list = categorized_list
        self.shopping_tips = shopping_tips
        self.summary = summary
        self.recipes = recipes or []

    def __str__(self) -> str:
        return (f"Grocery report - {self.summary.total_items} items in "
                f"{len(self.categorized_list)} categories from {self.summary.recipes_used} recipes")

    __repr__ = __str__

    def to_dict(self):
        return {
            "groceryList": [item.to_dict() for item in self.grocery_list],
            "categorizedList": {
                category: [item.to_dict() for item in items]
                for category, items in self.categorized_list.items()
            },
            "shoppingTips": list(self.shopping_tips),
            "summary": self.summary.to_dict(),
            "recipes": [dict(r) for r in self.recipes],
        }
