"""Recipe reference consumed by the grocery aggregation: id, name, servings, ingredient lines."""
from grocery.domain.Ingredient import IngredientLine
from typing import List, Optional


class RecipeRef:
    def __init__(self, id: str = "", name: str = "", servings: int = 0,
                 ingredients: Optional[List[IngredientLine]] = None):
        self.id = id
        self.name = name
        self.servings = servings
        self.ingredients = ingredients[:] if ingredients else []

    def __str__(self) -> str:
        return f"{self.name} ({self.id}) - {self.servings} servings - {len(self.ingredients)} ingredients"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        # Stored documents may carry a Mongo-style "_id"
        recipe_id = d.get('id', d.get('_id', ''))
        return RecipeRef(
            id=str(recipe_id),
            name=d.get('name', ''),
            servings=d.get('servings', 0) or 0,
            ingredients=[IngredientLine.from_dict(ing) for ing in d.get('ingredients', [])],
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "servings": self.servings,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
        }
