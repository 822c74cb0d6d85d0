"""Merged grocery entry: one per normalized ingredient name, with per-recipe provenance."""
from typing import List, Optional
from grocery.domain.Amount import Amount


class ProvenanceRecord:
    '''A recipe contribution that was summed into the running amount.'''

    def __init__(self, recipe_id: str, recipe_name: str, original_amount: str, multiplier: float):
        self.recipe_id = recipe_id
        self.recipe_name = recipe_name
        self.original_amount = original_amount
        self.multiplier = multiplier

    def to_dict(self):
        return {
            "recipeId": self.recipe_id,
            "recipeName": self.recipe_name,
            "originalAmount": self.original_amount,
            "multiplier": self.multiplier,
        }

    def __repr__(self) -> str:
        return f"ProvenanceRecord({self.recipe_id!r}, {self.original_amount!r} x{self.multiplier})"


class AlternativeAmount:
    '''A recipe contribution that could not be combined (unit mismatch or non-numeric amount).'''

    def __init__(self, amount: str, unit: str, original: str, recipe_id: str,
                 recipe_name: str, multiplier: float):
        self.amount = amount
        self.unit = unit
        self.original = original
        self.recipe_id = recipe_id
        self.recipe_name = recipe_name
        self.multiplier = multiplier

    def to_dict(self):
        return {
            "amount": self.amount,
            "unit": self.unit,
            "original": self.original,
            "recipeId": self.recipe_id,
            "recipeName": self.recipe_name,
            "multiplier": self.multiplier,
        }

    def __repr__(self) -> str:
        return f"AlternativeAmount({self.amount!r} {self.unit!r} from {self.recipe_id!r})"


class AggregatedItem:
    def __init__(self, name: str, amount: Amount, unit: str, original: str,
                 category: str = "", recipes: Optional[List[ProvenanceRecord]] = None,
                 alternative_amounts: Optional[List[AlternativeAmount]] = None):
        self.name = name
        self.amount = amount
        self.unit = unit
        self.original = original
        self.category = category
        self.recipes = recipes[:] if recipes else []
        self.alternative_amounts = alternative_amounts[:] if alternative_amounts else []

    def recipe_ids(self):
        '''Ids of every recipe that contributed, summed or not.'''
        ids = [r.recipe_id for r in self.recipes]
        ids.extend(a.recipe_id for a in self.alternative_amounts)
        return ids

    def __str__(self) -> str:
        quantity = f"{self.amount.format()} {self.unit}".strip()
        return f"{self.name} - {quantity} [{self.category}]"

    __repr__ = __str__

    def to_dict(self):
        return {
            "name": self.name,
            "amount": self.amount.format(),
            "unit": self.unit,
            "original": self.original,
            "category": self.category,
            "recipes": [r.to_dict() for r in self.recipes],
            "alternativeAmounts": [a.to_dict() for a in self.alternative_amounts],
        }
