"""Flatten recipes into ingredient lines carrying their recipe and multiplier."""
from __future__ import annotations
from typing import Dict, List, NamedTuple, Optional, Sequence
from grocery.domain.Recipe import RecipeRef
from grocery.logic.shopping.errors import InvalidInput
from grocery.utilities.constants import DEFAULT_MULTIPLIER


class CollectedLine(NamedTuple):
    normalized_name: str
    display_name: str
    raw_amount: str
    unit: str
    original: str
    recipe_id: str
    recipe_name: str
    multiplier: float


def normalize(name: str) -> str:
    return (name or '').strip().lower()


def multiplier_for(recipe_id: str, multipliers: Optional[Dict[str, float]]) -> float:
    """Serving multiplier for a recipe; missing, None or 0 fall back to 1."""
    value = (multipliers or {}).get(str(recipe_id))
    return float(value) if value else DEFAULT_MULTIPLIER


def collect(recipes: Sequence[RecipeRef], multipliers: Optional[Dict[str, float]] = None) -> List[CollectedLine]:
    """Emit one CollectedLine per ingredient, recipes and ingredients in input order.

    Raises:
        InvalidInput: recipes is not a list/tuple, or is empty.
    """
    if not isinstance(recipes, (list, tuple)):
        raise InvalidInput(f"recipes must be a list of recipes, got {type(recipes).__name__}")
    if not recipes:
        raise InvalidInput("recipes cannot be empty")

    lines: List[CollectedLine] = []
    for recipe in recipes:
        if not isinstance(recipe, RecipeRef):
            raise InvalidInput(f"expected RecipeRef, got {type(recipe).__name__}")
        multiplier = multiplier_for(recipe.id, multipliers)
        for ing in recipe.ingredients:
            lines.append(CollectedLine(
                normalized_name=normalize(ing.name),
                display_name=ing.name,
                raw_amount=ing.amount,
                unit=ing.unit,
                original=ing.original,
                recipe_id=recipe.id,
                recipe_name=recipe.name,
                multiplier=multiplier,
            ))
    return lines


__all__ = ['CollectedLine', 'collect', 'normalize', 'multiplier_for']
