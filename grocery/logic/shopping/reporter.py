"""Sort, group and summarize merged grocery items, and derive shopping tips."""
from __future__ import annotations
from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence
from grocery.domain.AggregatedItem import AggregatedItem
from grocery.domain.Recipe import RecipeRef
from grocery.domain.Report import CategorizedReport, Summary
from grocery.logic.shopping.collector import multiplier_for
from grocery.utilities.constants import (
    ITEMS_PER_BATCH, MINUTES_PER_BATCH,
    PRODUCE_TIP_THRESHOLD, MEAT_TIP_THRESHOLD, DAIRY_TIP_THRESHOLD,
    PRODUCE_TIP, MEAT_TIP, DAIRY_TIP, GENERAL_TIPS,
)

__all__ = ["sort_items", "group_by_category", "estimate_shopping_time", "shopping_tips", "build_report"]


def sort_items(items: Iterable[AggregatedItem]) -> List[AggregatedItem]:
    """Order by category, then name (plain code-point comparison)."""
    return sorted(items, key=lambda item: (item.category, item.name))


def group_by_category(grocery_list: Sequence[AggregatedItem]) -> Dict[str, List[AggregatedItem]]:
    grouped: Dict[str, List[AggregatedItem]] = {}
    for item in grocery_list:
        grouped.setdefault(item.category, []).append(item)
    return grouped


def estimate_shopping_time(total_items: int) -> int:
    """Minutes: MINUTES_PER_BATCH for each started batch of ITEMS_PER_BATCH items."""
    batches = -(-total_items // ITEMS_PER_BATCH)
    return batches * MINUTES_PER_BATCH


def shopping_tips(grocery_list: Sequence[AggregatedItem]) -> List[str]:
    counts = Counter(item.category for item in grocery_list)
    tips: List[str] = []
    if counts['Produce'] > PRODUCE_TIP_THRESHOLD:
        tips.append(PRODUCE_TIP)
    if counts['Meat & Seafood'] > MEAT_TIP_THRESHOLD:
        tips.append(MEAT_TIP)
    if counts['Dairy & Eggs'] > DAIRY_TIP_THRESHOLD:
        tips.append(DAIRY_TIP)
    tips.extend(GENERAL_TIPS)
    return tips


def _recipes_used(grocery_list: Sequence[AggregatedItem]) -> int:
    used = set()
    for item in grocery_list:
        used.update(item.recipe_ids())
    return len(used)


def build_report(items: Iterable[AggregatedItem], recipes: Sequence[RecipeRef] = (),
                 multipliers: Optional[Dict[str, float]] = None) -> CategorizedReport:
    """Build the CategorizedReport from categorized items.

    Args:
        items: merged items, each already carrying its category.
        recipes: the input recipes, echoed back with their effective multiplier.
        multipliers: recipe id -> serving multiplier used for the echo.
    """
    grocery_list = sort_items(items)
    categorized = group_by_category(grocery_list)
    summary = Summary(
        total_items=len(grocery_list),
        recipes_used=_recipes_used(grocery_list),
        categories=list(categorized.keys()),
        estimated_shopping_time_minutes=estimate_shopping_time(len(grocery_list)),
    )
    recipe_echo = [{
        'id': r.id,
        'name': r.name,
        'servings': r.servings,
        'multiplier': multiplier_for(r.id, multipliers),
    } for r in recipes]
    return CategorizedReport(
        grocery_list=grocery_list,
        categorized_list=categorized,
        shopping_tips=shopping_tips(grocery_list),
        summary=summary,
        recipes=recipe_echo,
    )
