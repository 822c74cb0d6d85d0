"""Grocery list builder.

Runs the aggregation pipeline: collect -> merge -> categorize -> report.
Provides generate_grocery_list(recipes, multipliers=None, *, taxonomy=None).
"""
import logging
from typing import Dict, List, Optional
from grocery.domain.Recipe import RecipeRef
from grocery.domain.Report import CategorizedReport
from grocery.logic.shopping.categorizer import Categorizer, DEFAULT_TAXONOMY, Taxonomy
from grocery.logic.shopping.collector import collect
from grocery.logic.shopping.merger import merge
from grocery.logic.shopping.reporter import build_report

logger = logging.getLogger(__name__)


def generate_grocery_list(recipes: List[RecipeRef], multipliers: Optional[Dict[str, float]] = None, *,
                          taxonomy: Optional[Taxonomy] = None) -> CategorizedReport:
    """Aggregate the ingredients of several recipes into one categorized grocery list.

    Args:
        recipes: Recipes to shop for, already resolved and owned by the requester.
        multipliers: Recipe id -> serving multiplier (default 1 for absent ids).
        taxonomy: Category keyword table; DEFAULT_TAXONOMY when omitted.

    Returns:
        CategorizedReport with the sorted list, per-category grouping, tips and summary.

    Raises:
        InvalidInput: recipes is empty or not a list.
    """
    lines = collect(recipes, multipliers)
    logger.debug("Collected %s ingredient lines from %s recipes", len(lines), len(recipes))

    items = merge(lines)
    logger.debug("Merged into %s distinct ingredients", len(items))

    categorizer = Categorizer(taxonomy if taxonomy is not None else DEFAULT_TAXONOMY)
    for key, item in items.items():
        item.category = categorizer.categorize(key)

    report = build_report(items.values(), recipes, multipliers)
    logger.info("Grocery list generated: %s items, %s categories, %s recipes",
                report.summary.total_items, len(report.summary.categories), report.summary.recipes_used)
    return report


__all__ = ['generate_grocery_list']
