"""Event helper utilities.

Helpers for publishing grocery events on the global event bus.

Quick import:
    from grocery.events.event_helpers import (
        publish_list_generated, publish_recipes_missing, publish_item_added
    )
"""
from __future__ import annotations
from typing import Any, Iterable
from .Event_Bus import (
    publish_event,
    GROCERY_LIST_GENERATED, GROCERY_RECIPES_MISSING, GROCERY_ITEM_ADDED,
)

__all__ = [
    'publish_list_generated', 'publish_recipes_missing', 'publish_item_added',
    'GROCERY_LIST_GENERATED', 'GROCERY_RECIPES_MISSING', 'GROCERY_ITEM_ADDED',
]


def publish_list_generated(report: Any):
    """Publish a grocery.list_generated event for a CategorizedReport."""
    summary = report.summary
    publish_event(GROCERY_LIST_GENERATED, {
        'total_items': summary.total_items,
        'recipes_used': summary.recipes_used,
        'categories': list(summary.categories),
    })


def publish_recipes_missing(missing_ids: Iterable[str], found: int):
    """Publish a grocery.recipes_missing event (partial result)."""
    publish_event(GROCERY_RECIPES_MISSING, {
        'missing_ids': list(missing_ids),
        'found': found,
    })


def publish_item_added(item: Any):
    publish_event(GROCERY_ITEM_ADDED, {'item': item})
