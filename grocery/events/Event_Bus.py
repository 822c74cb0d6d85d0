"""Simple Event Bus / Observer implementation for grocery list notifications.

Event names used so far:
  grocery.list_generated -> payload {"total_items": int, "recipes_used": int, "categories": [str]}
  grocery.recipes_missing -> payload {"missing_ids": [str], "found": int}
  grocery.item_added -> payload {"item": GroceryListItem}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
GROCERY_LIST_GENERATED = "grocery.list_generated"
GROCERY_RECIPES_MISSING = "grocery.recipes_missing"
GROCERY_ITEM_ADDED = "grocery.item_added"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception("Error delivering %s to %r", event_name, cb)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


def publish_event(event_name: str, payload: Any = None) -> None:
	"""Publish an event on the global bus."""
	GLOBAL_EVENT_BUS.publish(event_name, payload)


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'publish_event',
	'GROCERY_LIST_GENERATED', 'GROCERY_RECIPES_MISSING', 'GROCERY_ITEM_ADDED'
]
