"""Web-facing observers for grocery events.

This module subscribes to the GLOBAL_EVENT_BUS for every grocery event and
stores a lightweight in-memory ring buffer of recent events that the web
layer serves at /api/events.

Each event gets an auto-increment integer id (cursor) so clients can ask
only for newer events (since=<last_id_seen>). The buffer is per process and
capped at MAX_EVENTS.
"""
from __future__ import annotations
from typing import List, Dict, Any
from threading import Lock
from datetime import datetime, timezone

from .Event_Bus import (
    GLOBAL_EVENT_BUS, GROCERY_LIST_GENERATED, GROCERY_RECIPES_MISSING, GROCERY_ITEM_ADDED
)

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
MAX_EVENTS = 300  # keep a few hundred recent events
_started = False


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    with _lock:
        evt = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat()
        }
        if isinstance(payload, dict):
            item = payload.get('item')
            if item is not None and hasattr(item, 'name'):
                evt['name'] = item.name
                evt['category'] = getattr(item, 'category', '')
            for k in ('total_items', 'recipes_used', 'categories', 'missing_ids', 'found'):
                if k in payload:
                    evt[k] = payload[k]
        _events.append(evt)
        _next_id += 1
        # Trim buffer
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]


def start():
    """Idempotent start: subscribe observers once."""
    global _started
    if _started:
        return
    for name in (GROCERY_LIST_GENERATED, GROCERY_RECIPES_MISSING, GROCERY_ITEM_ADDED):
        GLOBAL_EVENT_BUS.subscribe(name, _record)
    _started = True


def get_events(since: int | None = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive).

    If since is None, returns the whole buffer.
    Response includes next_cursor (largest id) so client can poll with since=next_cursor.
    """
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


__all__ = ['start', 'get_events', 'MAX_EVENTS']
