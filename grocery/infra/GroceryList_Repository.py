"""Grocery list repository helpers (file persistence)."""

import json
import logging
import os
import shutil
import tempfile
from threading import Lock
from grocery.domain.GroceryList import GroceryList
from grocery.infra import paths

logger = logging.getLogger(__name__)

# Serializes read-modify-write cycles within the process
LOCK = Lock()


def load_grocery_list() -> GroceryList:
    """Load the standing grocery list; a missing or unreadable file is an empty list."""
    if not os.path.exists(paths.GROCERY_LIST_FILE):
        return GroceryList()
    try:
        with open(paths.GROCERY_LIST_FILE, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in grocery list file: %s", e)
        return GroceryList()
    if not isinstance(data, list):
        logger.warning("Grocery list file does not hold a list; ignoring it")
        return GroceryList()
    return GroceryList.from_dict(data)


def save_grocery_list(grocery_list: GroceryList) -> None:
    """Write atomically: dump to a temp file in the same directory, then move into place."""
    target = str(paths.GROCERY_LIST_FILE)
    os.makedirs(os.path.dirname(target), exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=os.path.dirname(target), prefix=".grocery_list_", suffix=".json")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            json.dump(grocery_list.to_dict(), tmp, indent=2, ensure_ascii=False)
        shutil.move(tmp_path, target)
    finally:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
