"""GroceryList aggregate: the user's standing list of items to buy, independent of generated reports."""
from datetime import datetime
from typing import List, Optional
from uuid import uuid4
from grocery.logic.shopping.categorizer import categorize
from grocery.utilities.constants import DEFAULT_ITEM_AMOUNT

_EDITABLE = ("name", "amount", "unit", "category", "checked")


class GroceryListItem:
    def __init__(self, id: str = "", name: str = "", amount: str = DEFAULT_ITEM_AMOUNT, unit: str = "",
                 category: str = "", checked: bool = False, added_at: Optional[datetime] = None):
        self.id = id or uuid4().hex
        self.name = name
        self.amount = amount
        self.unit = unit
        self.category = category
        self.checked = checked
        self.added_at = added_at or datetime.now()

    def __str__(self) -> str:
        mark = "x" if self.checked else " "
        return f"[{mark}] {self.name} - {self.amount} {self.unit}".rstrip()

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        added_at = d.get("addedAt")
        if added_at and not isinstance(added_at, datetime):
            try:
                added_at = datetime.fromisoformat(added_at)
            except (TypeError, ValueError):
                added_at = None
        return GroceryListItem(
            id=str(d.get("id") or d.get("_id") or ""),
            name=d.get("name", ""),
            amount=str(d.get("amount") or DEFAULT_ITEM_AMOUNT),
            unit=d.get("unit") or "",
            category=d.get("category") or "",
            checked=bool(d.get("checked", False)),
            added_at=added_at,
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "amount": self.amount,
            "unit": self.unit,
            "category": self.category,
            "checked": self.checked,
            "addedAt": self.added_at.isoformat(),
        }


class GroceryList:
    def __init__(self, items: Optional[List[GroceryListItem]] = None):
        self.items: List[GroceryListItem] = items[:] if items else []

    def get_items(self):
        return self.items

    def find(self, item_id: str) -> GroceryListItem:
        for item in self.items:
            if item.id == item_id:
                return item
        raise KeyError(item_id)

    def add_item(self, name: str, amount: Optional[str] = None, unit: Optional[str] = None,
                 category: Optional[str] = None, checked: bool = False) -> GroceryListItem:
        '''
        Adds a standalone item. Category defaults to the keyword taxonomy's guess.
        '''
        if not isinstance(name, str) or not name.strip():
            raise ValueError("Item name is required")
        item = GroceryListItem(
            name=name.strip(),
            amount=amount or DEFAULT_ITEM_AMOUNT,
            unit=unit or "",
            category=category or categorize(name),
            checked=checked,
        )
        self.items.append(item)
        return item

    def update_item(self, item_id: str, **fields) -> GroceryListItem:
        '''
        Updates only the provided fields (None means "leave as is").
        '''
        item = self.find(item_id)
        for key in _EDITABLE:
            value = fields.get(key)
            if value is None:
                continue
            if key == "name":
                if not value.strip():
                    raise ValueError("Item name cannot be blank")
                value = value.strip()
            setattr(item, key, value)
        return item

    def delete_item(self, item_id: str) -> GroceryListItem:
        item = self.find(item_id)
        self.items.remove(item)
        return item

    def clear_checked(self) -> int:
        '''Removes checked items; returns how many were removed.'''
        before = len(self.items)
        self.items = [item for item in self.items if not item.checked]
        return before - len(self.items)

    def clear(self) -> int:
        count = len(self.items)
        self.items = []
        return count

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Grocery List Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    @staticmethod
    def from_dict(data):
        return GroceryList([GroceryListItem.from_dict(entry) for entry in data or []])

    def to_dict(self):
        return [item.to_dict() for item in self.items]
