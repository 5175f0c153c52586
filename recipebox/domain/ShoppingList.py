"""Shopping list shape: grocery category -> ordered list of item dicts.

The list itself is kept as a plain dict (that is what gets persisted under
``shopping_list:<weekKey>``); ShoppingListItem is the typed view of one entry.
"""
from typing import Any, Dict, List

# Fixed aisle order; a freshly generated list always carries all of them
CATEGORIES = (
    "Produce",
    "Dairy & Eggs",
    "Meat & Seafood",
    "Pantry",
    "Frozen",
    "Bakery",
    "Other",
)
DEFAULT_CATEGORY = "Other"

ShoppingListData = Dict[str, List[Dict[str, Any]]]


def empty_shopping_list() -> ShoppingListData:
    return {category: [] for category in CATEGORIES}


class ShoppingListItem:
    def __init__(self, id: str, item: str, quantity: str = "", unit: str = "", original: str = "",
                 category: str = DEFAULT_CATEGORY, checked: bool = False):
        self.id = id
        self.item = item
        self.quantity = quantity
        self.unit = unit
        self.original = original
        self.category = category
        self.checked = checked

    def __str__(self) -> str:
        mark = "x" if self.checked else " "
        amount = " ".join(p for p in (self.quantity, self.unit) if p)
        return f"[{mark}] {self.item}" + (f" ({amount})" if amount else "")

    __repr__ = __str__

    @staticmethod
    def from_dict(data) -> "ShoppingListItem":
        d = dict(data) if isinstance(data, dict) else {}
        return ShoppingListItem(
            id=d.get("id", ""),
            item=d.get("item", ""),
            quantity=d.get("quantity", "") or "",
            unit=d.get("unit", "") or "",
            original=d.get("original", "") or "",
            category=d.get("category", DEFAULT_CATEGORY) or DEFAULT_CATEGORY,
            checked=bool(d.get("checked", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "item": self.item,
            "quantity": self.quantity,
            "unit": self.unit,
            "original": self.original,
            "category": self.category,
            "checked": self.checked,
        }
