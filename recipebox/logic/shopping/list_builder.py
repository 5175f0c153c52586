"""Shopping list builder.

Provides build_shopping_list(recipe_ids, recipe_lookup, new_id=generate_id).
"""
import re
from typing import Any, Callable, Dict, Iterable, Optional

from recipebox.domain.Recipe import Recipe
from recipebox.domain.ShoppingList import CATEGORIES, ShoppingListData, ShoppingListItem
from recipebox.logic.shopping.categorizer import categorize_ingredient
from recipebox.logic.shopping.parser import parse_ingredient
from recipebox.utilities.ids import IdFactory, generate_id

_LEADING_NUMBER = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _parse_float(value: str) -> float:
    """Longest leading decimal number in ``value``, 0 when there is none.

    "1/2" reads as 1 and "1 1/2" as 1: fractions are not evaluated.
    """
    m = _LEADING_NUMBER.match(value or "")
    if not m:
        return 0.0
    try:
        return float(m.group(0))
    except ValueError:
        return 0.0


def _format_number(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


def combine_quantities(existing: str, extra: str) -> str:
    return _format_number(_parse_float(existing) + _parse_float(extra))


def build_shopping_list(recipe_ids: Iterable[str],
                        recipe_lookup: Callable[[str], Optional[Recipe]],
                        new_id: IdFactory = generate_id) -> ShoppingListData:
    """Merge the ingredient lines of the given recipes into a categorized list.

    Args:
        recipe_ids: Recipe ids in the order they should be read.
        recipe_lookup: Returns the Recipe for an id, or None (the id is skipped).
        new_id: Id factory, called with the item text as prefix.

    Returns:
        Dict with every category of CATEGORIES as key (in that order), each
        holding item dicts in first-seen order.

    Lines whose parsed item text is identical are merged. Quantities are added
    when the new line has a quantity and both units are equal; otherwise the
    new line is appended to ``original`` and the numbers stay as they were.
    """
    merged: Dict[str, Dict[str, Any]] = {}

    for recipe_id in recipe_ids:
        recipe = recipe_lookup(recipe_id)
        if recipe is None:
            continue
        for line in recipe.ingredients:
            parsed = parse_ingredient(line)
            existing = merged.get(parsed.item)
            if existing is None:
                merged[parsed.item] = {
                    "quantity": parsed.quantity,
                    "unit": parsed.unit,
                    "original": parsed.original,
                    "category": categorize_ingredient(parsed.item),
                }
            elif parsed.quantity and existing["unit"] == parsed.unit:
                existing["quantity"] = combine_quantities(existing["quantity"], parsed.quantity)
            else:
                existing["original"] += f", {parsed.original}"

    shopping_list: ShoppingListData = {category: [] for category in CATEGORIES}
    for item, data in merged.items():
        entry = ShoppingListItem(
            id=new_id(item),
            item=item,
            quantity=data["quantity"],
            unit=data["unit"],
            original=data["original"],
            category=data["category"],
            checked=False,
        )
        shopping_list[entry.category].append(entry.to_dict())
    return shopping_list


__all__ = ["build_shopping_list", "combine_quantities"]
