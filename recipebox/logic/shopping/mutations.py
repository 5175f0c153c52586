"""Edits applied to a stored shopping list.

Every function returns a new top-level dict and leaves its argument alone;
category lists are rebuilt only where something changed. Unknown ids are a
no-op rather than an error.
"""
from recipebox.domain.ShoppingList import DEFAULT_CATEGORY, ShoppingListData, ShoppingListItem
from recipebox.logic.shopping.parser import parse_ingredient
from recipebox.utilities.ids import IdFactory, generate_id


def toggle_checked(shopping_list: ShoppingListData, item_id: str) -> ShoppingListData:
    '''Flips "checked" on the first item with this id.'''
    updated = dict(shopping_list)
    for category, items in updated.items():
        for index, item in enumerate(items):
            if item.get("id") == item_id:
                flipped = dict(item, checked=not item.get("checked", False))
                updated[category] = items[:index] + [flipped] + items[index + 1:]
                return updated
    return updated


def add_custom_item(shopping_list: ShoppingListData, text: str, category: str = DEFAULT_CATEGORY,
                    new_id: IdFactory = generate_id) -> ShoppingListData:
    '''Parses ``text`` and appends it to ``category`` unchecked. The category is not guessed.'''
    parsed = parse_ingredient(text)
    entry = ShoppingListItem(
        id=new_id("custom"),
        item=parsed.item,
        quantity=parsed.quantity,
        unit=parsed.unit,
        original=parsed.original,
        category=category,
        checked=False,
    )
    updated = dict(shopping_list)
    updated[category] = list(updated.get(category, [])) + [entry.to_dict()]
    return updated


def remove_item(shopping_list: ShoppingListData, item_id: str) -> ShoppingListData:
    updated = dict(shopping_list)
    for category, items in updated.items():
        if any(item.get("id") == item_id for item in items):
            updated[category] = [item for item in items if item.get("id") != item_id]
    return updated


def clear_checked_items(shopping_list: ShoppingListData) -> ShoppingListData:
    updated = dict(shopping_list)
    for category, items in updated.items():
        if any(item.get("checked") for item in items):
            updated[category] = [item for item in items if not item.get("checked")]
    return updated


__all__ = ["toggle_checked", "add_custom_item", "remove_item", "clear_checked_items"]
