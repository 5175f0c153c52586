"""Heuristic ingredient line parser.

"2 cups flour"   -> quantity "2", unit "cups", item "flour"
"3 large eggs"   -> quantity "3", unit "",     item "large eggs"
"salt to taste"  -> quantity "",  unit "",     item "salt to taste"

Best effort only: the quantity is whatever run of digits, slashes, dots and
spaces starts the line, and the unit must come from a small fixed vocabulary
and be followed by whitespace.
"""
import re

from recipebox.domain.Ingredient import ParsedIngredient

UNITS = (
    "cup", "cups", "tbsp", "tsp", "tablespoon", "teaspoon",
    "oz", "ounce", "lb", "pound", "g", "gram", "kg", "ml", "l", "liter",
)

_QUANTITY_RE = re.compile(r"^[0-9/.\s]+")
_UNIT_RE = re.compile(r"^(" + "|".join(UNITS) + r")\s+", re.IGNORECASE)


def parse_ingredient(line: str) -> ParsedIngredient:
    """Split ``line`` into quantity, unit and item. Never raises."""
    original = line if isinstance(line, str) else ""
    text = original.strip()

    quantity_match = _QUANTITY_RE.match(text)
    if not quantity_match:
        return ParsedIngredient(quantity="", unit="", item=text, original=original)

    quantity = quantity_match.group(0).strip()
    rest = text[quantity_match.end():].strip()

    unit_match = _UNIT_RE.match(rest)
    if unit_match:
        return ParsedIngredient(quantity=quantity, unit=unit_match.group(1),
                                item=rest[unit_match.end():].strip(), original=original)
    return ParsedIngredient(quantity=quantity, unit="", item=rest, original=original)


__all__ = ["parse_ingredient", "UNITS"]
