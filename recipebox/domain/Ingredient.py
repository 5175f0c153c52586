"""ParsedIngredient value: quantity / unit / item split out of a free-text ingredient line."""


class ParsedIngredient:
    def __init__(self, quantity: str = "", unit: str = "", item: str = "", original: str = ""):
        self.quantity = quantity
        self.unit = unit
        self.item = item
        self.original = original

    def __eq__(self, other) -> bool:
        if not isinstance(other, ParsedIngredient):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        parts = [p for p in (self.quantity, self.unit, self.item) if p]
        return " ".join(parts)

    def __repr__(self) -> str:
        return (f"ParsedIngredient(quantity={self.quantity!r}, unit={self.unit!r}, "
                f"item={self.item!r}, original={self.original!r})")

    def to_dict(self):
        return {
            "quantity": self.quantity,
            "unit": self.unit,
            "item": self.item,
            "original": self.original,
        }
