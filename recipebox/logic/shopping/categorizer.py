"""Keyword based grocery aisle lookup."""
from typing import Dict, List

from recipebox.domain.ShoppingList import DEFAULT_CATEGORY

# Scanned top to bottom, first substring hit wins. "pepper" sits in both
# Produce and Pantry; Produce is earlier so it always takes it.
CATEGORY_KEYWORDS: Dict[str, List[str]] = {
    "Produce": ["lettuce", "tomato", "onion", "garlic", "potato", "carrot", "celery", "pepper",
                "cucumber", "spinach", "broccoli", "apple", "banana", "orange", "lemon", "lime",
                "berry", "fruit", "vegetable"],
    "Dairy & Eggs": ["milk", "cream", "cheese", "butter", "yogurt", "egg", "sour cream",
                     "cottage cheese"],
    "Meat & Seafood": ["chicken", "beef", "pork", "turkey", "fish", "salmon", "tuna", "shrimp",
                       "bacon", "sausage", "ham"],
    "Pantry": ["flour", "sugar", "salt", "pepper", "oil", "vinegar", "rice", "pasta", "beans",
               "sauce", "spice", "herb", "stock", "broth", "can", "baking"],
    "Frozen": ["frozen", "ice cream"],
    "Bakery": ["bread", "bun", "roll", "tortilla", "pita"],
}


def categorize_ingredient(text: str) -> str:
    lower = (text or "").lower()
    for category, keywords in CATEGORY_KEYWORDS.items():
        for keyword in keywords:
            if keyword in lower:
                return category
    return DEFAULT_CATEGORY


__all__ = ["categorize_ingredient", "CATEGORY_KEYWORDS"]
