from typing import Final, Optional

DATE_KEY_FORMAT: Final[str] = "%Y-%m-%d"
MEAL_SLOTS: Final[tuple[str, ...]] = ("breakfast", "lunch", "dinner")
USER_COLORS: Final[tuple[str, ...]] = (
    "#FF6B6B", "#4ECDC4", "#45B7D1", "#FFA07A",
    "#98D8C8", "#F7DC6F", "#BB8FCE", "#85C1E2",
)
MIN_RATING: Final[int] = 1
MAX_RATING: Final[int] = 5

# Total (prep + cook) minutes, upper bound exclusive; None = open ended
PREP_TIME_BUCKETS: Final[dict[str, tuple[int, Optional[int]]]] = {
    "quick": (0, 15),
    "medium": (15, 30),
    "long": (30, 60),
    "verylong": (60, None),
}

# Store keys
RECIPE_INDEX_KEY: Final[str] = "recipe_index"
CURRENT_USER_KEY: Final[str] = "current_user"
RECIPE_PREFIX: Final[str] = "recipes:"
RATINGS_PREFIX: Final[str] = "ratings:"
COMMENTS_PREFIX: Final[str] = "comments:"
PHOTOS_PREFIX: Final[str] = "photos:"
USER_PREFIX: Final[str] = "users:"
MEAL_PLAN_PREFIX: Final[str] = "meal_plan:"
SHOPPING_LIST_PREFIX: Final[str] = "shopping_list:"
