"""Recipe browsing helpers: text/category/time/author filters and the sort orders."""
import random
from typing import Dict, List, Optional, Sequence

from recipebox.domain.Recipe import Recipe
from recipebox.utilities.constants import PREP_TIME_BUCKETS

SORT_ORDERS = ("recent", "rating", "alphabetical", "random")


def average_rating(ratings: Optional[Dict[str, int]]) -> float:
    if not ratings:
        return 0
    values = list(ratings.values())
    return sum(values) / len(values)


def _matches_search(recipe: Recipe, search: str) -> bool:
    if search in recipe.name.lower():
        return True
    if any(search in line.lower() for line in recipe.ingredients):
        return True
    return bool(recipe.author_name) and search in recipe.author_name.lower()


def _in_bucket(recipe: Recipe, bucket: str) -> bool:
    bounds = PREP_TIME_BUCKETS.get(bucket)
    if bounds is None:
        return True
    low, high = bounds
    total = recipe.total_time
    return total >= low and (high is None or total < high)


def filter_recipes(recipes: Sequence[Recipe], search: str = "", categories: Optional[List[str]] = None,
                   prep_time: str = "", author_id: str = "") -> List[Recipe]:
    """Return the recipes matching every filter that is set.

    ``search`` is matched case-insensitively against the name, each ingredient
    line and the author name. ``categories`` matches recipes carrying any of
    them. ``prep_time`` is a key of PREP_TIME_BUCKETS (prep + cook minutes);
    unknown keys filter nothing.
    """
    filtered = list(recipes)
    if search:
        needle = search.lower()
        filtered = [r for r in filtered if _matches_search(r, needle)]
    if categories:
        filtered = [r for r in filtered if any(c in r.categories for c in categories)]
    if prep_time:
        filtered = [r for r in filtered if _in_bucket(r, prep_time)]
    if author_id:
        filtered = [r for r in filtered if r.author_id == author_id]
    return filtered


def sort_recipes(recipes: Sequence[Recipe], sort_by: str = "",
                 ratings_map: Optional[Dict[str, Dict[str, int]]] = None) -> List[Recipe]:
    ordered = list(recipes)
    ratings_map = ratings_map or {}
    if sort_by == "recent":
        # ISO timestamps sort lexically
        ordered.sort(key=lambda r: r.date_added or "", reverse=True)
    elif sort_by == "rating":
        ordered.sort(key=lambda r: average_rating(ratings_map.get(r.id)), reverse=True)
    elif sort_by == "alphabetical":
        ordered.sort(key=lambda r: r.name.lower())
    elif sort_by == "random":
        random.shuffle(ordered)
    return ordered


__all__ = ["average_rating", "filter_recipes", "sort_recipes", "SORT_ORDERS"]
