import logging
from typing import Any, Callable, Dict, List, Optional

from recipebox.domain.Recipe import Recipe
from recipebox.infra.store import KeyValueStore
from recipebox.utilities.constants import (
    COMMENTS_PREFIX,
    MAX_RATING,
    MIN_RATING,
    PHOTOS_PREFIX,
    RATINGS_PREFIX,
    RECIPE_INDEX_KEY,
    RECIPE_PREFIX,
)
from recipebox.utilities.dates import now_iso
from recipebox.utilities.ids import IdFactory, generate_id

logger = logging.getLogger(__name__)


class RecipeNotFoundError(LookupError):
    def __init__(self, recipe_id: str):
        super().__init__("Recipe not found")
        self.recipe_id = recipe_id


class RecipeRepository:
    """Recipes plus the per-recipe ratings, comments and photos stored next to them."""

    def __init__(self, store: KeyValueStore, new_id: IdFactory = generate_id,
                 now: Callable[[], str] = now_iso):
        self.store = store
        self.new_id = new_id
        self.now = now

    # -------------------- Recipes --------------------
    async def list_all(self) -> List[Recipe]:
        """Recipes in index order. Ids whose record is gone are skipped."""
        index = await self.store.get(RECIPE_INDEX_KEY, [])
        recipes = []
        for recipe_id in index:
            recipe = await self.get(recipe_id)
            if recipe is not None:
                recipes.append(recipe)
        return recipes

    async def get(self, recipe_id: str) -> Optional[Recipe]:
        data = await self.store.get(RECIPE_PREFIX + recipe_id, None)
        return Recipe.from_dict(data) if data else None

    async def get_many(self, recipe_ids) -> Dict[str, Recipe]:
        found = {}
        for recipe_id in recipe_ids:
            recipe = await self.get(recipe_id)
            if recipe is not None:
                found[recipe_id] = recipe
        return found

    async def create(self, recipe_data: Dict[str, Any]) -> Recipe:
        recipe = Recipe.from_dict(recipe_data)
        recipe.id = self.new_id("recipe")
        recipe.date_added = self.now()
        recipe.last_made = None
        await self.store.set(RECIPE_PREFIX + recipe.id, recipe.to_dict())

        index = await self.store.get(RECIPE_INDEX_KEY, [])
        index.append(recipe.id)
        await self.store.set(RECIPE_INDEX_KEY, index)
        logger.info("Recipe created: %s (%s)", recipe.name, recipe.id)
        return recipe

    async def update(self, recipe_id: str, updates: Dict[str, Any]) -> Recipe:
        '''Merge ``updates`` (stored key names) into the recipe. The id cannot change.'''
        existing = await self.store.get(RECIPE_PREFIX + recipe_id, None)
        if not existing:
            raise RecipeNotFoundError(recipe_id)
        merged = {**existing, **updates, "id": recipe_id}
        recipe = Recipe.from_dict(merged)
        await self.store.set(RECIPE_PREFIX + recipe_id, recipe.to_dict())
        logger.info("Recipe updated: %s", recipe_id)
        return recipe

    async def mark_made(self, recipe_id: str) -> Recipe:
        return await self.update(recipe_id, {"lastMade": self.now()})

    async def delete(self, recipe_id: str) -> None:
        """Delete a recipe with its ratings, comments and photos.

        Meal plans keep pointing at the id; lookups skip it later.
        """
        for prefix in (RECIPE_PREFIX, RATINGS_PREFIX, COMMENTS_PREFIX, PHOTOS_PREFIX):
            await self.store.delete(prefix + recipe_id)
        index = await self.store.get(RECIPE_INDEX_KEY, [])
        await self.store.set(RECIPE_INDEX_KEY, [rid for rid in index if rid != recipe_id])
        logger.info("Recipe deleted: %s", recipe_id)

    # -------------------- Ratings --------------------
    async def get_ratings(self, recipe_id: str) -> Dict[str, int]:
        return await self.store.get(RATINGS_PREFIX + recipe_id, {})

    async def get_ratings_map(self, recipe_ids) -> Dict[str, Dict[str, int]]:
        return {rid: await self.get_ratings(rid) for rid in recipe_ids}

    async def set_rating(self, recipe_id: str, user_id: str, rating: int) -> Dict[str, int]:
        if not MIN_RATING <= int(rating) <= MAX_RATING:
            raise ValueError(f"Rating must be between {MIN_RATING} and {MAX_RATING}")
        ratings = await self.get_ratings(recipe_id)
        ratings[user_id] = int(rating)
        await self.store.set(RATINGS_PREFIX + recipe_id, ratings)
        return ratings

    # -------------------- Comments --------------------
    async def get_comments(self, recipe_id: str) -> List[Dict[str, Any]]:
        return await self.store.get(COMMENTS_PREFIX + recipe_id, [])

    async def add_comment(self, recipe_id: str, user_id: str, user_name: str, text: str) -> Dict[str, Any]:
        comments = await self.get_comments(recipe_id)
        comment = {
            "id": self.new_id("comment"),
            "userId": user_id,
            "userName": user_name,
            "text": text,
            "date": self.now(),
        }
        comments.append(comment)
        await self.store.set(COMMENTS_PREFIX + recipe_id, comments)
        return comment

    # -------------------- Photos --------------------
    async def get_photos(self, recipe_id: str) -> List[Dict[str, Any]]:
        return await self.store.get(PHOTOS_PREFIX + recipe_id, [])

    async def add_photo(self, recipe_id: str, user_id: str, user_name: str, url: str) -> Dict[str, Any]:
        photos = await self.get_photos(recipe_id)
        photo = {
            "id": self.new_id("photo"),
            "userId": user_id,
            "userName": user_name,
            "url": url,
            "date": self.now(),
        }
        photos.append(photo)
        await self.store.set(PHOTOS_PREFIX + recipe_id, photos)
        return photo
