import logging
from datetime import date

from recipebox.domain.ShoppingList import DEFAULT_CATEGORY, ShoppingListData, empty_shopping_list
from recipebox.infra.Plan_Repository import PlanRepository, week_key
from recipebox.infra.Recipe_Repository import RecipeRepository
from recipebox.infra.store import KeyValueStore
from recipebox.logic.shopping.list_builder import build_shopping_list
from recipebox.logic.shopping.mutations import (
    add_custom_item,
    clear_checked_items,
    remove_item,
    toggle_checked,
)
from recipebox.utilities.constants import SHOPPING_LIST_PREFIX
from recipebox.utilities.ids import IdFactory, generate_id

logger = logging.getLogger(__name__)


class ShoppingListRepository:
    """Per-week shopping lists: generation from the meal plan and the user's edits.

    Each edit is one load, one pure mutation, one save.
    """

    def __init__(self, store: KeyValueStore, plans: PlanRepository, recipes: RecipeRepository,
                 new_id: IdFactory = generate_id):
        self.store = store
        self.plans = plans
        self.recipes = recipes
        self.new_id = new_id

    async def get(self, d: date) -> ShoppingListData:
        '''Stored list for the week containing ``d``.

        With nothing stored yet the list is generated from the planned recipes
        and saved; a week with nothing planned gets all categories empty.
        '''
        data = await self.store.get(SHOPPING_LIST_PREFIX + week_key(d), None)
        if data:
            return data
        if await self.plans.ordered_recipe_ids(d):
            return await self.generate_for_week(d)
        return empty_shopping_list()

    async def save(self, d: date, shopping_list: ShoppingListData) -> ShoppingListData:
        await self.store.set(SHOPPING_LIST_PREFIX + week_key(d), shopping_list)
        return shopping_list

    async def generate_for_week(self, d: date) -> ShoppingListData:
        """Rebuild the week's list from the planned recipes, replacing the stored one."""
        recipe_ids = await self.plans.ordered_recipe_ids(d)
        found = await self.recipes.get_many(recipe_ids)
        shopping_list = build_shopping_list(recipe_ids, found.get, new_id=self.new_id)
        logger.info("Shopping list for week %s generated from %d recipes (%d planned)",
                    week_key(d), len(found), len(recipe_ids))
        return await self.save(d, shopping_list)

    async def toggle(self, d: date, item_id: str) -> ShoppingListData:
        return await self.save(d, toggle_checked(await self.get(d), item_id))

    async def add(self, d: date, text: str, category: str = DEFAULT_CATEGORY) -> ShoppingListData:
        return await self.save(d, add_custom_item(await self.get(d), text, category, new_id=self.new_id))

    async def remove(self, d: date, item_id: str) -> ShoppingListData:
        return await self.save(d, remove_item(await self.get(d), item_id))

    async def clear_checked(self, d: date) -> ShoppingListData:
        return await self.save(d, clear_checked_items(await self.get(d)))
