import unittest
from datetime import date
from recipebox.domain.ShoppingList import CATEGORIES
from recipebox.infra.Plan_Repository import PlanRepository
from recipebox.infra.Recipe_Repository import RecipeRepository
from recipebox.infra.Shopping_Repository import ShoppingListRepository
from recipebox.infra.store import InMemoryStore
from recipebox.utilities.ids import CounterIdFactory


class TestShoppingListRepository(unittest.IsolatedAsyncioTestCase):

    async def asyncSetUp(self):
        self.store = InMemoryStore()
        ids = CounterIdFactory()
        self.recipes = RecipeRepository(self.store, new_id=ids)
        self.plans = PlanRepository(self.store)
        self.repo = ShoppingListRepository(self.store, self.plans, self.recipes, new_id=ids)
        self.wednesday = date(2024, 6, 12)

        cake = await self.recipes.create({"name": "Cake", "ingredients": ["1 cup flour", "2 large eggs"]})
        bread = await self.recipes.create({"name": "Bread", "ingredients": ["1 cup flour", "1 tsp salt"]})
        await self.plans.assign(date(2024, 6, 10), "breakfast", cake.id)
        await self.plans.assign(date(2024, 6, 11), "dinner", bread.id)
        await self.plans.assign(date(2024, 6, 12), "lunch", "deleted_recipe")

    async def test_first_load_generates_from_plan(self):
        shopping_list = await self.repo.get(self.wednesday)
        flour = shopping_list["Pantry"][0]
        self.assertEqual((flour["item"], flour["quantity"], flour["unit"]), ("flour", "2", "cup"))
        self.assertEqual(await self.store.get("shopping_list:2024-06-10"), shopping_list)

        added = await self.repo.add(self.wednesday, "napkins")
        self.assertEqual(added["Pantry"], shopping_list["Pantry"])
        self.assertEqual([i["item"] for i in added["Other"]], ["napkins"])

    async def test_get_with_nothing_planned(self):
        shopping_list = await self.repo.get(date(2024, 7, 3))
        self.assertEqual(list(shopping_list), list(CATEGORIES))
        self.assertTrue(all(items == [] for items in shopping_list.values()))
        self.assertIsNone(await self.store.get("shopping_list:2024-07-01"))

    async def test_generate_for_week_persists(self):
        shopping_list = await self.repo.generate_for_week(self.wednesday)
        flour = shopping_list["Pantry"][0]
        self.assertEqual((flour["item"], flour["quantity"], flour["unit"]), ("flour", "2", "cup"))
        self.assertEqual([i["item"] for i in shopping_list["Dairy & Eggs"]], ["large eggs"])
        self.assertEqual(await self.store.get("shopping_list:2024-06-10"), shopping_list)

    async def test_generate_with_empty_plan(self):
        shopping_list = await self.repo.generate_for_week(date(2024, 7, 1))
        self.assertEqual(list(shopping_list), list(CATEGORIES))
        self.assertTrue(all(items == [] for items in shopping_list.values()))

    async def test_edits_are_persisted(self):
        generated = await self.repo.generate_for_week(self.wednesday)
        flour_id = generated["Pantry"][0]["id"]

        toggled = await self.repo.toggle(self.wednesday, flour_id)
        self.assertTrue(toggled["Pantry"][0]["checked"])

        added = await self.repo.add(self.wednesday, "3 lb apples", "Produce")
        apple = added["Produce"][0]
        self.assertEqual((apple["quantity"], apple["unit"], apple["item"]), ("3", "lb", "apples"))

        cleared = await self.repo.clear_checked(self.wednesday)
        self.assertNotIn(flour_id, [i["id"] for i in cleared["Pantry"]])

        removed = await self.repo.remove(self.wednesday, apple["id"])
        self.assertEqual(removed["Produce"], [])
        self.assertEqual(await self.repo.get(self.wednesday), removed)

    async def test_regeneration_replaces_edits(self):
        await self.repo.generate_for_week(self.wednesday)
        await self.repo.add(self.wednesday, "napkins")
        regenerated = await self.repo.generate_for_week(self.wednesday)
        self.assertEqual(regenerated["Other"], [])


if __name__ == '__main__':
    unittest.main()
