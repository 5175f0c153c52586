import unittest
from datetime import date, datetime, timedelta
from recipebox.infra.Plan_Repository import PlanRepository, week_key, week_start
from recipebox.infra.store import InMemoryStore


class TestWeekStart(unittest.TestCase):

    def test_every_day_maps_to_monday(self):
        monday = date(2024, 6, 10)
        for offset in range(7):
            self.assertEqual(week_start(monday + timedelta(days=offset)), monday)

    def test_sunday_belongs_to_previous_week(self):
        self.assertEqual(week_start(date(2024, 6, 16)), date(2024, 6, 10))
        self.assertEqual(week_start(date(2024, 6, 17)), date(2024, 6, 17))

    def test_across_month_and_year(self):
        self.assertEqual(week_start(date(2025, 1, 1)), date(2024, 12, 30))
        self.assertEqual(week_key(date(2025, 1, 5)), "2024-12-30")

    def test_datetime_input(self):
        self.assertEqual(week_start(datetime(2024, 6, 12, 18, 30)), date(2024, 6, 10))


class TestPlanRepository(unittest.IsolatedAsyncioTestCase):

    async def asyncSetUp(self):
        self.store = InMemoryStore()
        self.repo = PlanRepository(self.store)
        self.monday = date(2024, 6, 10)

    async def test_fresh_week_is_empty_and_not_persisted(self):
        plan = await self.repo.get_or_create(self.monday)
        self.assertEqual(plan.week_of, "2024-06-10")
        self.assertEqual(list(plan.days), [f"2024-06-{d}" for d in range(10, 17)])
        for meals in plan.days.values():
            self.assertEqual(meals, {"breakfast": None, "lunch": None, "dinner": None})
        self.assertEqual(await self.store.list("meal_plan:"), [])
        self.assertEqual(await self.repo.week_recipe_ids(self.monday), set())

    async def test_assign_persists_week(self):
        await self.repo.assign(date(2024, 6, 12), "dinner", "recipe_1")
        stored = await self.store.get("meal_plan:2024-06-10")
        self.assertEqual(stored["weekOf"], "2024-06-10")
        self.assertEqual(stored["days"]["2024-06-12"]["dinner"], "recipe_1")
        self.assertEqual(len(stored["days"]), 7)

    async def test_week_recipe_ids_union(self):
        await self.repo.assign(date(2024, 6, 10), "breakfast", "pancakes")
        await self.repo.assign(date(2024, 6, 11), "dinner", "stir_fry")
        await self.repo.assign(date(2024, 6, 16), "lunch", "pancakes")
        await self.repo.assign(date(2024, 6, 17), "lunch", "next_week")
        self.assertEqual(await self.repo.week_recipe_ids(self.monday), {"pancakes", "stir_fry"})
        self.assertEqual(await self.repo.ordered_recipe_ids(self.monday), ["pancakes", "stir_fry"])

    async def test_clear_slot(self):
        await self.repo.assign(date(2024, 6, 13), "lunch", "salad")
        await self.repo.clear_slot(date(2024, 6, 13), "lunch")
        plan = await self.repo.get_or_create(self.monday)
        self.assertIsNone(plan.days["2024-06-13"]["lunch"])
        self.assertEqual(await self.repo.week_recipe_ids(self.monday), set())

    async def test_invalid_slot(self):
        with self.assertRaises(ValueError):
            await self.repo.assign(date(2024, 6, 13), "brunch", "salad")

    async def test_get_or_create_normalizes_to_monday(self):
        await self.repo.assign(date(2024, 6, 14), "dinner", "r")
        plan = await self.repo.get_or_create(date(2024, 6, 15))
        self.assertEqual(plan.days["2024-06-14"]["dinner"], "r")


if __name__ == '__main__':
    unittest.main()
