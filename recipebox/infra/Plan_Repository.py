import logging
from datetime import date, datetime, timedelta
from typing import List, Optional, Set

from recipebox.domain.Plan import MealPlan, date_key
from recipebox.infra.store import KeyValueStore
from recipebox.utilities.constants import MEAL_PLAN_PREFIX, MEAL_SLOTS

logger = logging.getLogger(__name__)


def week_start(d: date) -> date:
    """Monday of the week containing ``d`` (Sunday belongs to the week before)."""
    if isinstance(d, datetime):
        d = d.date()
    return d - timedelta(days=d.weekday())


def week_key(d: date) -> str:
    return date_key(week_start(d))


def _check_slot(slot: str):
    if slot not in MEAL_SLOTS:
        raise ValueError(f"Invalid meal slot {slot!r}; expected one of {', '.join(MEAL_SLOTS)}")


class PlanRepository:
    def __init__(self, store: KeyValueStore):
        self.store = store

    async def get_or_create(self, start: date) -> MealPlan:
        """Stored plan for the week starting at ``start``, or a fresh all-empty one.

        A fresh plan is not written until a slot is assigned.
        """
        start = week_start(start)
        data = await self.store.get(MEAL_PLAN_PREFIX + date_key(start), None)
        if not data:
            return MealPlan.empty(start)
        return MealPlan.from_dict(data)

    async def save(self, plan: MealPlan) -> None:
        await self.store.set(MEAL_PLAN_PREFIX + plan.week_of, plan.to_dict())

    async def assign(self, d: date, slot: str, recipe_id: Optional[str]) -> MealPlan:
        '''Put ``recipe_id`` in a slot of day ``d``; None clears the slot. Saves the whole week.'''
        _check_slot(slot)
        plan = await self.get_or_create(week_start(d))
        plan.set_slot(date_key(d), slot, recipe_id)
        await self.save(plan)
        logger.info("Meal plan %s: %s %s -> %s", plan.week_of, date_key(d), slot, recipe_id)
        return plan

    async def clear_slot(self, d: date, slot: str) -> MealPlan:
        return await self.assign(d, slot, None)

    async def ordered_recipe_ids(self, start: date) -> List[str]:
        plan = await self.get_or_create(start)
        return plan.recipe_ids()

    async def week_recipe_ids(self, start: date) -> Set[str]:
        return set(await self.ordered_recipe_ids(start))
