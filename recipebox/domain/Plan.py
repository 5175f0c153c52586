"""MealPlan domain entity: one Monday-start week, date key -> {breakfast, lunch, dinner}."""
from datetime import date, timedelta
from typing import Dict, List, Optional

from recipebox.utilities.constants import DATE_KEY_FORMAT, MEAL_SLOTS


def date_key(d: date) -> str:
    return d.strftime(DATE_KEY_FORMAT)


class MealPlan:
    def __init__(self, week_of: str, days: Dict[str, Dict[str, Optional[str]]]):
        self.week_of = week_of
        self.days = days

    @classmethod
    def empty(cls, week_start: date) -> "MealPlan":
        days = {}
        for i in range(7):
            days[date_key(week_start + timedelta(days=i))] = {slot: None for slot in MEAL_SLOTS}
        return cls(date_key(week_start), days)

    def set_slot(self, day_key: str, slot: str, recipe_id: Optional[str]):
        self.days.setdefault(day_key, {s: None for s in MEAL_SLOTS})
        self.days[day_key][slot] = recipe_id

    def recipe_ids(self) -> List[str]:
        '''Distinct non-null slot values, first-seen order (days in key order, then slot order).'''
        seen: List[str] = []
        for day_key in sorted(self.days):
            meals = self.days[day_key] or {}
            for slot in MEAL_SLOTS:
                rid = meals.get(slot)
                if rid and rid not in seen:
                    seen.append(rid)
        return seen

    @staticmethod
    def from_dict(data) -> "MealPlan":
        d = dict(data) if isinstance(data, dict) else {}
        days = {}
        for day_key, meals in (d.get("days") or {}).items():
            meals = meals if isinstance(meals, dict) else {}
            days[day_key] = {slot: meals.get(slot) for slot in MEAL_SLOTS}
        return MealPlan(d.get("weekOf", ""), days)

    def to_dict(self):
        return {"weekOf": self.week_of, "days": self.days}

    def __repr__(self) -> str:
        return f"MealPlan(weekOf={self.week_of!r}, recipes={len(self.recipe_ids())})"
