"""
API dependencies for dependency injection.

Every route takes its repositories through these functions, so tests swap the
store with ``app.dependency_overrides[get_store] = lambda: InMemoryStore()``.
"""
from datetime import date
from typing import Optional

from fastapi import Depends, HTTPException, Query, Request

from recipebox.infra.Plan_Repository import PlanRepository
from recipebox.infra.Recipe_Repository import RecipeRepository
from recipebox.infra.Shopping_Repository import ShoppingListRepository
from recipebox.infra.User_Repository import UserRepository
from recipebox.infra.store import KeyValueStore
from recipebox.utilities.dates import parse_date_key


def get_store(request: Request) -> KeyValueStore:
    return request.app.state.store


def get_recipe_repository(store: KeyValueStore = Depends(get_store)) -> RecipeRepository:
    return RecipeRepository(store)


def get_user_repository(store: KeyValueStore = Depends(get_store)) -> UserRepository:
    return UserRepository(store)


def get_plan_repository(store: KeyValueStore = Depends(get_store)) -> PlanRepository:
    return PlanRepository(store)


def get_shopping_repository(store: KeyValueStore = Depends(get_store),
                            plans: PlanRepository = Depends(get_plan_repository),
                            recipes: RecipeRepository = Depends(get_recipe_repository)) -> ShoppingListRepository:
    return ShoppingListRepository(store, plans, recipes)


def target_date(date_param: Optional[str] = Query(default=None, alias="date")) -> date:
    """``?date=YYYY-MM-DD`` query parameter, today when missing."""
    if not date_param:
        return date.today()
    try:
        return parse_date_key(date_param)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid date, expected YYYY-MM-DD")
