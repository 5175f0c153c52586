from datetime import date

from fastapi import APIRouter, Depends, HTTPException

from recipebox.api.dependencies import get_plan_repository, target_date
from recipebox.infra.Plan_Repository import PlanRepository, week_start
from recipebox.utilities.dates import parse_date_key
from recipebox.utilities.validators import SlotAssignmentInput

router = APIRouter(prefix="/api/meal-plan", tags=["meal plan"])


@router.get("")
async def get_meal_plan(day: date = Depends(target_date), repo: PlanRepository = Depends(get_plan_repository)):
    """Plan of the week containing ``?date=`` (all slots null when nothing is planned yet)."""
    plan = await repo.get_or_create(week_start(day))
    return plan.to_dict()


@router.put("/slot")
async def assign_slot(payload: SlotAssignmentInput, repo: PlanRepository = Depends(get_plan_repository)):
    try:
        day = parse_date_key(payload.date)
        plan = await repo.assign(day, payload.slot, payload.recipeId)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return plan.to_dict()


@router.get("/recipes")
async def week_recipes(day: date = Depends(target_date), repo: PlanRepository = Depends(get_plan_repository)):
    ids = await repo.ordered_recipe_ids(week_start(day))
    return {"weekOf": week_start(day).isoformat(), "recipeIds": ids, "count": len(ids)}
