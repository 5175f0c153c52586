import logging
from datetime import date

from fastapi import APIRouter, Depends, Response

from recipebox.api.dependencies import get_shopping_repository, target_date
from recipebox.infra.Plan_Repository import week_key
from recipebox.infra.Shopping_Repository import ShoppingListRepository
from recipebox.infra.pdf_utils import generate_pdf_for_shopping_list
from recipebox.utilities.validators import CustomItemInput

router = APIRouter(prefix="/api/shopping-list", tags=["shopping list"])
logger = logging.getLogger(__name__)


def _payload(day: date, shopping_list):
    count = sum(len(items) for items in shopping_list.values())
    checked = sum(1 for items in shopping_list.values() for i in items if i.get("checked"))
    return {"weekOf": week_key(day), "categories": shopping_list, "count": count, "checked": checked}


@router.get("")
async def get_shopping_list(day: date = Depends(target_date),
                            repo: ShoppingListRepository = Depends(get_shopping_repository)):
    return _payload(day, await repo.get(day))


@router.post("/generate")
async def generate_shopping_list(day: date = Depends(target_date),
                                 repo: ShoppingListRepository = Depends(get_shopping_repository)):
    """Rebuild from the week's meal plan. Checked marks and custom items are discarded."""
    return _payload(day, await repo.generate_for_week(day))


@router.post("/items", status_code=201)
async def add_item(payload: CustomItemInput, day: date = Depends(target_date),
                   repo: ShoppingListRepository = Depends(get_shopping_repository)):
    return _payload(day, await repo.add(day, payload.text, payload.category))


@router.post("/items/{item_id}/toggle")
async def toggle_item(item_id: str, day: date = Depends(target_date),
                      repo: ShoppingListRepository = Depends(get_shopping_repository)):
    return _payload(day, await repo.toggle(day, item_id))


@router.delete("/items/{item_id}")
async def remove_item(item_id: str, day: date = Depends(target_date),
                      repo: ShoppingListRepository = Depends(get_shopping_repository)):
    return _payload(day, await repo.remove(day, item_id))


@router.post("/clear-checked")
async def clear_checked(day: date = Depends(target_date),
                        repo: ShoppingListRepository = Depends(get_shopping_repository)):
    return _payload(day, await repo.clear_checked(day))


@router.get("/pdf")
async def shopping_list_pdf(day: date = Depends(target_date),
                            repo: ShoppingListRepository = Depends(get_shopping_repository)):
    key = week_key(day)
    pdf_bytes = generate_pdf_for_shopping_list(await repo.get(day), key)
    logger.info("Shopping list PDF generated for week %s", key)
    return Response(content=pdf_bytes, media_type="application/pdf",
                    headers={"Content-Disposition": f'attachment; filename="shopping-list-{key}.pdf"'})
