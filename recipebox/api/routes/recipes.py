import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from recipebox.api.dependencies import get_recipe_repository
from recipebox.infra.Recipe_Repository import RecipeNotFoundError, RecipeRepository
from recipebox.logic.recipes.search import average_rating, filter_recipes, sort_recipes
from recipebox.utilities.validators import (
    CommentInput,
    PhotoInput,
    RatingInput,
    RecipeInput,
    RecipeUpdateInput,
)

router = APIRouter(prefix="/api/recipes", tags=["recipes"])
logger = logging.getLogger(__name__)


async def _require_recipe(repo: RecipeRepository, recipe_id: str):
    recipe = await repo.get(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe


@router.get("")
async def list_recipes(search: str = Query(default=""),
                       category: Optional[List[str]] = Query(default=None),
                       time: str = Query(default=""),
                       author: str = Query(default=""),
                       sort: str = Query(default=""),
                       repo: RecipeRepository = Depends(get_recipe_repository)):
    """All recipes, filtered and sorted; each carries its average rating."""
    recipes = await repo.list_all()
    recipes = filter_recipes(recipes, search=search, categories=category, prep_time=time, author_id=author)
    ratings_map = await repo.get_ratings_map(r.id for r in recipes)
    recipes = sort_recipes(recipes, sort, ratings_map)
    items = []
    for recipe in recipes:
        entry = recipe.to_dict()
        entry["averageRating"] = average_rating(ratings_map.get(recipe.id))
        items.append(entry)
    return {"count": len(items), "recipes": items}


@router.post("", status_code=201)
async def create_recipe(payload: RecipeInput, repo: RecipeRepository = Depends(get_recipe_repository)):
    recipe = await repo.create(payload.model_dump())
    return recipe.to_dict()


@router.get("/{recipe_id}")
async def get_recipe(recipe_id: str, repo: RecipeRepository = Depends(get_recipe_repository)):
    recipe = await _require_recipe(repo, recipe_id)
    return recipe.to_dict()


@router.put("/{recipe_id}")
async def update_recipe(recipe_id: str, payload: RecipeUpdateInput,
                        repo: RecipeRepository = Depends(get_recipe_repository)):
    try:
        recipe = await repo.update(recipe_id, payload.model_dump(exclude_unset=True, exclude_none=True))
    except RecipeNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return recipe.to_dict()


@router.post("/{recipe_id}/made")
async def mark_recipe_made(recipe_id: str, repo: RecipeRepository = Depends(get_recipe_repository)):
    try:
        recipe = await repo.mark_made(recipe_id)
    except RecipeNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return recipe.to_dict()


@router.delete("/{recipe_id}", status_code=204)
async def delete_recipe(recipe_id: str, repo: RecipeRepository = Depends(get_recipe_repository)):
    await _require_recipe(repo, recipe_id)
    await repo.delete(recipe_id)
    return Response(status_code=204)


# -------------------- Ratings / comments / photos --------------------
@router.get("/{recipe_id}/ratings")
async def get_ratings(recipe_id: str, repo: RecipeRepository = Depends(get_recipe_repository)):
    ratings = await repo.get_ratings(recipe_id)
    return {"ratings": ratings, "average": average_rating(ratings), "count": len(ratings)}


@router.put("/{recipe_id}/ratings")
async def set_rating(recipe_id: str, payload: RatingInput, repo: RecipeRepository = Depends(get_recipe_repository)):
    await _require_recipe(repo, recipe_id)
    ratings = await repo.set_rating(recipe_id, payload.userId, payload.rating)
    return {"ratings": ratings, "average": average_rating(ratings), "count": len(ratings)}


@router.get("/{recipe_id}/comments")
async def get_comments(recipe_id: str, repo: RecipeRepository = Depends(get_recipe_repository)):
    return await repo.get_comments(recipe_id)


@router.post("/{recipe_id}/comments", status_code=201)
async def add_comment(recipe_id: str, payload: CommentInput, repo: RecipeRepository = Depends(get_recipe_repository)):
    await _require_recipe(repo, recipe_id)
    return await repo.add_comment(recipe_id, payload.userId, payload.userName, payload.text)


@router.get("/{recipe_id}/photos")
async def get_photos(recipe_id: str, repo: RecipeRepository = Depends(get_recipe_repository)):
    return await repo.get_photos(recipe_id)


@router.post("/{recipe_id}/photos", status_code=201)
async def add_photo(recipe_id: str, payload: PhotoInput, repo: RecipeRepository = Depends(get_recipe_repository)):
    await _require_recipe(repo, recipe_id)
    return await repo.add_photo(recipe_id, payload.userId, payload.userName, payload.url)
