from fastapi import APIRouter, Depends, HTTPException

from recipebox.api.dependencies import get_user_repository
from recipebox.infra.User_Repository import UserRepository
from recipebox.utilities.validators import CurrentUserInput, UserInput

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("")
async def list_users(repo: UserRepository = Depends(get_user_repository)):
    return [u.to_dict() for u in await repo.list_all()]


@router.post("", status_code=201)
async def create_user(payload: UserInput, repo: UserRepository = Depends(get_user_repository)):
    user = await repo.create(payload.name)
    return user.to_dict()


@router.get("/current")
async def get_current_user(repo: UserRepository = Depends(get_user_repository)):
    user = await repo.get_current()
    return user.to_dict() if user else None


@router.put("/current")
async def set_current_user(payload: CurrentUserInput, repo: UserRepository = Depends(get_user_repository)):
    user = await repo.get(payload.userId)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    await repo.set_current(user)
    return user.to_dict()
