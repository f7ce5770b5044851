"""User endpoints."""

from fastapi import APIRouter

from marketplace.dependencies import DB
from marketplace.repositories.user import list_users
from marketplace.schemas.user import UserResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse], status_code=200)
async def get_users(db: DB) -> list[UserResponse]:
    users = await list_users(db)
    return [UserResponse.model_validate(user) for user in users]
