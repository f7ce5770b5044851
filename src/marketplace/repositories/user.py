"""User data-access layer."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.models import User


async def list_users(db: AsyncSession) -> list[User]:
    result = await db.execute(select(User).order_by(User.id))
    return list(result.scalars().all())


async def get_user(db: AsyncSession, user_id: int) -> User | None:
    return await db.get(User, user_id)
