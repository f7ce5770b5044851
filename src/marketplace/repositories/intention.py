"""Intention data-access layer.

Pure query functions: no business logic, no HTTP concerns.
Each function takes a session and returns models or scalars.
Lists come back newest first.
"""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.models import Intention, IntentionStatus


async def get_intention(db: AsyncSession, intention_id: int) -> Intention | None:
    return await db.get(Intention, intention_id)


async def list_intentions_for_user(db: AsyncSession, user_id: int) -> list[Intention]:
    """Return every intention the user created, whatever its status."""
    stmt = select(Intention).where(Intention.user_id == user_id).order_by(Intention.id.desc())
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def list_active_intentions_in_city(db: AsyncSession, city: str) -> list[Intention]:
    """Return the intentions hotels in ``city`` can still bid on."""
    stmt = (
        select(Intention)
        .where(Intention.city == city, Intention.status == IntentionStatus.ACTIVE)
        .order_by(Intention.id.desc())
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def add_intention(db: AsyncSession, intention: Intention) -> Intention:
    """Insert the intention and flush so its id and server defaults are populated."""
    db.add(intention)
    await db.flush()
    await db.refresh(intention)
    return intention


async def delete_intention(db: AsyncSession, intention_id: int) -> None:
    """Delete the intention row. Its offers must already be gone."""
    await db.execute(delete(Intention).where(Intention.id == intention_id))
