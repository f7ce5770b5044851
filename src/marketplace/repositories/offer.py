"""Offer data-access layer.

Pure query functions: no business logic, no HTTP concerns.
Each function takes a session and returns models or scalars.
"""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from marketplace.models import Offer


async def get_offer(db: AsyncSession, offer_id: int) -> Offer | None:
    return await db.get(Offer, offer_id)


async def get_offer_for_intention(
    db: AsyncSession, offer_id: int, intention_id: int
) -> Offer | None:
    """Return the offer only if it was made against the given intention."""
    stmt = select(Offer).where(Offer.id == offer_id, Offer.intention_id == intention_id)
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def find_offer(db: AsyncSession, intention_id: int, hotel_id: int) -> Offer | None:
    """Return the hotel's offer on the intention, if it already made one."""
    stmt = select(Offer).where(Offer.intention_id == intention_id, Offer.hotel_id == hotel_id)
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def list_offers_for_intention(db: AsyncSession, intention_id: int) -> list[Offer]:
    """Return the intention's offers with their hotels eagerly loaded (for hotel_name)."""
    stmt = (
        select(Offer)
        .options(selectinload(Offer.hotel))
        .where(Offer.intention_id == intention_id)
        .order_by(Offer.id)
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def add_offer(db: AsyncSession, offer: Offer) -> Offer:
    """Insert the offer and flush so its id and server defaults are populated."""
    db.add(offer)
    await db.flush()
    await db.refresh(offer)
    return offer


async def delete_offers_for_intention(db: AsyncSession, intention_id: int) -> int:
    """Delete every offer made against the intention and return how many were removed."""
    result = await db.execute(delete(Offer).where(Offer.intention_id == intention_id))
    return result.rowcount  # type: ignore[attr-defined, no-any-return]
