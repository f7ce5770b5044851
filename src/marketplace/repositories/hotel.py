"""Hotel data-access layer.

Hotels are static reference data: lookups only, no writes.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.models import Hotel


async def list_hotels(db: AsyncSession) -> list[Hotel]:
    result = await db.execute(select(Hotel).order_by(Hotel.id))
    return list(result.scalars().all())


async def get_hotel(db: AsyncSession, hotel_id: int) -> Hotel | None:
    return await db.get(Hotel, hotel_id)
