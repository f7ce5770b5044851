"""Intention creation.

Travelers open intentions; everything after that (offers, closing,
withdrawal) is governed by services.negotiation.
"""

from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.exceptions import UserNotFound
from marketplace.logging import get_logger
from marketplace.models import Intention, IntentionStatus
from marketplace.repositories.intention import add_intention
from marketplace.repositories.user import get_user

logger = get_logger(__name__)


async def create_intention(
    db: AsyncSession,
    *,
    user_id: int,
    city: str,
    check_in: date,
    check_out: date,
    max_price: int,
    guests: int = 1,
) -> Intention:
    """Open a new active intention for an existing user."""
    if await get_user(db, user_id) is None:
        raise UserNotFound(user_id)

    intention = await add_intention(
        db,
        Intention(
            user_id=user_id,
            city=city,
            check_in=check_in,
            check_out=check_out,
            max_price=max_price,
            guests=guests,
            status=IntentionStatus.ACTIVE,
        ),
    )
    logger.info("intention_created", intention_id=intention.id, user_id=user_id, city=city)
    return intention
