"""Offer/intention negotiation rules.

Every mutating operation on offers and on an intention's lifecycle goes
through this module. Each function checks its rules in a fixed order and
raises the first violated one as a domain exception; nothing is written
unless every check passes.

Price bounds are always read from the current hotel and intention rows,
so an amendment is judged against today's limits, not those at creation.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.exceptions import (
    AmendmentLimitExceeded,
    CityMismatch,
    DuplicateOffer,
    HotelNotFound,
    IntentionAlreadyClosed,
    IntentionNotActive,
    IntentionNotFound,
    OfferNotFound,
    OfferNotFoundForIntention,
    PriceAboveMaximum,
    PriceBelowMinimum,
)
from marketplace.logging import get_logger
from marketplace.models import MAX_OFFER_UPDATES, Hotel, Intention, IntentionStatus, Offer
from marketplace.repositories.hotel import get_hotel
from marketplace.repositories.intention import delete_intention, get_intention
from marketplace.repositories.offer import (
    add_offer,
    delete_offers_for_intention,
    find_offer,
    get_offer,
    get_offer_for_intention,
)

logger = get_logger(__name__)


def check_price(price: int, hotel: Hotel, intention: Intention) -> None:
    """Raise unless hotel.min_price <= price <= intention.max_price."""
    if price < hotel.min_price:
        raise PriceBelowMinimum(price, hotel.min_price)
    if price > intention.max_price:
        raise PriceAboveMaximum(price, intention.max_price)


async def create_offer(
    db: AsyncSession,
    intention_id: int,
    hotel_id: int,
    price: int,
    extras: str | None = None,
) -> Offer:
    """Place a hotel's offer on an active intention in the hotel's city."""
    intention = await get_intention(db, intention_id)
    if intention is None or not intention.is_active:
        raise IntentionNotActive(intention_id)

    hotel = await get_hotel(db, hotel_id)
    if hotel is None:
        raise HotelNotFound(hotel_id)

    if hotel.city != intention.city:
        raise CityMismatch(hotel.city, intention.city)

    check_price(price, hotel, intention)

    if await find_offer(db, intention_id, hotel_id) is not None:
        raise DuplicateOffer(intention_id, hotel_id)

    offer = await add_offer(
        db,
        Offer(
            intention_id=intention_id,
            hotel_id=hotel_id,
            price=price,
            extras=extras or "",
            updates_count=0,
        ),
    )
    logger.info(
        "offer_created",
        offer_id=offer.id,
        intention_id=intention_id,
        hotel_id=hotel_id,
        price=price,
    )
    return offer


async def amend_offer(
    db: AsyncSession,
    offer_id: int,
    price: int,
    extras: str | None = None,
) -> Offer:
    """Change an offer's price (and extras, when given), at most MAX_OFFER_UPDATES times.

    The limit is checked before the intention's status, so an exhausted offer
    reports the limit even after its intention closed.
    """
    offer = await get_offer(db, offer_id)
    if offer is None:
        raise OfferNotFound(offer_id)

    if offer.updates_count >= MAX_OFFER_UPDATES:
        raise AmendmentLimitExceeded(offer_id, MAX_OFFER_UPDATES)

    intention = await get_intention(db, offer.intention_id)
    if intention is None or not intention.is_active:
        raise IntentionNotActive(offer.intention_id)

    hotel = await get_hotel(db, offer.hotel_id)
    if hotel is None:
        raise HotelNotFound(offer.hotel_id)

    check_price(price, hotel, intention)

    offer.price = price
    if extras is not None:
        offer.extras = extras
    offer.updates_count += 1
    await db.flush()

    logger.info(
        "offer_amended",
        offer_id=offer.id,
        price=price,
        updates_count=offer.updates_count,
    )
    return offer


async def close_intention(
    db: AsyncSession,
    intention_id: int,
    offer_id: int | None = None,
) -> Intention:
    """Close an active intention, optionally accepting one of its own offers.

    Closing without an offer is a valid "no award" close. Once closed, its
    offers can no longer be amended.
    """
    intention = await get_intention(db, intention_id)
    if intention is None:
        raise IntentionNotFound(intention_id)

    if not intention.is_active:
        raise IntentionAlreadyClosed(intention_id)

    if offer_id is not None:
        if await get_offer_for_intention(db, offer_id, intention_id) is None:
            raise OfferNotFoundForIntention(offer_id, intention_id)
        intention.accepted_offer_id = offer_id

    intention.status = IntentionStatus.CLOSED
    await db.flush()

    logger.info("intention_closed", intention_id=intention_id, accepted_offer_id=offer_id)
    return intention


async def withdraw_intention(db: AsyncSession, intention_id: int) -> None:
    """Remove an active intention together with all offers made against it.

    Closed intentions are terminal and cannot be withdrawn. Offers go first
    because they reference the intention.
    """
    intention = await get_intention(db, intention_id)
    if intention is None:
        raise IntentionNotFound(intention_id)

    if not intention.is_active:
        raise IntentionAlreadyClosed(intention_id)

    removed = await delete_offers_for_intention(db, intention_id)
    await delete_intention(db, intention_id)

    logger.info("intention_withdrawn", intention_id=intention_id, offers_removed=removed)
