"""Rule-by-rule tests of the negotiation service, run directly against a session."""

import pytest
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
    UserNotFound,
)
from marketplace.models import Intention, IntentionStatus, Offer
from marketplace.repositories.offer import list_offers_for_intention
from marketplace.services.intention import create_intention
from marketplace.services.negotiation import (
    amend_offer,
    close_intention,
    create_offer,
    withdraw_intention,
)
from tests.factories import make_intention, make_offer
from tests.seeds import Seed


async def _other_paris_intention(db: AsyncSession, seed: Seed) -> Intention:
    intention = make_intention(user_id=seed.other_traveler.id, city="Paris", max_price=300)
    db.add(intention)
    await db.flush()
    return intention


# ---------------------------------------------------------------------------
# 1. Creating offers
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_create_offer_within_bounds(db: AsyncSession, seed: Seed) -> None:
    offer = await create_offer(db, seed.intention.id, seed.grand.id, 150)

    assert offer.id is not None
    assert offer.price == 150
    assert offer.updates_count == 0
    assert offer.extras == ""


@pytest.mark.asyncio
async def test_create_offer_keeps_extras(db: AsyncSession, seed: Seed) -> None:
    offer = await create_offer(db, seed.intention.id, seed.grand.id, 150, "Breakfast")
    assert offer.extras == "Breakfast"


@pytest.mark.asyncio
@pytest.mark.parametrize("price", [100, 200], ids=["at_hotel_minimum", "at_intention_maximum"])
async def test_create_offer_accepts_inclusive_bounds(
    db: AsyncSession, seed: Seed, price: int
) -> None:
    offer = await create_offer(db, seed.intention.id, seed.grand.id, price)
    assert offer.price == price


@pytest.mark.asyncio
async def test_create_offer_below_hotel_minimum(db: AsyncSession, seed: Seed) -> None:
    with pytest.raises(PriceBelowMinimum):
        await create_offer(db, seed.intention.id, seed.grand.id, 90)


@pytest.mark.asyncio
async def test_create_offer_above_intention_maximum(db: AsyncSession, seed: Seed) -> None:
    with pytest.raises(PriceAboveMaximum):
        await create_offer(db, seed.intention.id, seed.grand.id, 250)


@pytest.mark.asyncio
@pytest.mark.parametrize("price", [50, 150, 1000])
async def test_create_offer_city_mismatch_for_any_price(
    db: AsyncSession, seed: Seed, price: int
) -> None:
    with pytest.raises(CityMismatch):
        await create_offer(db, seed.intention.id, seed.budget.id, price)


@pytest.mark.asyncio
async def test_create_offer_unknown_intention(db: AsyncSession, seed: Seed) -> None:
    with pytest.raises(IntentionNotActive):
        await create_offer(db, 9999, seed.grand.id, 150)


@pytest.mark.asyncio
async def test_create_offer_unknown_hotel(db: AsyncSession, seed: Seed) -> None:
    with pytest.raises(HotelNotFound):
        await create_offer(db, seed.intention.id, 9999, 150)


@pytest.mark.asyncio
async def test_create_offer_on_closed_intention(db: AsyncSession, seed: Seed) -> None:
    await close_intention(db, seed.intention.id)

    with pytest.raises(IntentionNotActive):
        await create_offer(db, seed.intention.id, seed.grand.id, 150)


@pytest.mark.asyncio
async def test_second_offer_from_same_hotel_is_rejected(db: AsyncSession, seed: Seed) -> None:
    await create_offer(db, seed.intention.id, seed.grand.id, 150)

    with pytest.raises(DuplicateOffer):
        await create_offer(db, seed.intention.id, seed.grand.id, 180)


@pytest.mark.asyncio
async def test_different_hotels_may_bid_on_same_intention(db: AsyncSession, seed: Seed) -> None:
    await create_offer(db, seed.intention.id, seed.grand.id, 150)
    await create_offer(db, seed.intention.id, seed.luxury.id, 160)

    offers = await list_offers_for_intention(db, seed.intention.id)
    assert [offer.hotel_name for offer in offers] == ["Grand Hotel", "Luxury Inn"]


@pytest.mark.asyncio
async def test_city_is_checked_before_price(db: AsyncSession, seed: Seed) -> None:
    # 10 is also below Budget Stay's minimum; the city rule wins
    with pytest.raises(CityMismatch):
        await create_offer(db, seed.intention.id, seed.budget.id, 10)


# ---------------------------------------------------------------------------
# 2. Amending offers
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_amendments_capped_at_two(db: AsyncSession, seed: Seed) -> None:
    offer = await create_offer(db, seed.intention.id, seed.grand.id, 120)
    assert offer.updates_count == 0

    offer = await amend_offer(db, offer.id, 130)
    assert (offer.price, offer.updates_count) == (130, 1)

    offer = await amend_offer(db, offer.id, 140)
    assert (offer.price, offer.updates_count) == (140, 2)

    with pytest.raises(AmendmentLimitExceeded):
        await amend_offer(db, offer.id, 150)

    assert offer.price == 140
    assert offer.updates_count == 2


@pytest.mark.asyncio
async def test_limit_reported_before_closed_intention(db: AsyncSession, seed: Seed) -> None:
    offer = make_offer(intention_id=seed.intention.id, hotel_id=seed.grand.id, updates_count=2)
    db.add(offer)
    await db.flush()
    await close_intention(db, seed.intention.id)

    with pytest.raises(AmendmentLimitExceeded):
        await amend_offer(db, offer.id, 150)


@pytest.mark.asyncio
async def test_amend_unknown_offer(db: AsyncSession, seed: Seed) -> None:
    with pytest.raises(OfferNotFound):
        await amend_offer(db, 9999, 150)


@pytest.mark.asyncio
async def test_amend_after_close(db: AsyncSession, seed: Seed) -> None:
    offer = await create_offer(db, seed.intention.id, seed.grand.id, 150)
    await close_intention(db, seed.intention.id, offer.id)

    with pytest.raises(IntentionNotActive):
        await amend_offer(db, offer.id, 160)


@pytest.mark.asyncio
async def test_amend_uses_current_intention_maximum(db: AsyncSession, seed: Seed) -> None:
    offer = await create_offer(db, seed.intention.id, seed.grand.id, 120)
    seed.intention.max_price = 125
    await db.flush()

    with pytest.raises(PriceAboveMaximum):
        await amend_offer(db, offer.id, 130)


@pytest.mark.asyncio
async def test_amend_uses_current_hotel_minimum(db: AsyncSession, seed: Seed) -> None:
    offer = await create_offer(db, seed.intention.id, seed.grand.id, 120)
    seed.grand.min_price = 140
    await db.flush()

    with pytest.raises(PriceBelowMinimum):
        await amend_offer(db, offer.id, 130)


@pytest.mark.asyncio
async def test_rejected_amendment_does_not_count(db: AsyncSession, seed: Seed) -> None:
    offer = await create_offer(db, seed.intention.id, seed.grand.id, 120)

    with pytest.raises(PriceAboveMaximum):
        await amend_offer(db, offer.id, 500)

    assert offer.updates_count == 0
    assert offer.price == 120


@pytest.mark.asyncio
async def test_amend_extras(db: AsyncSession, seed: Seed) -> None:
    offer = await create_offer(db, seed.intention.id, seed.grand.id, 120, "Breakfast")

    offer = await amend_offer(db, offer.id, 125)
    assert offer.extras == "Breakfast"

    offer = await amend_offer(db, offer.id, 130, "Breakfast, late checkout")
    assert offer.extras == "Breakfast, late checkout"


# ---------------------------------------------------------------------------
# 3. Closing intentions
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_close_without_offer(db: AsyncSession, seed: Seed) -> None:
    intention = await close_intention(db, seed.intention.id)

    assert intention.status == IntentionStatus.CLOSED
    assert intention.accepted_offer_id is None


@pytest.mark.asyncio
async def test_close_accepting_own_offer(db: AsyncSession, seed: Seed) -> None:
    offer = await create_offer(db, seed.intention.id, seed.grand.id, 150)

    intention = await close_intention(db, seed.intention.id, offer.id)

    assert intention.status == IntentionStatus.CLOSED
    assert intention.accepted_offer_id == offer.id


@pytest.mark.asyncio
async def test_close_with_offer_of_other_intention(db: AsyncSession, seed: Seed) -> None:
    other = await _other_paris_intention(db, seed)
    foreign_offer = await create_offer(db, other.id, seed.grand.id, 150)

    with pytest.raises(OfferNotFoundForIntention):
        await close_intention(db, seed.intention.id, foreign_offer.id)

    assert seed.intention.status == IntentionStatus.ACTIVE


@pytest.mark.asyncio
async def test_close_twice(db: AsyncSession, seed: Seed) -> None:
    await close_intention(db, seed.intention.id)

    with pytest.raises(IntentionAlreadyClosed):
        await close_intention(db, seed.intention.id)


@pytest.mark.asyncio
async def test_close_unknown_intention(db: AsyncSession, seed: Seed) -> None:
    with pytest.raises(IntentionNotFound):
        await close_intention(db, 9999)


# ---------------------------------------------------------------------------
# 4. Withdrawing intentions
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_withdraw_removes_intention_and_offers(db: AsyncSession, seed: Seed) -> None:
    await create_offer(db, seed.intention.id, seed.grand.id, 150)
    await create_offer(db, seed.intention.id, seed.luxury.id, 170)
    intention_id = seed.intention.id

    await withdraw_intention(db, intention_id)
    db.expunge_all()

    assert await list_offers_for_intention(db, intention_id) == []
    assert await db.get(Intention, intention_id) is None


@pytest.mark.asyncio
async def test_withdraw_leaves_other_intentions_offers(db: AsyncSession, seed: Seed) -> None:
    other = await _other_paris_intention(db, seed)
    kept = await create_offer(db, other.id, seed.grand.id, 150)
    await create_offer(db, seed.intention.id, seed.grand.id, 150)

    await withdraw_intention(db, seed.intention.id)
    db.expunge_all()

    assert await db.get(Offer, kept.id) is not None


@pytest.mark.asyncio
async def test_withdraw_closed_intention(db: AsyncSession, seed: Seed) -> None:
    await close_intention(db, seed.intention.id)

    with pytest.raises(IntentionAlreadyClosed):
        await withdraw_intention(db, seed.intention.id)


@pytest.mark.asyncio
async def test_withdraw_unknown_intention(db: AsyncSession, seed: Seed) -> None:
    with pytest.raises(IntentionNotFound):
        await withdraw_intention(db, 9999)


# ---------------------------------------------------------------------------
# 5. Opening intentions
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_create_intention_defaults(db: AsyncSession, seed: Seed) -> None:
    intention = await create_intention(
        db,
        user_id=seed.traveler.id,
        city="London",
        check_in=seed.intention.check_in,
        check_out=seed.intention.check_out,
        max_price=120,
    )

    assert intention.status == IntentionStatus.ACTIVE
    assert intention.guests == 1
    assert intention.accepted_offer_id is None


@pytest.mark.asyncio
async def test_create_intention_unknown_user(db: AsyncSession, seed: Seed) -> None:
    with pytest.raises(UserNotFound):
        await create_intention(
            db,
            user_id=9999,
            city="Paris",
            check_in=seed.intention.check_in,
            check_out=seed.intention.check_out,
            max_price=200,
        )
