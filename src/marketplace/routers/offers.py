"""Offer endpoints. Both writes are guarded by services.negotiation."""

from fastapi import APIRouter

from marketplace.dependencies import WriteDB
from marketplace.schemas.offer import OfferCreate, OfferResponse, OfferUpdate
from marketplace.services.negotiation import amend_offer, create_offer

router = APIRouter(prefix="/offers", tags=["offers"])


@router.post("", response_model=OfferResponse, status_code=200)
async def post_offer(payload: OfferCreate, db: WriteDB) -> OfferResponse:
    offer = await create_offer(
        db,
        intention_id=payload.intention_id,
        hotel_id=payload.hotel_id,
        price=payload.price,
        extras=payload.extras,
    )
    return OfferResponse.model_validate(offer)


@router.put("/{offer_id}", response_model=OfferResponse, status_code=200)
async def put_offer(offer_id: int, payload: OfferUpdate, db: WriteDB) -> OfferResponse:
    offer = await amend_offer(db, offer_id, price=payload.price, extras=payload.extras)
    return OfferResponse.model_validate(offer)
