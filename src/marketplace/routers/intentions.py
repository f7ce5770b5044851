"""Intention endpoints.

Listings read straight from the repositories; creation, closing and
withdrawal go through the services and hold the write lock.
"""

from fastapi import APIRouter

from marketplace.dependencies import DB, WriteDB
from marketplace.repositories.intention import (
    list_active_intentions_in_city,
    list_intentions_for_user,
)
from marketplace.repositories.offer import list_offers_for_intention
from marketplace.schemas.error import MessageResponse
from marketplace.schemas.intention import IntentionClose, IntentionCreate, IntentionResponse
from marketplace.schemas.offer import OfferWithHotelResponse
from marketplace.services.intention import create_intention
from marketplace.services.negotiation import close_intention, withdraw_intention

router = APIRouter(prefix="/intentions", tags=["intentions"])


@router.post("", response_model=IntentionResponse, status_code=200)
async def post_intention(payload: IntentionCreate, db: WriteDB) -> IntentionResponse:
    intention = await create_intention(db, **payload.model_dump())
    return IntentionResponse.model_validate(intention)


@router.get("/user/{user_id}", response_model=list[IntentionResponse], status_code=200)
async def get_user_intentions(user_id: int, db: DB) -> list[IntentionResponse]:
    """All of a traveler's intentions, newest first."""
    intentions = await list_intentions_for_user(db, user_id)
    return [IntentionResponse.model_validate(intention) for intention in intentions]


@router.get("/city/{city}", response_model=list[IntentionResponse], status_code=200)
async def get_city_intentions(city: str, db: DB) -> list[IntentionResponse]:
    """Active intentions in a city, newest first: what hotels there can bid on."""
    intentions = await list_active_intentions_in_city(db, city)
    return [IntentionResponse.model_validate(intention) for intention in intentions]


@router.post("/{intention_id}/close", response_model=IntentionResponse, status_code=200)
async def post_close_intention(
    intention_id: int,
    db: WriteDB,
    payload: IntentionClose | None = None,
) -> IntentionResponse:
    offer_id = payload.offer_id if payload is not None else None
    intention = await close_intention(db, intention_id, offer_id)
    return IntentionResponse.model_validate(intention)


@router.delete("/{intention_id}", response_model=MessageResponse, status_code=200)
async def delete_intention_by_id(intention_id: int, db: WriteDB) -> MessageResponse:
    await withdraw_intention(db, intention_id)
    return MessageResponse(message="Intention deleted successfully")


@router.get(
    "/{intention_id}/offers", response_model=list[OfferWithHotelResponse], status_code=200
)
async def get_intention_offers(intention_id: int, db: DB) -> list[OfferWithHotelResponse]:
    offers = await list_offers_for_intention(db, intention_id)
    return [OfferWithHotelResponse.model_validate(offer) for offer in offers]
