"""Offer request and response schemas.

Price bounds are not validated here: they depend on the hotel and
intention rows and are enforced by services.negotiation.
"""

from pydantic import BaseModel


class OfferCreate(BaseModel):
    """Body of POST /api/offers."""

    intention_id: int
    hotel_id: int
    price: int
    extras: str | None = None


class OfferUpdate(BaseModel):
    """Body of PUT /api/offers/{id}. Omitted extras keep their current value."""

    price: int
    extras: str | None = None


class OfferResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    intention_id: int
    hotel_id: int
    price: int
    extras: str
    updates_count: int


class OfferWithHotelResponse(OfferResponse):
    """Offer as listed under an intention, with the offering hotel's name."""

    hotel_name: str
