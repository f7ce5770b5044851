"""Hotel endpoints (read-only reference data)."""

from fastapi import APIRouter

from marketplace.dependencies import DB
from marketplace.exceptions import NotFoundError
from marketplace.repositories.hotel import get_hotel, list_hotels
from marketplace.schemas.hotel import HotelResponse

router = APIRouter(prefix="/hotels", tags=["hotels"])


@router.get("", response_model=list[HotelResponse], status_code=200)
async def get_hotels(db: DB) -> list[HotelResponse]:
    hotels = await list_hotels(db)
    return [HotelResponse.model_validate(hotel) for hotel in hotels]


@router.get("/{hotel_id}", response_model=HotelResponse, status_code=200)
async def get_hotel_by_id(hotel_id: int, db: DB) -> HotelResponse:
    hotel = await get_hotel(db, hotel_id)
    if hotel is None:
        raise NotFoundError("Hotel", hotel_id)
    return HotelResponse.model_validate(hotel)
