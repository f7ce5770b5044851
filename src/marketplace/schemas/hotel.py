"""Hotel response schemas."""

from pydantic import BaseModel


class HotelResponse(BaseModel):
    """A hotel as listed to travelers; ``amenities`` is a comma-separated string."""

    model_config = {"from_attributes": True}

    id: int
    name: str
    city: str
    min_price: int
    role: str
    description: str | None
    rating: float | None
    image_url: str | None
    amenities: str | None
    address: str | None
    phone: str | None
