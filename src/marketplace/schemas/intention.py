"""Intention request and response schemas."""

from datetime import date
from typing import Self

from pydantic import BaseModel, Field, model_validator


class IntentionCreate(BaseModel):
    """Body of POST /api/intentions."""

    user_id: int
    city: str = Field(min_length=1, max_length=100)
    check_in: date
    check_out: date
    max_price: int = Field(gt=0)
    guests: int = Field(default=1, ge=1)

    @model_validator(mode="after")
    def check_dates(self) -> Self:
        if self.check_out <= self.check_in:
            raise ValueError("check_out must be after check_in")
        return self


class IntentionClose(BaseModel):
    """Body of POST /api/intentions/{id}/close. Omit offer_id to close without an award."""

    offer_id: int | None = None


class IntentionResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    user_id: int
    city: str
    check_in: date
    check_out: date
    max_price: int
    guests: int
    status: str
    accepted_offer_id: int | None
