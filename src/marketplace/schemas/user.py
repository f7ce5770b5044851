"""User response schemas."""

from pydantic import BaseModel


class UserResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    name: str
    role: str
