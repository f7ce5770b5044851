"""SQLAlchemy models.

Define all ORM models here. They must inherit from Base so that
Alembic's autogenerate can detect them. Columns mirror the migration
scripts in db/migrations/versions.
"""

from datetime import date
from enum import StrEnum

from sqlalchemy import CheckConstraint, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from marketplace.db.session import Base

# Amendments allowed per offer after it is created
MAX_OFFER_UPDATES = 2


class IntentionStatus(StrEnum):
    ACTIVE = "active"
    CLOSED = "closed"


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100))
    role: Mapped[str] = mapped_column(String(20))

    intentions: Mapped[list["Intention"]] = relationship(back_populates="user")


class Hotel(Base):
    __tablename__ = "hotels"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100))
    city: Mapped[str] = mapped_column(String(100), index=True)
    min_price: Mapped[int]
    role: Mapped[str] = mapped_column(String(20))
    description: Mapped[str | None] = mapped_column(Text)
    rating: Mapped[float | None] = mapped_column(default=4.0, server_default="4.0")
    image_url: Mapped[str | None] = mapped_column(Text)
    amenities: Mapped[str | None] = mapped_column(Text)
    address: Mapped[str | None] = mapped_column(Text)
    phone: Mapped[str | None] = mapped_column(String(30))

    offers: Mapped[list["Offer"]] = relationship(back_populates="hotel")


class Intention(Base):
    __tablename__ = "intentions"
    __table_args__ = (CheckConstraint("status IN ('active', 'closed')", name="status"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    city: Mapped[str] = mapped_column(String(100), index=True)
    check_in: Mapped[date]
    check_out: Mapped[date]
    max_price: Mapped[int]
    guests: Mapped[int] = mapped_column(default=1, server_default="1")
    status: Mapped[str] = mapped_column(
        String(20), default=IntentionStatus.ACTIVE, server_default=IntentionStatus.ACTIVE.value
    )
    # References offers.id of one of this intention's own offers
    accepted_offer_id: Mapped[int | None]

    user: Mapped["User"] = relationship(back_populates="intentions")
    offers: Mapped[list["Offer"]] = relationship(back_populates="intention")

    @property
    def is_active(self) -> bool:
        return self.status == IntentionStatus.ACTIVE


class Offer(Base):
    __tablename__ = "offers"
    __table_args__ = (
        UniqueConstraint("intention_id", "hotel_id", name="uq_offers_intention_id_hotel_id"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    intention_id: Mapped[int] = mapped_column(ForeignKey("intentions.id"))
    hotel_id: Mapped[int] = mapped_column(ForeignKey("hotels.id"))
    price: Mapped[int]
    extras: Mapped[str] = mapped_column(Text, default="", server_default="")
    updates_count: Mapped[int] = mapped_column(default=0, server_default="0")

    intention: Mapped["Intention"] = relationship(back_populates="offers")
    hotel: Mapped["Hotel"] = relationship(back_populates="offers")

    @property
    def hotel_name(self) -> str:
        """Name of the offering hotel; requires the hotel relationship to be loaded."""
        return self.hotel.name
