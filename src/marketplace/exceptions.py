"""Domain exceptions raised by services and caught by routers.

Services raise these to signal business-rule violations.
Exception handlers in main.py translate them into the standard
error envelope: {"error": {"code": "...", "message": "..."}}.

NotFoundError subclasses map to 404, ValidationFailed subclasses to 400.
Each subclass carries a machine-readable ``code`` naming the rejection.
"""


class DomainError(Exception):
    """Base class for all domain exceptions."""

    code = "domain_error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    code = "not_found"

    def __init__(self, entity: str, identifier: object) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} with id {identifier} not found")


class IntentionNotFound(NotFoundError):
    code = "intention_not_found"

    def __init__(self, intention_id: int) -> None:
        super().__init__("Intention", intention_id)


class OfferNotFound(NotFoundError):
    code = "offer_not_found"

    def __init__(self, offer_id: int) -> None:
        super().__init__("Offer", offer_id)


class ValidationFailed(DomainError):
    """Raised when a request breaks a negotiation rule."""

    code = "validation_failed"


class UserNotFound(ValidationFailed):
    code = "user_not_found"

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(f"User with id {user_id} not found")


class HotelNotFound(ValidationFailed):
    """The hotel named in an offer does not exist (a bad reference, hence 400)."""

    code = "hotel_not_found"

    def __init__(self, hotel_id: int) -> None:
        self.hotel_id = hotel_id
        super().__init__(f"Hotel with id {hotel_id} not found")


class IntentionNotActive(ValidationFailed):
    code = "intention_not_active"

    def __init__(self, intention_id: int) -> None:
        self.intention_id = intention_id
        super().__init__(f"Intention {intention_id} is not active")


class IntentionAlreadyClosed(ValidationFailed):
    code = "intention_already_closed"

    def __init__(self, intention_id: int) -> None:
        self.intention_id = intention_id
        super().__init__(f"Intention {intention_id} is already closed")


class CityMismatch(ValidationFailed):
    code = "city_mismatch"

    def __init__(self, hotel_city: str, intention_city: str) -> None:
        self.hotel_city = hotel_city
        self.intention_city = intention_city
        super().__init__(
            f"Hotel city {hotel_city!r} must match intention city {intention_city!r}"
        )


class PriceBelowMinimum(ValidationFailed):
    code = "price_below_minimum"

    def __init__(self, price: int, min_price: int) -> None:
        self.price = price
        self.min_price = min_price
        super().__init__(f"Price {price} is below the hotel minimum of {min_price}")


class PriceAboveMaximum(ValidationFailed):
    code = "price_above_maximum"

    def __init__(self, price: int, max_price: int) -> None:
        self.price = price
        self.max_price = max_price
        super().__init__(f"Price {price} is above the intention maximum of {max_price}")


class DuplicateOffer(ValidationFailed):
    code = "duplicate_offer"

    def __init__(self, intention_id: int, hotel_id: int) -> None:
        self.intention_id = intention_id
        self.hotel_id = hotel_id
        super().__init__(f"Hotel {hotel_id} already has an offer for intention {intention_id}")


class AmendmentLimitExceeded(ValidationFailed):
    code = "amendment_limit_exceeded"

    def __init__(self, offer_id: int, limit: int) -> None:
        self.offer_id = offer_id
        self.limit = limit
        super().__init__(f"Offer {offer_id} has already been updated {limit} times")


class OfferNotFoundForIntention(ValidationFailed):
    code = "offer_not_found_for_intention"

    def __init__(self, offer_id: int, intention_id: int) -> None:
        self.offer_id = offer_id
        self.intention_id = intention_id
        super().__init__(f"Offer {offer_id} not found for intention {intention_id}")
