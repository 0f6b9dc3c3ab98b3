"""Domain error codes for the ticketing module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EMPTY_CART = "EMPTY_CART"
    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
    INVALID_QUANTITY = "INVALID_QUANTITY"
    INVALID_STATUS_TRANSITION = "INVALID_STATUS_TRANSITION"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message.

    Instances are frozen: subclasses attach extra context with
    object.__setattr__.
    """

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EmptyCartError(DomainError):
    """Raised when checkout is attempted with no cart items."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EMPTY_CART,
            message="Your cart is empty",
        )


class NotAuthenticatedError(DomainError):
    """Raised when a profile update is attempted without a session."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NOT_AUTHENTICATED,
            message="User not authenticated",
        )


class InvalidQuantityError(DomainError):
    """Raised when a cart item is added with a quantity below one."""

    def __init__(self, quantity: int) -> None:
        super().__init__(
            code=ErrorCode.INVALID_QUANTITY,
            message="Quantity must be at least 1",
        )
        object.__setattr__(self, "quantity", quantity)


class InvalidStatusTransitionError(DomainError):
    """Raised when a booking status change is not confirmed -> cancelled."""

    def __init__(self, booking_id: str, current: str, target: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_STATUS_TRANSITION,
            message=f"Cannot move booking from {current} to {target}",
        )
        object.__setattr__(self, "booking_id", booking_id)


class StoreUnavailableError(DomainError):
    """Raised when a write that must be durable could not be persisted."""

    def __init__(self, key: str) -> None:
        super().__init__(
            code=ErrorCode.STORE_UNAVAILABLE,
            message="Your booking could not be saved, please try again",
        )
        object.__setattr__(self, "key", key)


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        object.__setattr__(self, "event_id", event_id)


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )
