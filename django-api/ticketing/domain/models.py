"""Domain models representing persisted state.

These are pure domain objects. The JSON record layout lives in
stores/serializers.py and the catalog ORM model in ticketing/models.py.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum

from ticketing.domain.errors import InvalidStatusTransitionError
from ticketing.domain.value_objects import BookingStatus, EventId, Money, Quantity


@dataclass(frozen=True)
class CatalogEvent:
    """Domain representation of a catalog Event."""

    id: EventId
    title: str
    description: str
    category: str
    location: str
    price: str
    image_url: str
    starts_at: datetime

    def to_cart_item(self, quantity: int = 1) -> "CartItem":
        """Snapshot the display fields a cart line keeps."""
        return CartItem(
            event_id=str(self.id),
            event_title=self.title,
            price=self.price,
            quantity=quantity,
            image_url=self.image_url,
        )


@dataclass(frozen=True)
class CartItem:
    """One event line in the cart. event_id is unique within a cart."""

    event_id: str
    event_title: str
    price: str
    quantity: int
    image_url: str = ""

    def __post_init__(self) -> None:
        Quantity(self.quantity)
        Money.parse(self.price)

    @property
    def unit_price(self) -> Money:
        return Money.parse(self.price)

    @property
    def line_total(self) -> Money:
        return self.unit_price.times(self.quantity)

    def with_quantity(self, quantity: int) -> "CartItem":
        return replace(self, quantity=quantity)


class CartChangeKind(Enum):
    ADDED = "added"
    UPDATED = "updated"


@dataclass(frozen=True)
class CartChange:
    """Outcome of add_to_cart: the stored line and the updated cart."""

    kind: CartChangeKind
    item: CartItem
    cart: list[CartItem] = field(default_factory=list)


@dataclass(frozen=True)
class Totals:
    subtotal: Money
    tax: Money
    total: Money


@dataclass(frozen=True)
class Booking:
    """A completed ticket purchase. Only status may change after creation."""

    id: str
    event_id: str
    event_title: str
    user_id: str
    quantity: int
    total_price: Decimal
    booking_date: datetime
    status: BookingStatus = BookingStatus.CONFIRMED

    def __post_init__(self) -> None:
        Quantity(self.quantity)

    @property
    def is_cancelled(self) -> bool:
        return self.status is BookingStatus.CANCELLED

    def cancel(self) -> "Booking":
        """Return this booking as cancelled; only confirmed bookings qualify."""
        if self.status is not BookingStatus.CONFIRMED:
            raise InvalidStatusTransitionError(
                self.id, self.status.value, BookingStatus.CANCELLED.value
            )
        return replace(self, status=BookingStatus.CANCELLED)


@dataclass(frozen=True)
class User:
    """Domain representation of the signed-in user."""

    id: str
    name: str
    email: str
    avatar: str | None = None

    def merged(self, **fields) -> "User":
        return replace(self, **fields)
