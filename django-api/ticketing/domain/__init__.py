from ticketing.domain.models import (
    Booking,
    CartChange,
    CartChangeKind,
    CartItem,
    CatalogEvent,
    Totals,
    User,
)
from ticketing.domain.value_objects import (
    BookingStatus,
    EventId,
    Money,
    NotificationKind,
    Quantity,
)

__all__ = [
    "Booking",
    "CartChange",
    "CartChangeKind",
    "CartItem",
    "CatalogEvent",
    "Totals",
    "User",
    "BookingStatus",
    "EventId",
    "Money",
    "NotificationKind",
    "Quantity",
]
