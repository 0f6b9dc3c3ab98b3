"""Booking service - turns the cart into bookings and manages cancellation.

Bookings are never deleted. Cancellation only changes status, so the full
purchase history stays in the store.
"""

import logging
import uuid
from collections.abc import Callable

from django.utils import timezone

from ticketing import conf, signals
from ticketing.domain import Booking, BookingStatus, CartItem
from ticketing.domain.errors import EmptyCartError, StoreUnavailableError
from ticketing.services.cart_service import CartService
from ticketing.stores.record_store import BOOKINGS_CODEC, BOOKINGS_KEY, RecordStore

logger = logging.getLogger(__name__)


def new_booking_id() -> str:
    return f"booking-{uuid.uuid4().hex}"


class BookingService:
    """Checkout, lookup and cancellation of bookings."""

    def __init__(
        self,
        store: RecordStore,
        cart: CartService,
        current_user_id: Callable[[], str | None] | None = None,
    ) -> None:
        self._store = store
        self._cart = cart
        self._current_user_id = current_user_id or (lambda: None)

    def get_bookings(self) -> list[Booking]:
        """Return every booking, cancelled ones included."""
        return self._store.read(BOOKINGS_KEY, BOOKINGS_CODEC)

    def get_booking_by_id(self, booking_id: str) -> Booking | None:
        return next((b for b in self.get_bookings() if b.id == booking_id), None)

    def get_bookings_by_event(self, event_id: str) -> list[Booking]:
        return [b for b in self.get_bookings() if b.event_id == event_id]

    def get_bookings_for_user(self, user_id: str) -> list[Booking]:
        return [b for b in self.get_bookings() if b.user_id == user_id]

    def _booking_for(self, item: CartItem, user_id: str) -> Booking:
        return Booking(
            id=new_booking_id(),
            event_id=item.event_id,
            event_title=item.event_title,
            user_id=user_id,
            quantity=item.quantity,
            total_price=item.line_total.amount,
            booking_date=timezone.now(),
            status=BookingStatus.CONFIRMED,
        )

    def create_booking_from_cart(self) -> list[Booking]:
        """Create one confirmed booking per cart line, then clear the cart.

        The bookings are written in a single store write before the cart is
        cleared; if that write fails the cart is left as it was.

        Raises:
            EmptyCartError: If the cart has no items. Nothing is written.
            StoreUnavailableError: If the bookings could not be persisted.
        """
        cart = self._cart.get_cart()
        if not cart:
            raise EmptyCartError()

        user_id = self._current_user_id() or conf.get("TICKETING_GUEST_USER_ID")
        new_bookings = [self._booking_for(item, user_id) for item in cart]

        bookings = self.get_bookings() + new_bookings
        if not self._store.write(BOOKINGS_KEY, bookings, BOOKINGS_CODEC):
            raise StoreUnavailableError(BOOKINGS_KEY)
        self._cart.clear_cart()

        logger.info("Created %d booking(s) for user %s", len(new_bookings), user_id)
        signals.bookings_created.send(sender=self.__class__, bookings=new_bookings)
        return new_bookings

    def cancel_booking(self, booking_id: str) -> list[Booking]:
        """Cancel a confirmed booking.

        Unknown and already-cancelled ids are a no-op; the list is returned
        unchanged.

        Raises:
            StoreUnavailableError: If the cancellation could not be persisted.
            No signal is sent and the stored booking stays confirmed.
        """
        bookings = self.get_bookings()
        for index, booking in enumerate(bookings):
            if booking.id == booking_id and booking.status is BookingStatus.CONFIRMED:
                cancelled = booking.cancel()
                bookings[index] = cancelled
                break
        else:
            logger.debug("Cancel of %s ignored: no confirmed booking", booking_id)
            return bookings

        if not self._store.write(BOOKINGS_KEY, bookings, BOOKINGS_CODEC):
            raise StoreUnavailableError(BOOKINGS_KEY)
        signals.booking_cancelled.send(sender=self.__class__, booking=cancelled)
        return bookings
