"""Unit tests for BookingService.

Run with: pytest tests/test_booking_service.py -v
"""

from decimal import Decimal

import pytest

from ticketing.domain import BookingStatus, NotificationKind
from ticketing.domain.errors import EmptyCartError, ErrorCode, StoreUnavailableError
from ticketing.services.booking_service import BookingService
from ticketing.services.cart_service import CartService
from ticketing.stores import KeyValueStore, RecordStore
from ticketing.stores.record_store import BOOKINGS_KEY


class TestCreateBookingFromCart:
    def test_checkout_creates_confirmed_booking_and_clears_cart(
        self, booking_service, cart_service, make_item
    ):
        cart_service.add_to_cart(make_item("evt-1", price="$10.00", quantity=2))

        [booking] = booking_service.create_booking_from_cart()

        assert booking.total_price == Decimal("20.00")
        assert booking.status is BookingStatus.CONFIRMED
        assert booking.quantity == 2
        assert booking.event_title == "Jazz Night"
        assert cart_service.get_cart() == []
        assert booking_service.get_bookings() == [booking]

    def test_one_booking_per_cart_line_with_unique_ids(
        self, booking_service, cart_service, make_item
    ):
        cart_service.add_to_cart(make_item("evt-1"))
        cart_service.add_to_cart(make_item("evt-2", price="$5", quantity=4))

        bookings = booking_service.create_booking_from_cart()

        assert [b.event_id for b in bookings] == ["evt-1", "evt-2"]
        assert len({b.id for b in bookings}) == 2
        assert bookings[1].total_price == Decimal("20")

    def test_new_bookings_are_appended(self, booking_service, cart_service, make_item):
        cart_service.add_to_cart(make_item("evt-1"))
        first = booking_service.create_booking_from_cart()
        cart_service.add_to_cart(make_item("evt-2"))
        second = booking_service.create_booking_from_cart()
        assert booking_service.get_bookings() == first + second

    def test_blank_title_does_not_drop_booking_history(
        self, booking_service, cart_service, make_item
    ):
        cart_service.add_to_cart(make_item("evt-1", title=""))
        first = booking_service.create_booking_from_cart()
        cart_service.add_to_cart(make_item("evt-2"))
        second = booking_service.create_booking_from_cart()
        assert booking_service.get_bookings() == first + second

    def test_empty_cart_raises_and_leaves_store_unchanged(self, booking_service, backend):
        with pytest.raises(EmptyCartError) as exc_info:
            booking_service.create_booking_from_cart()
        assert exc_info.value.code is ErrorCode.EMPTY_CART
        assert backend.get(BOOKINGS_KEY) is None

    def test_guest_user_id_when_signed_out(self, booking_service, cart_service, make_item):
        cart_service.add_to_cart(make_item())
        [booking] = booking_service.create_booking_from_cart()
        assert booking.user_id == "user-123"

    def test_signed_in_user_owns_booking(
        self, booking_service, cart_service, session_service, make_item
    ):
        user = session_service.signin("ada@example.com", "secret")
        cart_service.add_to_cart(make_item())
        [booking] = booking_service.create_booking_from_cart()
        assert booking.user_id == user.id
        assert booking_service.get_bookings_for_user(user.id) == [booking]

    def test_failed_write_keeps_cart(self, store, make_item):
        class ReadOnlyBookings(KeyValueStore):
            def __init__(self, inner):
                self.inner = inner

            def get(self, key):
                return self.inner.get(key)

            def set(self, key, value):
                if key == BOOKINGS_KEY:
                    raise ConnectionError("quota exceeded")
                self.inner.set(key, value)

            def delete(self, key):
                self.inner.delete(key)

        from ticketing.stores import CacheKeyValueStore

        inner = CacheKeyValueStore(alias="client", key_prefix="flaky")
        flaky = RecordStore(ReadOnlyBookings(inner))
        cart = CartService(flaky)
        bookings = BookingService(flaky, cart)
        cart.add_to_cart(make_item())

        with pytest.raises(StoreUnavailableError):
            bookings.create_booking_from_cart()
        assert len(cart.get_cart()) == 1
        assert bookings.get_bookings() == []


class TestLookups:
    @pytest.fixture
    def bookings(self, booking_service, cart_service, make_item):
        cart_service.add_to_cart(make_item("evt-1"))
        cart_service.add_to_cart(make_item("evt-2"))
        return booking_service.create_booking_from_cart()

    def test_get_booking_by_id(self, booking_service, bookings):
        assert booking_service.get_booking_by_id(bookings[1].id) == bookings[1]

    def test_get_booking_by_unknown_id(self, booking_service, bookings):
        assert booking_service.get_booking_by_id("booking-missing") is None

    def test_get_bookings_by_event(self, booking_service, bookings):
        assert booking_service.get_bookings_by_event("evt-2") == [bookings[1]]
        assert booking_service.get_bookings_by_event("evt-9") == []


class TestCancelBooking:
    def test_cancel_sets_status_and_keeps_record(self, booking_service, cart_service, make_item):
        cart_service.add_to_cart(make_item())
        [booking] = booking_service.create_booking_from_cart()

        updated = booking_service.cancel_booking(booking.id)

        assert updated[0].status is BookingStatus.CANCELLED
        stored = booking_service.get_booking_by_id(booking.id)
        assert stored.status is BookingStatus.CANCELLED
        assert stored.total_price == booking.total_price

    def test_cancel_twice_is_noop(self, booking_service, cart_service, make_item):
        cart_service.add_to_cart(make_item())
        [booking] = booking_service.create_booking_from_cart()
        booking_service.cancel_booking(booking.id)

        again = booking_service.cancel_booking(booking.id)

        assert again[0].status is BookingStatus.CANCELLED
        assert len(booking_service.get_bookings()) == 1

    def test_cancel_unknown_id_is_noop(self, booking_service, cart_service, make_item):
        cart_service.add_to_cart(make_item())
        before = booking_service.create_booking_from_cart()
        assert booking_service.cancel_booking("booking-missing") == before

    def test_failed_write_leaves_booking_confirmed(self, notifier, make_item):
        class ReadOnlyAfterCheckout(KeyValueStore):
            def __init__(self, inner):
                self.inner = inner
                self.read_only = False

            def get(self, key):
                return self.inner.get(key)

            def set(self, key, value):
                if self.read_only:
                    raise ConnectionError("quota exceeded")
                self.inner.set(key, value)

            def delete(self, key):
                self.inner.delete(key)

        from ticketing.stores import CacheKeyValueStore

        backend = ReadOnlyAfterCheckout(CacheKeyValueStore(alias="client", key_prefix="ro"))
        store = RecordStore(backend)
        cart = CartService(store)
        bookings = BookingService(store, cart)
        cart.add_to_cart(make_item())
        [booking] = bookings.create_booking_from_cart()
        backend.read_only = True

        with pytest.raises(StoreUnavailableError):
            bookings.cancel_booking(booking.id)
        assert bookings.get_booking_by_id(booking.id).status is BookingStatus.CONFIRMED
        assert (NotificationKind.INFO, "Booking cancelled") not in notifier.messages
