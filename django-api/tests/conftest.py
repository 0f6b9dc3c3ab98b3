"""Pytest configuration and shared fixtures."""

import pytest

from ticketing.domain import CartItem, NotificationKind
from ticketing.services.booking_service import BookingService
from ticketing.services.cart_service import CartService
from ticketing.services.session_service import SessionService
from ticketing.stores import CacheKeyValueStore, KeyValueStore, RecordStore


class UnavailableStore(KeyValueStore):
    """Backend that fails every call, like storage disabled in a browser."""

    def get(self, key: str) -> str | None:
        raise ConnectionError("store unavailable")

    def set(self, key: str, value: str) -> None:
        raise ConnectionError("store unavailable")

    def delete(self, key: str) -> None:
        raise ConnectionError("store unavailable")


class RecordingNotifier:
    def __init__(self) -> None:
        self.messages: list[tuple[NotificationKind, str]] = []

    def notify(self, kind: NotificationKind, message: str) -> None:
        self.messages.append((kind, message))


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import caches

    for cache in caches.all():
        cache.clear()
    yield
    for cache in caches.all():
        cache.clear()


@pytest.fixture
def backend() -> CacheKeyValueStore:
    return CacheKeyValueStore(alias="client", key_prefix="test-client")


@pytest.fixture
def store(backend: CacheKeyValueStore) -> RecordStore:
    return RecordStore(backend)


@pytest.fixture
def unavailable_store() -> RecordStore:
    return RecordStore(UnavailableStore())


@pytest.fixture
def cart_service(store: RecordStore) -> CartService:
    return CartService(store)


@pytest.fixture
def session_service(store: RecordStore) -> SessionService:
    return SessionService(store)


@pytest.fixture
def booking_service(
    store: RecordStore, cart_service: CartService, session_service: SessionService
) -> BookingService:
    return BookingService(store, cart_service, current_user_id=session_service.current_user_id)


@pytest.fixture
def make_item():
    def _make_item(
        event_id: str = "evt-1",
        title: str = "Jazz Night",
        price: str = "$10.00",
        quantity: int = 1,
    ) -> CartItem:
        return CartItem(
            event_id=event_id,
            event_title=title,
            price=price,
            quantity=quantity,
            image_url=f"https://img.example.com/{event_id}.jpg",
        )

    return _make_item


@pytest.fixture
def notifier():
    from ticketing.notifications import connect_notifier

    recording = RecordingNotifier()
    disconnect = connect_notifier(recording)
    yield recording
    disconnect()
