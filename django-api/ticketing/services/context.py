"""Explicit wiring of the ticketing services for one client store.

Build one TicketingContext per client and pass it to callers; there is no
module-level session state.
"""

from dataclasses import dataclass

from ticketing import conf
from ticketing.services.booking_service import BookingService
from ticketing.services.cart_service import CartService
from ticketing.services.catalog_service import CatalogService
from ticketing.services.session_service import IdentityProvider, SessionService
from ticketing.stores import CacheKeyValueStore, DjangoEventStore, KeyValueStore, RecordStore


@dataclass(frozen=True)
class TicketingContext:
    store: RecordStore
    cart: CartService
    bookings: BookingService
    session: SessionService
    catalog: CatalogService

    def teardown(self) -> None:
        """End the session; cart and bookings stay in the store."""
        self.session.signout()


def build_context(
    backend: KeyValueStore | None = None,
    identity: IdentityProvider | None = None,
) -> TicketingContext:
    """Create the services and hydrate the session from the store.

    Without a backend, the configured cache alias and key prefix are used.
    """
    if backend is None:
        backend = CacheKeyValueStore(
            alias=conf.get("TICKETING_STORE_CACHE_ALIAS"),
            key_prefix=conf.get("TICKETING_STORE_KEY_PREFIX"),
        )
    store = RecordStore(backend)
    cart = CartService(store)
    session = SessionService(store, identity=identity)
    bookings = BookingService(store, cart, current_user_id=session.current_user_id)
    return TicketingContext(
        store=store,
        cart=cart,
        bookings=bookings,
        session=session,
        catalog=CatalogService(DjangoEventStore()),
    )
