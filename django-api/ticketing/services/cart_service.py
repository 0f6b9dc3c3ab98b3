"""Cart service - the in-progress ticket selection for one client.

Every operation is a whole-record read-modify-write of the `cart` key.
"""

import logging
from decimal import Decimal

from ticketing import conf, signals
from ticketing.domain import (
    CartChange,
    CartChangeKind,
    CartItem,
    CatalogEvent,
    Money,
    Totals,
)
from ticketing.domain.errors import InvalidQuantityError
from ticketing.stores.record_store import CART_CODEC, CART_KEY, RecordStore

logger = logging.getLogger(__name__)


class CartService:
    """Add, update, remove and total cart lines keyed by event_id."""

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def get_cart(self) -> list[CartItem]:
        """Return cart lines in the order they were first added."""
        return self._store.read(CART_KEY, CART_CODEC)

    def get_item(self, event_id: str) -> CartItem | None:
        return next((item for item in self.get_cart() if item.event_id == event_id), None)

    def _save(self, cart: list[CartItem]) -> None:
        self._store.write(CART_KEY, cart, CART_CODEC)

    def add_to_cart(self, item: CartItem) -> CartChange:
        """Add item, or increase the quantity of the line with the same event_id."""
        cart = self.get_cart()
        for index, existing in enumerate(cart):
            if existing.event_id == item.event_id:
                stored = existing.with_quantity(existing.quantity + item.quantity)
                cart[index] = stored
                kind = CartChangeKind.UPDATED
                break
        else:
            stored = item
            cart.append(item)
            kind = CartChangeKind.ADDED

        self._save(cart)
        change = CartChange(kind=kind, item=stored, cart=cart)
        logger.debug("Cart %s %s (qty %d)", kind.value, stored.event_id, stored.quantity)
        signals.cart_item_added.send(sender=self.__class__, change=change)
        return change

    def add_event(self, event: CatalogEvent, quantity: int = 1) -> CartChange:
        """Snapshot a catalog event into the cart.

        Raises:
            InvalidQuantityError: If quantity is below one.
        """
        if quantity < 1:
            raise InvalidQuantityError(quantity)
        return self.add_to_cart(event.to_cart_item(quantity))

    def update_quantity(self, event_id: str, quantity: int) -> list[CartItem]:
        """Set the quantity of a line. Below one removes it; unknown ids are ignored."""
        if quantity < 1:
            return self.remove_from_cart(event_id)

        cart = self.get_cart()
        if not any(item.event_id == event_id for item in cart):
            return cart

        cart = [
            item.with_quantity(quantity) if item.event_id == event_id else item
            for item in cart
        ]
        self._save(cart)
        return cart

    def remove_from_cart(self, event_id: str) -> list[CartItem]:
        """Remove a line. Removing an absent id returns the cart unchanged."""
        cart = self.get_cart()
        remaining = [item for item in cart if item.event_id != event_id]
        if len(remaining) == len(cart):
            return cart

        self._save(remaining)
        signals.cart_item_removed.send(
            sender=self.__class__, event_id=event_id, cart=remaining
        )
        return remaining

    def clear_cart(self) -> list[CartItem]:
        self._store.clear(CART_KEY)
        return []

    def item_count(self, cart: list[CartItem] | None = None) -> int:
        """Total number of tickets across all lines."""
        if cart is None:
            cart = self.get_cart()
        return sum(item.quantity for item in cart)

    def compute_totals(
        self, cart: list[CartItem] | None = None, tax_rate: Decimal | None = None
    ) -> Totals:
        """Subtotal of price x quantity, tax on the subtotal, and their sum.

        Amounts are exact; round only for display (`str(money)`).
        """
        if cart is None:
            cart = self.get_cart()
        if tax_rate is None:
            tax_rate = conf.tax_rate()

        subtotal = Money.zero()
        for item in cart:
            subtotal = subtotal.plus(item.line_total)
        tax = subtotal.times(Decimal(str(tax_rate)))
        return Totals(subtotal=subtotal, tax=tax, total=subtotal.plus(tax))
