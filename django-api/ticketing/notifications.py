"""Turns domain signals into user-facing notifications.

The core never waits on a notifier. Presentation code connects one with
connect_notifier() and disconnects it with the returned callable.
"""

import logging
from collections.abc import Callable
from typing import Protocol

from ticketing import signals
from ticketing.domain import CartChangeKind, NotificationKind
from ticketing.domain.errors import DomainError

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    def notify(self, kind: NotificationKind, message: str) -> None:
        ...


class LoggingNotifier:
    """Writes notifications to the ticketing.notifications logger."""

    def notify(self, kind: NotificationKind, message: str) -> None:
        level = logging.WARNING if kind is NotificationKind.ERROR else logging.INFO
        logger.log(level, "[%s] %s", kind.value, message)


def connect_notifier(notifier: Notifier) -> Callable[[], None]:
    """Subscribe notifier to the domain signals. Returns a disconnect function."""

    def on_cart_item_added(sender, change, **kwargs):
        title = change.item.event_title
        if change.kind is CartChangeKind.UPDATED:
            notifier.notify(NotificationKind.SUCCESS, f'Updated quantity for "{title}" in cart')
        else:
            notifier.notify(NotificationKind.SUCCESS, f'Added "{title}" to cart')

    def on_cart_item_removed(sender, **kwargs):
        notifier.notify(NotificationKind.INFO, "Removed item from cart")

    def on_bookings_created(sender, bookings, **kwargs):
        notifier.notify(
            NotificationKind.SUCCESS, "Booking confirmed! Thank you for your purchase."
        )

    def on_booking_cancelled(sender, **kwargs):
        notifier.notify(NotificationKind.INFO, "Booking cancelled")

    def on_session_started(sender, user, created, **kwargs):
        if created:
            notifier.notify(NotificationKind.SUCCESS, f"Welcome to Eventiverse, {user.name}!")
        else:
            notifier.notify(NotificationKind.SUCCESS, f"Welcome back, {user.name}!")

    def on_session_ended(sender, **kwargs):
        notifier.notify(NotificationKind.INFO, "You have been signed out successfully")

    def on_profile_updated(sender, **kwargs):
        notifier.notify(NotificationKind.SUCCESS, "Your profile has been updated successfully")

    connections = [
        (signals.cart_item_added, on_cart_item_added),
        (signals.cart_item_removed, on_cart_item_removed),
        (signals.bookings_created, on_bookings_created),
        (signals.booking_cancelled, on_booking_cancelled),
        (signals.session_started, on_session_started),
        (signals.session_ended, on_session_ended),
        (signals.profile_updated, on_profile_updated),
    ]
    for signal, handler in connections:
        signal.connect(handler, weak=False)

    def disconnect() -> None:
        for signal, handler in connections:
            signal.disconnect(handler)

    return disconnect


def report_error(notifier: Notifier, error: DomainError) -> None:
    """Surface a recoverable domain error with its user-safe message."""
    notifier.notify(NotificationKind.ERROR, error.message)
