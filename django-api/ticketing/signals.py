"""Domain signals and catalog cache invalidation.

Services send the domain signals after a change has been persisted.
Presentation code (see notifications.py) decides how to surface them.
"""

from django.core.cache import cache
from django.db.models.signals import post_delete, post_save
from django.dispatch import Signal, receiver

from ticketing.models import Event
from ticketing.services.catalog_service import CATALOG_LIST_KEY, event_cache_key

# kwargs: change (CartChange)
cart_item_added = Signal()
# kwargs: event_id, cart
cart_item_removed = Signal()
# kwargs: bookings
bookings_created = Signal()
# kwargs: booking
booking_cancelled = Signal()
# kwargs: user, created
session_started = Signal()
session_ended = Signal()
# kwargs: user
profile_updated = Signal()


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate catalog caches when an event is saved or deleted."""
    cache.delete_many([CATALOG_LIST_KEY, event_cache_key(str(instance.pk))])
