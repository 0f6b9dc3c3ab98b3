"""Catalog service - read-only event lookups for presentation.

Cart and booking records keep the snapshot fields they were given at
add-time; nothing in the core re-fetches from the catalog.
"""

from django.core.cache import cache

from ticketing import conf
from ticketing.domain import CatalogEvent, EventId
from ticketing.domain.errors import EventNotFoundError, InvalidEventIdError
from ticketing.stores.interfaces import EventStore

CATALOG_LIST_KEY = "catalog:events:list"


def event_cache_key(event_id: str) -> str:
    return f"catalog:events:{event_id}"


class CatalogService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore, cache_timeout: int | None = None) -> None:
        self._store = store
        if cache_timeout is None:
            cache_timeout = conf.get("TICKETING_CATALOG_CACHE_TIMEOUT")
        self._cache_timeout = cache_timeout

    def list_events(self) -> list[CatalogEvent]:
        """Return all events, ordered by start time."""
        events = cache.get(CATALOG_LIST_KEY)
        if events is None:
            events = self._store.list_events()
            cache.set(CATALOG_LIST_KEY, events, self._cache_timeout)
        return events

    def find_event_by_id(self, event_id: str) -> CatalogEvent:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        try:
            parsed = EventId.from_string(event_id)
        except (ValueError, TypeError, AttributeError):
            raise InvalidEventIdError() from None

        key = event_cache_key(str(parsed))
        event = cache.get(key)
        if event is None:
            event = self._store.get_event(parsed)
            if event is None:
                raise EventNotFoundError(event_id)
            cache.set(key, event, self._cache_timeout)
        return event

    def search_events(self, query: str = "", category: str | None = None) -> list[CatalogEvent]:
        """Filter events by a title/location substring and an optional category.

        A category of None, "" or "all" matches every event.
        """
        needle = query.strip().lower()
        matches = []
        for event in self.list_events():
            if needle and needle not in event.title.lower() and needle not in event.location.lower():
                continue
            if category and category != "all" and event.category != category:
                continue
            matches.append(event)
        return matches

    def list_categories(self) -> list[str]:
        """Distinct categories in catalog order."""
        return list(dict.fromkeys(event.category for event in self.list_events()))
