"""Store interfaces (repository pattern).

Stores must be swappable. EventStore returns domain models; KeyValueStore
deals in raw strings and knows nothing about record layout.
"""

from abc import ABC, abstractmethod

from ticketing.domain import CatalogEvent, EventId


class EventStore(ABC):
    """Interface for read-only catalog lookups."""

    @abstractmethod
    def list_events(self) -> list[CatalogEvent]:
        """Return all events ordered by starts_at ascending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> CatalogEvent | None:
        """Return an event by ID, or None if not found."""
        ...


class KeyValueStore(ABC):
    """Interface for a string key-value store such as browser local storage.

    Implementations may raise on any call when the underlying store is
    unavailable; RecordStore absorbs those failures.
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored string, or None if the key is absent."""
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key. Removing an absent key is not an error."""
        ...
