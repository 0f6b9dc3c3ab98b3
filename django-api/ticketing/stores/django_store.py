"""Django ORM implementation of the EventStore."""

from ticketing import models
from ticketing.domain import CatalogEvent, EventId
from ticketing.stores.interfaces import EventStore


def to_domain(event: models.Event) -> CatalogEvent:
    return CatalogEvent(
        id=EventId(value=event.id),
        title=event.title,
        description=event.description,
        category=event.category,
        location=event.location,
        price=event.price,
        image_url=event.image_url,
        starts_at=event.starts_at,
    )


class DjangoEventStore(EventStore):
    """Database-backed event store using Django ORM."""

    def list_events(self) -> list[CatalogEvent]:
        return [to_domain(event) for event in models.Event.objects.order_by("starts_at")]

    def get_event(self, event_id: EventId) -> CatalogEvent | None:
        event = models.Event.objects.filter(pk=event_id.value).first()
        if event is None:
            return None
        return to_domain(event)
