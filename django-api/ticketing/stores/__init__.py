from ticketing.stores.cache_store import CacheKeyValueStore
from ticketing.stores.django_store import DjangoEventStore
from ticketing.stores.interfaces import EventStore, KeyValueStore
from ticketing.stores.record_store import DecodeResult, DecodeStatus, RecordStore

__all__ = [
    "CacheKeyValueStore",
    "DjangoEventStore",
    "EventStore",
    "KeyValueStore",
    "DecodeResult",
    "DecodeStatus",
    "RecordStore",
]
