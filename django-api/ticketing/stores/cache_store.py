"""KeyValueStore backed by a Django cache alias.

Entries are written without expiry so the cache behaves like local storage.
"""

from django.core.cache import caches

from ticketing.stores.interfaces import KeyValueStore


class CacheKeyValueStore(KeyValueStore):
    """String store over django.core.cache, namespaced by key_prefix."""

    def __init__(self, alias: str = "default", key_prefix: str = "") -> None:
        self._alias = alias
        self._key_prefix = key_prefix

    @property
    def _cache(self):
        return caches[self._alias]

    def _key(self, key: str) -> str:
        return f"{self._key_prefix}:{key}" if self._key_prefix else key

    def get(self, key: str) -> str | None:
        return self._cache.get(self._key(key))

    def set(self, key: str, value: str) -> None:
        self._cache.set(self._key(key), value, timeout=None)

    def delete(self, key: str) -> None:
        self._cache.delete(self._key(key))
