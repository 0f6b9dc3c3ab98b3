"""JSON record store on top of a KeyValueStore.

Reads never raise: a missing key yields the codec default, and an
unavailable backend or a corrupt record is logged and decoded as the default.
The outcome of every read is available as a tagged DecodeResult.
"""

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any

from rest_framework import serializers

from ticketing.stores.interfaces import KeyValueStore
from ticketing.stores.serializers import (
    BookingSerializer,
    CartItemSerializer,
    UserSerializer,
)

logger = logging.getLogger(__name__)

CART_KEY = "cart"
BOOKINGS_KEY = "bookings"
USER_KEY = "user"
AUTH_TOKEN_KEY = "authToken"


class DecodeStatus(Enum):
    VALUE = "value"
    DEFAULT = "default"
    ERROR = "error"


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of reading one record.

    VALUE: the record decoded cleanly.
    DEFAULT: the key was absent.
    ERROR: the store failed or the record was corrupt; `value` holds the default.
    """

    status: DecodeStatus
    value: Any
    error: str | None = None


class RecordCodec(ABC):
    """Converts between domain values and JSON-ready payloads."""

    @abstractmethod
    def load(self, payload: Any) -> Any:
        """Validate payload and return the domain value.

        Raises serializers.ValidationError or ValueError on bad input.
        """
        ...

    @abstractmethod
    def dump(self, value: Any) -> Any:
        ...

    @abstractmethod
    def default(self) -> Any:
        ...


class SerializerCodec(RecordCodec):
    """Codec driven by a DRF serializer whose create() builds domain objects."""

    def __init__(self, serializer_class: type[serializers.Serializer], many: bool = False) -> None:
        self.serializer_class = serializer_class
        self.many = many

    def load(self, payload: Any) -> Any:
        serializer = self.serializer_class(data=payload, many=self.many)
        serializer.is_valid(raise_exception=True)
        return serializer.save()

    def dump(self, value: Any) -> Any:
        return self.serializer_class(value, many=self.many).data

    def default(self) -> Any:
        return [] if self.many else None


class FieldCodec(RecordCodec):
    """Codec for a scalar record validated by a single serializer field."""

    def __init__(self, field: serializers.Field) -> None:
        self.field = field

    def load(self, payload: Any) -> Any:
        return self.field.run_validation(payload)

    def dump(self, value: Any) -> Any:
        return self.field.to_representation(value)

    def default(self) -> Any:
        return None


CART_CODEC = SerializerCodec(CartItemSerializer, many=True)
BOOKINGS_CODEC = SerializerCodec(BookingSerializer, many=True)
USER_CODEC = SerializerCodec(UserSerializer)
AUTH_TOKEN_CODEC = FieldCodec(
    serializers.CharField(allow_blank=True, trim_whitespace=False)
)


class RecordStore:
    """Whole-record read/write of JSON values under fixed keys."""

    def __init__(self, backend: KeyValueStore) -> None:
        self._backend = backend

    def decode(self, key: str, codec: RecordCodec) -> DecodeResult:
        try:
            raw = self._backend.get(key)
        except Exception:
            logger.exception("Store unavailable while reading %r", key)
            return DecodeResult(DecodeStatus.ERROR, codec.default(), "store unavailable")

        if raw is None:
            return DecodeResult(DecodeStatus.DEFAULT, codec.default())

        try:
            value = codec.load(json.loads(raw))
        except (ValueError, TypeError, serializers.ValidationError) as exc:
            logger.warning("Discarding corrupt %r record: %s", key, exc)
            return DecodeResult(DecodeStatus.ERROR, codec.default(), str(exc))
        return DecodeResult(DecodeStatus.VALUE, value)

    def read(self, key: str, codec: RecordCodec) -> Any:
        return self.decode(key, codec).value

    def write(self, key: str, value: Any, codec: RecordCodec) -> bool:
        """Replace the record under key. Returns False if the store failed."""
        payload = json.dumps(codec.dump(value))
        try:
            self._backend.set(key, payload)
        except Exception:
            logger.exception("Store unavailable while writing %r", key)
            return False
        return True

    def clear(self, key: str) -> bool:
        try:
            self._backend.delete(key)
        except Exception:
            logger.exception("Store unavailable while clearing %r", key)
            return False
        return True
