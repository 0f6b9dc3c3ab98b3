"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Self
from uuid import UUID

_NON_NUMERIC = re.compile(r"[^0-9.]")


@dataclass(frozen=True)
class EventId:
    """Unique identifier for a catalog Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse a currency-formatted string such as "$1,234.56".

        Everything except digits and the decimal point is discarded first.
        """
        cleaned = _NON_NUMERIC.sub("", text)
        try:
            return cls(amount=Decimal(cleaned))
        except InvalidOperation:
            raise ValueError(f"Cannot parse a price from {text!r}") from None

    @classmethod
    def zero(cls) -> Self:
        return cls(amount=Decimal("0"))

    def times(self, factor: int | Decimal) -> "Money":
        return Money(amount=self.amount * factor)

    def plus(self, other: "Money") -> "Money":
        return Money(amount=self.amount + other.amount)

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class Quantity:
    """Ticket count, at least one."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("Quantity must be at least 1")


class BookingStatus(Enum):
    """Booking lifecycle states.

    PENDING is reserved for a payment-pending flow; nothing produces it yet.
    """

    CONFIRMED = "confirmed"
    PENDING = "pending"
    CANCELLED = "cancelled"


class NotificationKind(Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"
