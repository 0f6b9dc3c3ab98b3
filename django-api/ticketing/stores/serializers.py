"""Serializers for the JSON records kept in the client store.

Field names follow the stored camelCase layout; `source` maps them onto the
domain dataclasses. `save()` returns domain objects.
"""

from decimal import Decimal

from rest_framework import serializers

from ticketing.domain import Booking, BookingStatus, CartItem, Money, User

# Stored text is kept verbatim; the domain accepts blank and padded strings.
TEXT = {"allow_blank": True, "trim_whitespace": False}


class BookingStatusField(serializers.ChoiceField):
    """Stores BookingStatus by value."""

    def __init__(self, **kwargs) -> None:
        super().__init__(choices=[status.value for status in BookingStatus], **kwargs)

    def to_internal_value(self, data) -> BookingStatus:
        return BookingStatus(super().to_internal_value(data))

    def to_representation(self, value: BookingStatus) -> str:
        return value.value


class CartItemSerializer(serializers.Serializer):
    eventId = serializers.CharField(source="event_id", **TEXT)
    eventTitle = serializers.CharField(source="event_title", **TEXT)
    price = serializers.CharField(**TEXT)
    quantity = serializers.IntegerField(min_value=1)
    imageUrl = serializers.CharField(source="image_url", default="", **TEXT)

    def validate_price(self, value: str) -> str:
        try:
            Money.parse(value)
        except ValueError as exc:
            raise serializers.ValidationError(str(exc))
        return value

    def create(self, validated_data) -> CartItem:
        return CartItem(**validated_data)


class BookingSerializer(serializers.Serializer):
    id = serializers.CharField(**TEXT)
    eventId = serializers.CharField(source="event_id", **TEXT)
    eventTitle = serializers.CharField(source="event_title", **TEXT)
    userId = serializers.CharField(source="user_id", **TEXT)
    quantity = serializers.IntegerField(min_value=1)
    totalPrice = serializers.FloatField(source="total_price", min_value=0)
    bookingDate = serializers.DateTimeField(source="booking_date")
    status = BookingStatusField()

    def create(self, validated_data) -> Booking:
        total_price = Decimal(str(validated_data.pop("total_price")))
        return Booking(total_price=total_price, **validated_data)


class UserSerializer(serializers.Serializer):
    id = serializers.CharField(**TEXT)
    name = serializers.CharField(**TEXT)
    email = serializers.CharField(**TEXT)
    avatar = serializers.CharField(allow_null=True, default=None, **TEXT)

    def create(self, validated_data) -> User:
        return User(**validated_data)
