"""Django ORM models (persistence layer).

Only the read-only event catalog lives in the database. Cart, booking and
session records live in the client store (see stores/record_store.py).
"""

import uuid

from django.db import models


class Event(models.Model):
    """Persistence model for catalog events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    category = models.CharField(max_length=100)
    location = models.CharField(max_length=255)
    price = models.CharField(max_length=32, help_text='Display price, e.g. "$149.99"')
    image_url = models.URLField(max_length=500, blank=True)
    starts_at = models.DateTimeField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["starts_at"]
        indexes = [
            models.Index(
                fields=["category", "starts_at"], name="ticketing_event_category_idx"
            ),
        ]

    def __str__(self) -> str:
        return self.title
