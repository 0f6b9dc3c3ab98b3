from django.contrib import admin

from ticketing.models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "category", "location", "price", "starts_at"]
    list_filter = ["category"]
    search_fields = ["title", "location"]
