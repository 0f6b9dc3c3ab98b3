"""App settings with defaults, read lazily from django.conf.settings."""

from decimal import Decimal

from django.conf import settings

DEFAULTS = {
    "TICKETING_TAX_RATE": Decimal("0.10"),
    "TICKETING_STORE_CACHE_ALIAS": "default",
    "TICKETING_STORE_KEY_PREFIX": "",
    "TICKETING_GUEST_USER_ID": "user-123",
    "TICKETING_AVATAR_URL_TEMPLATE": (
        "https://ui-avatars.com/api/?name={name}&background=random"
    ),
    "TICKETING_DEFAULT_DISPLAY_NAME": "Demo User",
    "TICKETING_CATALOG_CACHE_TIMEOUT": 300,
}


def get(name: str):
    """Return a ticketing setting, falling back to its default."""
    return getattr(settings, name, DEFAULTS[name])


def tax_rate() -> Decimal:
    return Decimal(str(get("TICKETING_TAX_RATE")))
