"""Django settings for the Eventiverse ticketing core.

Values that differ between environments are read from EVENTIVERSE_* variables.
"""

import os
from decimal import Decimal
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("EVENTIVERSE_SECRET_KEY", "insecure-dev-key")
DEBUG = os.environ.get("EVENTIVERSE_DEBUG", "false").lower() == "true"
ALLOWED_HOSTS: list[str] = []

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "rest_framework",
    "ticketing",
]

MIDDLEWARE = [
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
]

ROOT_URLCONF = "config.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("EVENTIVERSE_DB_PATH", BASE_DIR / "db.sqlite3"),
    }
}

# The "client" cache plays the part of browser local storage: no expiry.
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "eventiverse-default",
    },
    "client": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "eventiverse-client",
        "TIMEOUT": None,
    },
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
USE_TZ = True
TIME_ZONE = "UTC"

TICKETING_TAX_RATE = Decimal(os.environ.get("EVENTIVERSE_TAX_RATE", "0.10"))
TICKETING_STORE_CACHE_ALIAS = os.environ.get("EVENTIVERSE_STORE_CACHE", "client")
TICKETING_STORE_KEY_PREFIX = os.environ.get("EVENTIVERSE_STORE_PREFIX", "")
TICKETING_GUEST_USER_ID = os.environ.get("EVENTIVERSE_GUEST_USER_ID", "user-123")
TICKETING_CATALOG_CACHE_TIMEOUT = int(
    os.environ.get("EVENTIVERSE_CATALOG_CACHE_TIMEOUT", "300")
)

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "ticketing": {
            "handlers": ["console"],
            "level": os.environ.get("EVENTIVERSE_LOG_LEVEL", "INFO"),
        },
    },
}
