"""Django settings for serving the library schema.

Only the HTTP layer is configured here. The resolver and its store take no
configuration.
"""
import logging
import os

from django.core.exceptions import ImproperlyConfigured


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _log_level(value):
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ImproperlyConfigured(
            f"LIBRARY_GRAPHQL_LOG_LEVEL must be one of "
            f"DEBUG, INFO, WARNING, ERROR or CRITICAL, not {value!r}"
        )
    return level


PORT = int(os.environ.get("LIBRARY_GRAPHQL_PORT", "4000"))

DEBUG = _env_flag("LIBRARY_GRAPHQL_DEBUG")

LOG_LEVEL = _log_level(os.environ.get("LIBRARY_GRAPHQL_LOG_LEVEL", "INFO"))

# No sessions, users or signed data are involved; the key only satisfies Django.
SECRET_KEY = os.environ.get("LIBRARY_GRAPHQL_SECRET_KEY", "library-graphql-insecure")

ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get("LIBRARY_GRAPHQL_ALLOWED_HOSTS", "*").split(",")
    if host.strip()
]

INSTALLED_APPS = [
    "django.contrib.staticfiles",
    "graphene_django",
]

MIDDLEWARE = [
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "library_graphql.server.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {},
    },
]

# The collections live in process memory.
DATABASES = {}

STATIC_URL = "static/"

USE_TZ = True

GRAPHENE = {
    "SCHEMA": "library_graphql.schema.schema",
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
        },
    },
    "loggers": {
        "library_graphql": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
        },
        "django": {
            "handlers": ["console"],
            "level": "INFO",
        },
    },
}
