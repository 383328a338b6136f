import os
from pathlib import Path

from celery.schedules import crontab

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "django-insecure-fxrates-development-key")

DEBUG = os.getenv("DJANGO_DEBUG", "False").lower() in ("true", "1", "yes")

ALLOWED_HOSTS = os.getenv(
    "DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver"
).split(",")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "currencies",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "fxrates.urls"

WSGI_APPLICATION = "fxrates.wsgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

USE_TZ = True
TIME_ZONE = "UTC"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
}

# Cache Configuration
if os.getenv("REDIS_URL"):
    CACHES = {
        "default": {
            "BACKEND": "django.core.cache.backends.redis.RedisCache",
            "LOCATION": os.getenv("REDIS_URL"),
        }
    }
else:
    CACHES = {
        "default": {
            "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        }
    }

# Exchange rates API
EXCHANGE_RATES_API_URL = os.getenv(
    "EXCHANGE_RATES_API_URL", "https://api.exchangeratesapi.io"
)
EXCHANGE_RATES_API_KEY = os.getenv("EXCHANGE_RATES_API_KEY") or None
EXCHANGE_RATES_API_TIMEOUT = int(os.getenv("EXCHANGE_RATES_API_TIMEOUT", "30"))

# Resolved series are cached under this alias. None never expires.
EXCHANGE_RATES_CACHE_ALIAS = "default"
EXCHANGE_RATES_CACHE_TIMEOUT = (
    int(os.getenv("EXCHANGE_RATES_CACHE_TIMEOUT"))
    if os.getenv("EXCHANGE_RATES_CACHE_TIMEOUT")
    else None
)
EXCHANGE_RATES_CACHE_PREFIX = "exchange_rates"

# Celery Configuration
CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL", "redis://localhost:6379/0")
CELERY_RESULT_BACKEND = os.getenv("CELERY_RESULT_BACKEND", CELERY_BROKER_URL)
CELERY_TIMEZONE = TIME_ZONE
CELERY_BEAT_SCHEDULE = {
    "refresh-currency-list": {
        "task": "currencies.tasks.refresh_currency_list",
        "schedule": crontab(minute="0", hour="7"),
    },
}

# Logging Configuration
LOG_LEVEL = os.getenv("FXRATES_LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{levelname} {asctime} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "currencies": {
            "level": LOG_LEVEL,
        },
        "external": {
            "level": LOG_LEVEL,
        },
    },
}
