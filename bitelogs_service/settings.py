"""Django settings for the BiteLogs API.

All deployment-specific values are read from environment variables so the
same image can run locally, in CI and in production.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    return int(value) if value else default


SERVICE_VERSION = os.getenv("SERVICE_VERSION", "1.0.0")

SECRET_KEY = os.getenv(
    "DJANGO_SECRET_KEY", "django-insecure-bitelogs-development-key-change-me"
)

DEBUG = _env_bool("DJANGO_DEBUG", False)

ALLOWED_HOSTS = [
    host.strip()
    for host in os.getenv("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")
    if host.strip()
]

INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.staticfiles",
    "rest_framework",
    "core",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "core.middleware.RequestIDMiddleware",
    "core.middleware.RequestLoggingMiddleware",
    "core.middleware.SecurityHeadersMiddleware",
    "core.middleware.RateLimitMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "bitelogs_service.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
            ],
        },
    },
]

WSGI_APPLICATION = "bitelogs_service.wsgi.application"
ASGI_APPLICATION = "bitelogs_service.asgi.application"

# Database
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": os.getenv("POSTGRES_DB", "bitelogs"),
        "USER": os.getenv("POSTGRES_USER", "postgres"),
        "PASSWORD": os.getenv("POSTGRES_PASSWORD", "postgres"),
        "HOST": os.getenv("POSTGRES_HOST", "localhost"),
        "PORT": os.getenv("POSTGRES_PORT", "5432"),
        "CONN_MAX_AGE": _env_int("POSTGRES_CONN_MAX_AGE", 60),
        "OPTIONS": {
            "connect_timeout": _env_int("POSTGRES_CONNECT_TIMEOUT", 2),
        },
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Cache (backs rate limiting and health checks)
REDIS_URL = os.getenv("REDIS_URL")

if REDIS_URL:
    CACHES = {
        "default": {
            "BACKEND": "django.core.cache.backends.redis.RedisCache",
            "LOCATION": REDIS_URL,
        }
    }
else:
    CACHES = {
        "default": {
            "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        }
    }

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.PBKDF2PasswordHasher",
]

AUTH_PASSWORD_VALIDATORS: list[dict[str, str]] = []

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# Static and uploaded files
STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

MEDIA_URL = "/uploads/"
MEDIA_ROOT = Path(os.getenv("MEDIA_ROOT", str(BASE_DIR / "uploads")))

MAX_UPLOAD_SIZE = _env_int("MAX_UPLOAD_SIZE", 5 * 1024 * 1024)
DATA_UPLOAD_MAX_MEMORY_SIZE = MAX_UPLOAD_SIZE + 1024 * 1024
FILE_UPLOAD_MAX_MEMORY_SIZE = MAX_UPLOAD_SIZE

# Django REST Framework
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "core.auth.authentication.JWTAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
        "rest_framework.parsers.MultiPartParser",
        "rest_framework.parsers.FormParser",
    ],
    "EXCEPTION_HANDLER": "core.exceptions.handlers.custom_exception_handler",
}

# JWT
JWT_SECRET = os.getenv("JWT_SECRET", "bitelogs-development-jwt-secret-change-me")
JWT_ALGORITHM = "HS256"
JWT_EXPIRATION_SECONDS = _env_int("JWT_EXPIRATION_SECONDS", 7 * 24 * 60 * 60)

# Access policy
REVIEW_IMAGE_ADMIN_OVERRIDE = _env_bool("REVIEW_IMAGE_ADMIN_OVERRIDE", False)

# Rate limiting
RATE_LIMIT_ENABLED = _env_bool("RATE_LIMIT_ENABLED", True)
RATE_LIMIT_REQUESTS = _env_int("RATE_LIMIT_REQUESTS", 100)
RATE_LIMIT_WINDOW = _env_int("RATE_LIMIT_WINDOW", 15 * 60)
RATE_LIMIT_SCOPES = [
    {
        "name": "auth",
        "path_prefixes": ["/api/auth/login", "/api/auth/register"],
        "methods": ["POST"],
        "requests": _env_int("RATE_LIMIT_AUTH_REQUESTS", 5),
        "window": _env_int("RATE_LIMIT_AUTH_WINDOW", 15 * 60),
    },
    {
        "name": "reviews",
        "path_prefixes": ["/api/reviews"],
        "methods": ["POST"],
        "requests": _env_int("RATE_LIMIT_REVIEW_REQUESTS", 20),
        "window": _env_int("RATE_LIMIT_REVIEW_WINDOW", 60 * 60),
    },
]

# Logging is configured by core.logging.setup_logging() when the app starts.
TEST_MODE = False
