"""
Django settings for the MedRecord entry point.

Values are read from the environment, with a `.env` file at the project
root loaded first for local development.  In production set real
environment variables instead of relying on the `.env` file.
"""
from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv  # type: ignore

# -----------------------------------------------------------------------------
# Base & .env loading
# -----------------------------------------------------------------------------
BASE_DIR = Path(__file__).resolve().parent.parent
env_path = BASE_DIR / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

# -----------------------------------------------------------------------------
# Core flags & security baseline
# -----------------------------------------------------------------------------
ENV = os.getenv("ENV", "dev")
PORT = int(os.getenv("PORT", "5000"))

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = os.getenv("DEBUG", "0").lower() in {"1", "true", "yes"}

ALLOWED_HOSTS: list[str] = [
    h.strip() for h in os.getenv("ALLOWED_HOSTS", "127.0.0.1,localhost,0.0.0.0").split(",") if h.strip()
]

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.getenv("SECRET_KEY") or "replace-me-with-a-secure-secret-key"

# Schema reconciliation applied by `manage.py serve` before seeding:
#   alter - apply pending migrations in place (keeps data)
#   force - apply migrations, then flush every table
SCHEMA_SYNC = os.getenv("SCHEMA_SYNC", "alter").strip().lower()
if SCHEMA_SYNC not in {"alter", "force"}:
    raise RuntimeError(f"SCHEMA_SYNC must be 'alter' or 'force', got {SCHEMA_SYNC!r}")

if ENV == "prod":
    if DEBUG:
        raise RuntimeError("DEBUG must be 0 in prod")
    if "*" in ALLOWED_HOSTS:
        raise RuntimeError("ALLOWED_HOSTS cannot contain * in prod")
    if SECRET_KEY == "replace-me-with-a-secure-secret-key":
        raise RuntimeError("SECRET_KEY must be set securely in prod")
    if SCHEMA_SYNC == "force":
        raise RuntimeError("SCHEMA_SYNC=force would wipe the prod database")

# -----------------------------------------------------------------------------
# Applications
# -----------------------------------------------------------------------------
INSTALLED_APPS = [
    "corsheaders",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    # Third-party apps
    "rest_framework",
    "rest_framework.authtoken",
    # Local apps
    "core",
]

# Order is significant: CORS must see every request first so that pre-flight
# requests are answered before body decoding, logging or routing happen.
# ErrorBoundaryMiddleware only sees view exceptions; other middleware failures
# go to handler500, or to the technical 500 page while DEBUG is on.
MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",
    "core.middleware.PreflightMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "core.middleware.BodyDecodingMiddleware",
    "core.middleware.AccessLogMiddleware",
    "core.middleware.ErrorBoundaryMiddleware",
]

ROOT_URLCONF = "medrecord.urls"

TEMPLATES: list[dict] = []

WSGI_APPLICATION = "medrecord.wsgi.application"
ASGI_APPLICATION = "medrecord.asgi.application"

# -----------------------------------------------------------------------------
# Database configuration
# Priority:
#   1) DATABASE_URL (parsed by dj_database_url)
#   2) SQLite fallback
# -----------------------------------------------------------------------------
DB_CONN_MAX_AGE = int(os.getenv("DB_CONN_MAX_AGE", "120"))

database_url = os.getenv("DATABASE_URL", "").strip()
if database_url:
    import dj_database_url  # type: ignore

    DATABASES = {
        "default": dj_database_url.parse(
            database_url,
            conn_max_age=DB_CONN_MAX_AGE,
        )
    }
else:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": os.getenv("SQLITE_PATH", (BASE_DIR / "db.sqlite3").as_posix()),
        }
    }

# -----------------------------------------------------------------------------
# Password validation
# -----------------------------------------------------------------------------
AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
]

# -----------------------------------------------------------------------------
# Internationalization
# -----------------------------------------------------------------------------
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# -----------------------------------------------------------------------------
# Single-page app & uploads
# -----------------------------------------------------------------------------
# Files under SPA_ROOT are served at the site root; SPA_ENTRY_DOCUMENT is
# returned for client-side routes that match nothing else.
SPA_ROOT = Path(os.getenv("SPA_ROOT", str(BASE_DIR / "public")))
SPA_ENTRY_DOCUMENT = os.getenv("SPA_ENTRY_DOCUMENT", "index.html")

MEDIA_ROOT = Path(os.getenv("UPLOAD_ROOT", str(BASE_DIR / "uploads")))
MEDIA_URL = "/uploads/"

API_PREFIX = "/api"

# Avoid automatic slash appending to URLs (frontend uses no trailing slash)
APPEND_SLASH = False

# -----------------------------------------------------------------------------
# Auth / DRF
# -----------------------------------------------------------------------------
AUTH_USER_MODEL = "core.User"

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
        "rest_framework.parsers.FormParser",
        "rest_framework.parsers.MultiPartParser",
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "core.authentication.TokenAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.IsAuthenticated",
    ],
    "UNAUTHENTICATED_USER": None,
    "DATETIME_FORMAT": "iso-8601",
    # DRF errors become {msg, details}; anything else reaches the error boundary
    "EXCEPTION_HANDLER": "core.exceptions.api_exception_handler",
}

# -----------------------------------------------------------------------------
# CORS: reflect the caller's origin and allow credentials
# -----------------------------------------------------------------------------
CORS_ALLOW_ALL_ORIGINS = True
CORS_ALLOW_CREDENTIALS = True

# -----------------------------------------------------------------------------
# Security & proxy headers
# -----------------------------------------------------------------------------
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
USE_X_FORWARDED_HOST = True
if ENV == "prod":
    SECURE_HSTS_SECONDS = int(os.getenv("SECURE_HSTS_SECONDS", "3600"))
    SECURE_HSTS_INCLUDE_SUBDOMAINS = True

# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {"format": "%(message)s"},
        "verbose": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "access": {"class": "logging.StreamHandler", "formatter": "plain"},
        "console": {"class": "logging.StreamHandler", "formatter": "verbose"},
    },
    "loggers": {
        "medrecord.access": {"handlers": ["access"], "level": LOG_LEVEL, "propagate": True},
        "core": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": True},
    },
}

# -----------------------------------------------------------------------------
# Upload constraints (body decoding rejects larger payloads with 413)
# -----------------------------------------------------------------------------
UPLOAD_MAX_MB = int(os.getenv("UPLOAD_MAX_MB", "15"))
DATA_UPLOAD_MAX_MEMORY_SIZE = UPLOAD_MAX_MB * 1024 * 1024
