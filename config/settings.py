"""
POS Billing – Django Settings (Infrastructure Only)
====================================================
Django serves as the HTTP container for the billing engines.
The engines are the authority — Django does not dictate structure,
and no engine state touches the database.
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.getenv("BILLING_SECRET_KEY", "billing-dev-key-replace-before-deployment")

DEBUG = os.getenv("BILLING_DEBUG", "1") == "1"

ALLOWED_HOSTS = [
    host.strip()
    for host in os.getenv("BILLING_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")
    if host.strip()
]

# ── Installed Apps ────────────────────────────────────────────
# Django infrastructure only; the billing engines are plain Python.
INSTALLED_APPS = [
    "django.contrib.contenttypes",
]

# ── Middleware ────────────────────────────────────────────────
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

# ── URL & WSGI ────────────────────────────────────────────────
ROOT_URLCONF = "config.urls"
WSGI_APPLICATION = "config.wsgi.application"

# ── Database ──────────────────────────────────────────────────
# Engine state is in-memory for the lifetime of the process.
DATABASES = {}

# ── Internationalization ──────────────────────────────────────
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ── Billing Engine ────────────────────────────────────────────
BILLING = {
    "LOW_STOCK_THRESHOLD": int(os.getenv("BILLING_LOW_STOCK_THRESHOLD", "3")),
    "SEED_DEMO_DATA": os.getenv("BILLING_SEED_DEMO_DATA", "1") == "1",
    "DEFAULT_PAYMENT_MODE": os.getenv("BILLING_DEFAULT_PAYMENT_MODE", "paid"),
}

# ── Logging ───────────────────────────────────────────────────
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
    "loggers": {
        "billing": {
            "handlers": ["console"],
            "level": os.getenv("BILLING_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}
