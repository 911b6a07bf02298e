"""
Django settings for storefetch project.

Values are read from the environment (and a local .env file when present).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "django-insecure-storefetch-dev-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() in ("1", "true", "yes")

ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")
    if host.strip()
]

INSTALLED_APPS = [
    "products",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "storefetch.middleware.cors_headers",
]

ROOT_URLCONF = "storefetch.urls"

WSGI_APPLICATION = "storefetch.wsgi.application"

# Lookups are stateless; nothing is persisted.
DATABASES = {}

USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Resilient product fetch
PRODUCT_FETCH = {
    "MAX_RETRIES": int(os.environ.get("STOREFETCH_MAX_RETRIES", 3)),
    "TIMEOUT": float(os.environ.get("STOREFETCH_TIMEOUT_SECONDS", 15)),
}
