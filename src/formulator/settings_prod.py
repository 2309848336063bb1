"""
Production settings: Cloud Run with Cloud SQL and a private photo bucket.

Secrets (DJANGO_SECRET_KEY, DB_PASSWORD) arrive as environment variables
mounted from Secret Manager.
"""

import copy
import os
from datetime import timedelta

from .settings import *  # noqa: F401, F403

DEBUG = False
SECRET_KEY = os.environ["DJANGO_SECRET_KEY"]
ALLOWED_HOSTS = [h for h in os.environ.get("ALLOWED_HOSTS", "").split(",") if h]
CSRF_TRUSTED_ORIGINS = [f"https://{host}" for host in ALLOWED_HOSTS]

# Static files straight from the container (must follow SecurityMiddleware)
MIDDLEWARE.insert(1, "whitenoise.middleware.WhiteNoiseMiddleware")  # noqa: F405

SECURE_SSL_REDIRECT = True
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
SECURE_HSTS_SECONDS = 60 * 60 * 24 * 365
SECURE_HSTS_INCLUDE_SUBDOMAINS = True

# Cloud SQL over its unix socket when running on Cloud Run, TCP otherwise
_cloud_sql = os.environ.get("CLOUD_SQL_CONNECTION_NAME")
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": os.environ["DB_NAME"],
        "USER": os.environ["DB_USER"],
        "PASSWORD": os.environ["DB_PASSWORD"],
        "HOST": (
            f"/cloudsql/{_cloud_sql}"
            if _cloud_sql
            else os.environ.get("DB_HOST", "localhost")
        ),
        "PORT": "" if _cloud_sql else os.environ.get("DB_PORT", "5432"),
        "CONN_MAX_AGE": 60,
    }
}

# Ingredient, recipe and receipt photos are personal; the bucket stays private
# and templates get short-lived signed URLs.
GCS_BUCKET_NAME = os.environ.get("GCS_BUCKET_NAME", "formulator-storage")

STORAGES = {
    "default": {
        "BACKEND": "storages.backends.gcloud.GoogleCloudStorage",
        "OPTIONS": {
            "bucket_name": GCS_BUCKET_NAME,
            "querystring_auth": True,
            "expiration": timedelta(hours=1),
            "file_overwrite": False,
        },
    },
    "staticfiles": {
        "BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage",
    },
}

STATIC_URL = "/static/"
STATIC_ROOT = "/app/staticfiles"

# Phone photos of labels and receipts
DATA_UPLOAD_MAX_MEMORY_SIZE = 15 * 1024 * 1024
FILE_UPLOAD_MAX_MEMORY_SIZE = 5 * 1024 * 1024

# Same handlers as development, one JSON object per line for Cloud Logging
LOGGING = copy.deepcopy(LOGGING)  # noqa: F405
LOGGING["formatters"]["json"] = {
    "format": (
        '{"time": "%(asctime)s", "severity": "%(levelname)s", '
        '"logger": "%(name)s", "message": "%(message)s"}'
    ),
}
LOGGING["handlers"]["console"]["formatter"] = "json"
