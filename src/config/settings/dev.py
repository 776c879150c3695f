"""
Local development settings. Falls back to SQLite when no Postgres host is
configured so `manage.py runserver` works without docker.
"""
from .base import *  # noqa: F403

DEBUG = True

if not get_env("POSTGRES_HOST"):  # noqa: F405
    DATABASES = {  # noqa: F405
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",  # noqa: F405
        }
    }
