"""
CI settings: production config against a real Postgres service, without the
HTTPS redirect so Django's test client (which speaks plain HTTP) can reach
views. Use via: DJANGO_SETTINGS_MODULE=config.settings.ci
"""
import tempfile
from pathlib import Path

from .production import *  # noqa: F403

SECURE_SSL_REDIRECT = False

# CompressedManifestStaticFilesStorage requires collectstatic to have been run
# (it reads staticfiles.json). Use the plain storage backend in tests instead.
STORAGES = {
    "default": {
        "BACKEND": "django.core.files.storage.FileSystemStorage",
    },
    "staticfiles": {
        "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
    },
}

MEDIA_ROOT = Path(tempfile.mkdtemp(prefix="roster-ci-media-"))
PUBLIC_BASE_URL = "http://testserver"
