"""Pytest configuration for Django casefold adapter tests.

Django is configured at import time so test modules can import Django code.
"""

import os

# Set Django settings module before any Django imports
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "django.conf.global_settings")

import django  # noqa: E402
from django.conf import settings  # noqa: E402

# Configure Django settings if not already configured
if not settings.configured:
    settings.configure(
        DEBUG=True,
        INSTALLED_APPS=["casefold_django"],
        USE_TZ=True,
        SECRET_KEY="test-secret-key-for-unit-tests",
    )
    django.setup()
