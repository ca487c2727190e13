"""Shared fixtures for Django adapter BDD tests."""

from __future__ import annotations

import os

import pytest

# Set Django settings module before any Django imports
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "django.conf.global_settings")

import django  # noqa: E402
from django.conf import settings  # noqa: E402

if not settings.configured:
    settings.configure(
        DEBUG=True,
        INSTALLED_APPS=["casefold_django"],
        USE_TZ=True,
        SECRET_KEY="test-secret-key-for-bdd-tests",
    )
    django.setup()


@pytest.fixture
def context() -> dict:
    """Shared context for passing state between steps."""
    return {}
