"""Pytest configuration for Django unit tests."""

from pathlib import Path

import pytest


@pytest.fixture
def request_factory():
    """Django RequestFactory for creating test requests."""
    from django.test import RequestFactory

    return RequestFactory()


@pytest.fixture
def casefold_settings():
    """Override the CASEFOLD setting for the duration of a test.

    Example:
        def test_fold(casefold_settings):
            with casefold_settings({"MODE": "fold"}):
                middleware = CasefoldMiddleware(get_response)
    """
    from django.test import override_settings

    return lambda value: override_settings(CASEFOLD=value)


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Directory tree for fs mode: scripts/MyScript.bat."""
    (tmp_path / "scripts").mkdir()
    (tmp_path / "scripts" / "MyScript.bat").write_text("echo test")
    return tmp_path
