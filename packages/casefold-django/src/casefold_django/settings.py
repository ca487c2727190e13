"""Settings reader for Django casefold adapter."""

import os
from typing import Any

from casefold.domain.exceptions import CasefoldConfigError
from casefold.domain.settings import CasefoldSettings
from casefold.factories import load_settings

# Map UPPER_CASE Django keys to snake_case domain fields
_FIELD_MAPPING = {
    "MODE": "mode",
    "ROOT": "root",
    "EXCLUDE": "exclude",
    "HEADER_NAME": "header_name",
    "ENABLED": "enabled",
}


def get_casefold_settings(django_settings: dict[str, Any]) -> CasefoldSettings:
    """Convert Django CASEFOLD settings dict to CasefoldSettings domain object.

    Maps UPPER_CASE Django keys to snake_case domain fields. Every key is
    optional; an empty dict yields the defaults (lower mode, no exclusions).

    Args:
        django_settings: Django settings dict with UPPER_CASE keys

    Returns:
        CasefoldSettings domain object

    Raises:
        CasefoldConfigError: If unknown keys are present or values are invalid
    """
    if not isinstance(django_settings, dict):
        raise CasefoldConfigError(
            f"CASEFOLD setting must be a dict, got: {type(django_settings).__name__}"
        )

    unknown = [key for key in django_settings if key not in _FIELD_MAPPING]
    if unknown:
        raise CasefoldConfigError(
            f"Unknown CASEFOLD settings: {', '.join(sorted(map(str, unknown)))}"
        )

    kwargs: dict[str, Any] = {}
    for django_key, domain_field in _FIELD_MAPPING.items():
        if django_settings.get(django_key) is not None:
            kwargs[domain_field] = django_settings[django_key]

    # ROOT is commonly given as BASE_DIR / "public"
    if isinstance(kwargs.get("root"), os.PathLike):
        kwargs["root"] = os.fspath(kwargs["root"])

    # mode/root/exclude parsing and validation happen in load_settings
    return load_settings(**kwargs)


def header_meta_key(header_name: str) -> str:
    """Return the request.META key Django uses for an HTTP header.

    Args:
        header_name: Header name, e.g. 'X-Original-URI'

    Returns:
        META key, e.g. 'HTTP_X_ORIGINAL_URI'
    """
    return "HTTP_" + header_name.upper().replace("-", "_")
