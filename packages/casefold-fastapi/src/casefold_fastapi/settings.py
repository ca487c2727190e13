"""Settings reader for FastAPI casefold adapter."""

from typing import Any

from casefold.domain.exceptions import CasefoldConfigError
from casefold.domain.settings import CasefoldSettings
from casefold.factories import load_settings

# Fields accepted in Pydantic settings
_KNOWN_FIELDS = ("mode", "root", "exclude", "header_name", "enabled")


def get_casefold_settings(pydantic_settings: dict[str, Any]) -> CasefoldSettings:
    """Convert Pydantic settings dict to CasefoldSettings domain object.

    Maps snake_case Pydantic keys directly to domain fields (both are snake_case).
    Every field is optional; an empty dict yields the defaults (lower mode).

    Args:
        pydantic_settings: Pydantic settings dict with snake_case keys

    Returns:
        CasefoldSettings domain object

    Raises:
        CasefoldConfigError: If unknown settings are present or values are invalid
    """
    unknown = [key for key in pydantic_settings if key not in _KNOWN_FIELDS]
    if unknown:
        raise CasefoldConfigError(
            f"Unknown casefold settings: {', '.join(sorted(unknown))}"
        )

    # Extract values directly (no mapping needed - both use snake_case)
    kwargs: dict[str, Any] = {
        field: pydantic_settings[field]
        for field in _KNOWN_FIELDS
        if field in pydantic_settings and pydantic_settings[field] is not None
    }

    # mode/root/exclude parsing and validation happen in load_settings
    return load_settings(**kwargs)
