"""Django adapter exceptions.

Exception hierarchy:
- CasefoldImproperlyConfigured: Django-specific exception for invalid
  CASEFOLD settings. Inherits from Django's ImproperlyConfigured so that
  startup fails the same way it does for any other broken setting.

Relationship to domain exceptions:
- CasefoldConfigError (from domain) is raised by the core when a value has
  the wrong type or is invalid.
- This adapter exception wraps it at application startup. Request handling
  never raises either of them.
"""

from django.core.exceptions import ImproperlyConfigured


class CasefoldImproperlyConfigured(ImproperlyConfigured):
    """Raised at startup when the CASEFOLD setting cannot be used."""

    pass
