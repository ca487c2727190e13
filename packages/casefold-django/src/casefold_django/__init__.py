"""Django adapter for casefold request path rewriting."""

from casefold_django.apps import CasefoldDjangoConfig
from casefold_django.exceptions import CasefoldImproperlyConfigured
from casefold_django.settings import get_casefold_settings

__version__ = "0.1.0"

__all__ = [
    "CasefoldDjangoConfig",
    "CasefoldImproperlyConfigured",
    "get_casefold_settings",
]
