"""Django app configuration for casefold."""

import logging
import os

from django.apps import AppConfig
from django.conf import settings as django_settings

from casefold.domain.exceptions import CasefoldConfigError
from casefold.domain.settings import CasefoldMode
from casefold_django.exceptions import CasefoldImproperlyConfigured
from casefold_django.settings import get_casefold_settings

logger = logging.getLogger(__name__)


class CasefoldDjangoConfig(AppConfig):
    """Django app configuration for casefold adapter."""

    name = "casefold_django"
    verbose_name = "Casefold Django Adapter"

    def ready(self) -> None:
        """Validate CASEFOLD settings on startup."""
        casefold_config = getattr(django_settings, "CASEFOLD", None)
        if casefold_config is None:
            logger.info(
                "CASEFOLD settings not found. CasefoldMiddleware will pass requests through."
            )
            return

        try:
            casefold_settings = get_casefold_settings(casefold_config)
        except CasefoldConfigError as e:
            raise CasefoldImproperlyConfigured(f"Invalid CASEFOLD settings: {e}") from e

        if not casefold_settings.enabled:
            logger.info("Casefold is disabled in settings.")
            return

        if casefold_settings.mode is not CasefoldMode.FILESYSTEM:
            return

        if not casefold_settings.has_root:
            logger.warning(
                "CASEFOLD MODE is 'fs' but ROOT is not set; skipping canonicalization"
            )
        elif not os.path.isdir(casefold_settings.root or ""):
            logger.warning(
                f"CASEFOLD ROOT does not exist or is not a directory: "
                f"{casefold_settings.root}. Paths will be served as received."
            )
