"""Django middleware for case-insensitive request paths.

Usage:
    Add to Django MIDDLEWARE in settings, before anything that looks at
    the request path:

        MIDDLEWARE = [
            'casefold_django.middleware.CasefoldMiddleware',
            ...
        ]

        CASEFOLD = {
            'MODE': 'fold',              # 'lower' (default), 'fold' or 'fs'
            'ROOT': BASE_DIR / 'public', # required for 'fs'
            'EXCLUDE': ['/api/CaseSensitive/*'],
        }

    CasefoldMiddleware will:
    1. Rewrite request.path_info (and request.path) before URL resolution
    2. Expose the original path as request.META['HTTP_X_ORIGINAL_URI']
    3. Add an X-Original-URI header to the response
    4. Fail open (leave the path alone) if anything goes wrong
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from django.conf import settings as django_settings
from django.http import HttpRequest, HttpResponse

from casefold.domain.exceptions import CasefoldConfigError
from casefold.domain.rewrite import quote_path
from casefold.factories import create_path_rewriter
from casefold_django.settings import get_casefold_settings, header_meta_key

if TYPE_CHECKING:
    from typing import Callable

    from casefold.usecases.path_rewriter import PathRewriter

logger = logging.getLogger(__name__)


class CasefoldMiddleware:
    """Middleware that rewrites request paths case-insensitively.

    The rewriter is built once when Django loads the middleware and shared
    by every request. Only path_info (the part below SCRIPT_NAME) is
    rewritten. The query string is left untouched.

    Thread safety:
        - Each request is handled independently
        - The rewriter holds read-only configuration only
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        """Initialize the casefold middleware.

        Args:
            get_response: Django WSGI application callable
        """
        self.get_response = get_response
        self.rewriter: PathRewriter | None = None

        self._initialize_rewriter()

    def _initialize_rewriter(self) -> None:
        """Initialize PathRewriter from Django settings.

        If CASEFOLD is missing or invalid, rewriter remains None and
        requests pass through unchanged.
        """
        casefold_config = getattr(django_settings, "CASEFOLD", None)
        if casefold_config is None:
            logger.debug("CASEFOLD settings not found. Path rewriting disabled.")
            return

        try:
            casefold_settings = get_casefold_settings(casefold_config)
        except CasefoldConfigError as e:
            logger.warning(
                f"Invalid CASEFOLD settings: {e}. Path rewriting disabled."
            )
            return

        self.rewriter = create_path_rewriter(casefold_settings)
        logger.debug("CasefoldMiddleware initialized successfully.")

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Rewrite the request path, then pass the request on.

        Args:
            request: Django HttpRequest object

        Returns:
            Application response, with the original-path header if the
            path was rewritten
        """
        if self.rewriter is None or self.rewriter.is_passthrough:
            return self.get_response(request)

        original_path = request.path
        original_path_info = request.path_info

        try:
            outcome = self.rewriter.decide(original_path_info)
        except Exception as e:
            # Fail open: serve the path as received
            logger.warning(
                f"Casefold decision failed for {original_path!r}: {e}. Path unchanged."
            )
            return self.get_response(request)

        if not outcome.rewritten:
            return self.get_response(request)

        header_name = self.rewriter.settings.header_name
        header_value = quote_path(original_path)

        script_name = original_path[: len(original_path) - len(original_path_info)]
        request.path_info = outcome.path
        request.path = script_name + outcome.path
        request.META[header_meta_key(header_name)] = header_value
        # request.headers is cached on first access
        request.__dict__.pop("headers", None)

        logger.debug(f"Casefold rewrote {original_path!r} to {request.path!r}")

        response = self.get_response(request)
        response[header_name] = header_value
        return response
