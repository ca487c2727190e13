"""FastAPI adapter for casefold request path rewriting."""

from casefold_fastapi.middleware import CasefoldMiddleware
from casefold_fastapi.settings import get_casefold_settings

__all__ = ["CasefoldMiddleware", "get_casefold_settings"]
