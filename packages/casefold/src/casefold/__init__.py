"""casefold: Case-insensitive request path rewriting for Python web apps."""

__version__ = "0.1.0"

from casefold.domain.settings import CasefoldMode, CasefoldSettings
from casefold.domain.exceptions import CasefoldConfigError
from casefold.domain.rewrite import RewriteOutcome
from casefold.factories import create_path_rewriter, load_settings
from casefold.usecases.path_rewriter import PathRewriter

__all__ = [
    "CasefoldMode",
    "CasefoldSettings",
    "CasefoldConfigError",
    "RewriteOutcome",
    "PathRewriter",
    "create_path_rewriter",
    "load_settings",
]
