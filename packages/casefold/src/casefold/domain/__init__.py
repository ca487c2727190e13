"""Domain layer: Entities with zero external dependencies."""

from casefold.domain.settings import CasefoldMode, CasefoldSettings
from casefold.domain.exceptions import CasefoldConfigError
from casefold.domain.rewrite import RewriteOutcome

__all__ = [
    "CasefoldMode",
    "CasefoldSettings",
    "CasefoldConfigError",
    "RewriteOutcome",
]
