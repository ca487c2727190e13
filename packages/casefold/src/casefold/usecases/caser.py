"""Case transformation strategies for request paths."""

from __future__ import annotations

from typing import TYPE_CHECKING

from casefold.domain.settings import CasefoldMode

if TYPE_CHECKING:
    from casefold.adapters.ports import CaserPort


class LowerCaser:
    """Unicode lowercase mapping.

    Every character goes through str.lower(); characters without a
    lowercase form (digits, punctuation, '/') are left as they are.
    """

    def transform(self, path: str) -> str:
        """Return path lowercased."""
        return path.lower()


class FoldCaser:
    """Full Unicode case folding.

    Locale-independent and not length-preserving: 'ß' folds to 'ss' and
    'ﬁ' to 'fi'. Use this when paths contain non-ASCII names that should
    compare equal regardless of case.
    """

    def transform(self, path: str) -> str:
        """Return path case-folded."""
        return path.casefold()


def create_caser(mode: CasefoldMode) -> CaserPort | None:
    """Resolve a mode to its case transformation strategy.

    Args:
        mode: Configured transformation mode.

    Returns:
        The caser for LOWER and FOLD, or None for FILESYSTEM, which rewrites
        paths by directory lookup instead.
    """
    if mode is CasefoldMode.FOLD:
        return FoldCaser()
    if mode is CasefoldMode.FILESYSTEM:
        return None
    return LowerCaser()
