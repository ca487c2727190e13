"""Path rewrite decision use case."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from casefold.domain.rewrite import RewriteOutcome
from casefold.domain.settings import CasefoldMode
from casefold.usecases.caser import create_caser
from casefold.usecases.filesystem_canonicalizer import FilesystemCanonicalizer
from casefold.usecases.path_exclusion_matcher import PathExclusionMatcher

if TYPE_CHECKING:
    from casefold.adapters.ports import CaserPort, DirectoryListingPort
    from casefold.domain.settings import CasefoldSettings

logger = logging.getLogger(__name__)


class PathRewriter:
    """Decides whether and how a request path is rewritten.

    The strategy is resolved once at construction from the settings:
    LOWER and FOLD use a caser, FILESYSTEM uses a canonicalizer, and
    FILESYSTEM without a root never rewrites anything. Each decision:

    1. Leaves '' and '/' unchanged
    2. Leaves paths matching an exclude pattern unchanged
    3. Applies the strategy and reports a rewrite only if the path changed

    Thread safety:
        - No shared mutable state; safe to call decide() concurrently
        - FILESYSTEM decisions perform blocking directory reads
    """

    def __init__(
        self,
        settings: CasefoldSettings,
        caser: CaserPort | None = None,
        canonicalizer: FilesystemCanonicalizer | None = None,
        matcher: PathExclusionMatcher | None = None,
        lister: DirectoryListingPort | None = None,
    ) -> None:
        """Initialize the rewriter.

        Args:
            settings: Validated casefold settings.
            caser: Overrides the caser selected from settings.mode.
            canonicalizer: Overrides the canonicalizer built from settings.root.
            matcher: Overrides the matcher built from settings.exclude.
            lister: Directory lister for the default canonicalizer.
        """
        self._settings = settings
        self._matcher = (
            matcher if matcher is not None else PathExclusionMatcher.from_settings(settings)
        )
        self._caser: CaserPort | None = None
        self._canonicalizer: FilesystemCanonicalizer | None = None

        if settings.mode is CasefoldMode.FILESYSTEM:
            if canonicalizer is not None:
                self._canonicalizer = canonicalizer
            elif settings.has_root:
                self._canonicalizer = FilesystemCanonicalizer(settings.root, lister)
        else:
            self._caser = caser if caser is not None else create_caser(settings.mode)

    @property
    def settings(self) -> CasefoldSettings:
        """Return the settings this rewriter was built from."""
        return self._settings

    @property
    def is_passthrough(self) -> bool:
        """Return True if no request can ever be rewritten."""
        if not self._settings.enabled:
            return True
        return self._caser is None and self._canonicalizer is None

    @property
    def performs_io(self) -> bool:
        """Return True if decisions read directories."""
        return self._canonicalizer is not None and self._settings.enabled

    def decide(self, original_path: str) -> RewriteOutcome:
        """Decide the routing path for a request.

        Args:
            original_path: Request path as received (no query string).

        Returns:
            RewriteOutcome that is either unchanged or carries the new path.
        """
        if not original_path or original_path == "/":
            return RewriteOutcome.unchanged(original_path)

        if self.is_passthrough:
            return RewriteOutcome.unchanged(original_path)

        if not original_path.startswith("/"):
            logger.debug(f"Ignoring relative request path: {original_path!r}")
            return RewriteOutcome.unchanged(original_path)

        if self._matcher.is_excluded(original_path):
            logger.debug(f"Path excluded from casefold: {original_path!r}")
            return RewriteOutcome.unchanged(original_path)

        if self._caser is not None:
            return RewriteOutcome.rewrite(
                original_path, self._caser.transform(original_path)
            )

        if self._canonicalizer is None:
            return RewriteOutcome.unchanged(original_path)

        canonical, ok = self._canonicalizer.canonicalize(original_path)
        if not ok:
            return RewriteOutcome.unchanged(original_path)
        return RewriteOutcome.rewrite(original_path, canonical)


def decide(original_path: str, settings: CasefoldSettings) -> RewriteOutcome:
    """Decide the routing path for a single request.

    Convenience wrapper building a one-shot PathRewriter. Long-running
    callers should build one PathRewriter at startup and reuse it.

    Args:
        original_path: Request path as received.
        settings: Validated casefold settings.

    Returns:
        RewriteOutcome for original_path.
    """
    return PathRewriter(settings).decide(original_path)
