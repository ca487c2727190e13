"""Factory functions for building casefold components from configuration.

Configuration problems that must not stop the application (an unknown
mode, FILESYSTEM mode without a root) are resolved here with a warning.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from casefold.domain.exceptions import CasefoldConfigError
from casefold.domain.settings import CasefoldMode, CasefoldSettings
from casefold.usecases.path_rewriter import PathRewriter

if TYPE_CHECKING:
    from casefold.adapters.ports import DirectoryListingPort

logger = logging.getLogger(__name__)


def normalize_exclude(exclude: str | Iterable[str] | None) -> tuple[str, ...]:
    """Convert configured exclude patterns to a tuple.

    Args:
        exclude: A single pattern, an iterable of patterns, or None.

    Returns:
        Tuple of patterns, in configured order.

    Raises:
        CasefoldConfigError: If exclude is neither a string nor an iterable.
    """
    if exclude is None:
        return ()
    if isinstance(exclude, str):
        return (exclude,)
    try:
        return tuple(exclude)
    except TypeError as e:
        raise CasefoldConfigError(
            f"exclude must be a pattern or a list of patterns, got: {exclude!r}"
        ) from e


def load_settings(
    mode: str | CasefoldMode | None = None,
    root: str | None = None,
    exclude: str | Iterable[str] | None = None,
    **kwargs: Any,
) -> CasefoldSettings:
    """Build CasefoldSettings from raw configuration values.

    Args:
        mode: Mode string ('lower', 'fold' or 'fs'); matched ignoring case
              and surrounding whitespace. Unknown values fall back to
              'lower' with a warning.
        root: Canonical root directory for 'fs' mode.
        exclude: Glob pattern or patterns to leave untouched.
        **kwargs: Remaining CasefoldSettings fields (header_name, enabled).

    Returns:
        Validated CasefoldSettings.

    Raises:
        CasefoldConfigError: If a value has the wrong type or is invalid.
    """
    resolved, recognized = CasefoldMode.parse(mode)
    if not recognized:
        logger.warning(f"unknown casefold mode {mode!r}; defaulting to lower")

    if root is not None and not isinstance(root, str):
        raise CasefoldConfigError(f"root must be a string, got: {root!r}")

    return CasefoldSettings(
        mode=resolved,
        root=root or None,
        exclude=normalize_exclude(exclude),
        **kwargs,
    )


def create_path_rewriter(
    settings: CasefoldSettings,
    lister: DirectoryListingPort | None = None,
) -> PathRewriter:
    """Create the PathRewriter for a set of settings.

    Args:
        settings: Validated casefold settings.
        lister: Directory lister for FILESYSTEM mode. Defaults to the local
                filesystem.

    Returns:
        A PathRewriter ready to be shared between requests.
    """
    if settings.mode is CasefoldMode.FILESYSTEM and not settings.has_root:
        logger.warning("fs mode enabled but root not set; skipping canonicalization")

    rewriter = PathRewriter(settings, lister=lister)
    logger.debug(
        f"Casefold rewriter created. Mode: {settings.mode.value}, "
        f"Root: {settings.root}, Exclude: {list(settings.exclude)}"
    )
    return rewriter
