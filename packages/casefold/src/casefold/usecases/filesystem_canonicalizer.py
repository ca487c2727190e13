"""Filesystem canonicalizer use case.

Rewrites a request path to the casing its entries actually have on disk,
so that /scripts/myscript.bat becomes /scripts/MyScript.bat when that is
the name stored under the configured root.
"""

from __future__ import annotations

import logging
import os
import posixpath
from typing import TYPE_CHECKING

from casefold.adapters.os_directory_lister import OSDirectoryLister

if TYPE_CHECKING:
    from casefold.adapters.ports import DirectoryListingPort

logger = logging.getLogger(__name__)


def clean_path(path: str) -> str:
    """Normalize a slash-separated path lexically.

    Collapses repeated separators and '.' segments, resolves '..' and drops
    any trailing slash. Unlike posixpath.normpath, a leading '//' is
    collapsed to '/' as well.

    Args:
        path: Path to clean.

    Returns:
        The cleaned path, or '.' for an empty path.
    """
    cleaned = posixpath.normpath(path) if path else "."
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


class FilesystemCanonicalizer:
    """Resolves request paths against real directory entries under a root.

    For each path segment, the directory at the current level is listed and
    the entry is looked up by exact name first, then case-insensitively.
    When several entries differ only by case and none matches exactly, the
    first one in listing order wins. OSDirectoryLister sorts names by code
    point, so of FOO, Foo and foo the request /fOO resolves to FOO.

    Any segment equal to '..' rejects the whole path before the first
    directory is read. Every failure (missing root, unreadable directory,
    unmatched segment, file where a directory is needed) returns the
    original path and False; nothing is raised.

    Thread safety:
        - No state is mutated after construction
        - Each call performs its own directory reads (one per segment)
    """

    def __init__(
        self,
        root: str | None,
        lister: DirectoryListingPort | None = None,
    ) -> None:
        """Initialize the canonicalizer.

        Args:
            root: Directory request paths are resolved against. Relative
                  roots are made absolute. None or empty disables lookups.
            lister: Port for reading directory entries. Defaults to the
                    local filesystem.
        """
        if root and root.strip():
            self._root: str | None = os.path.abspath(root)
        else:
            self._root = None
        self._lister = lister if lister is not None else OSDirectoryLister()

    @property
    def root(self) -> str | None:
        """Return the absolute root directory, or None if not configured."""
        return self._root

    def canonicalize(self, path: str) -> tuple[str, bool]:
        """Rewrite path to its on-disk casing.

        Args:
            path: Request path with leading slash.

        Returns:
            Tuple of (canonical path, True) if every segment was found, or
            (path, False) if canonicalization could not be completed.
        """
        if self._root is None:
            return path, False

        if ".." in path.split("/"):
            logger.debug(f"Rejecting path with traversal segment: {path!r}")
            return path, False

        cleaned = clean_path(path)
        if not cleaned.startswith("/") or cleaned == "/":
            return path, False

        segments = cleaned[1:].split("/")
        resolved: list[str] = []
        current_dir = self._root
        last = len(segments) - 1

        for index, segment in enumerate(segments):
            try:
                names = self._lister.list_names(current_dir)
            except OSError as e:
                logger.debug(f"Cannot list {current_dir!r} while resolving {path!r}: {e}")
                return path, False

            match = self._match_entry(segment, names)
            if match is None:
                logger.debug(f"No entry for segment {segment!r} in {current_dir!r}")
                return path, False

            resolved.append(match)

            if index < last:
                current_dir = os.path.join(current_dir, match)
                if not self._lister.is_dir(current_dir):
                    logger.debug(f"Cannot descend into non-directory {current_dir!r}")
                    return path, False

        return "/" + "/".join(resolved), True

    @staticmethod
    def _match_entry(segment: str, names: list[str]) -> str | None:
        """Find the directory entry for a path segment.

        Args:
            segment: Path segment from the request.
            names: Entry names of the current directory in listing order.

        Returns:
            The exact match if present, else the first case-insensitive
            match, else None.
        """
        if segment in names:
            return segment

        lowered = segment.lower()
        for name in names:
            if name.lower() == lowered:
                return name

        return None
