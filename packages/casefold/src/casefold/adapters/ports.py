"""Port interfaces for the casefold core package.

Ports define the contracts that adapters must implement.
These are Protocol classes (structural subtyping) for flexible testing.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CaserPort(Protocol):
    """Port interface for string case transformation.

    Implementations map a request path to its case-insensitive form.

    Contract:
        - transform() is pure and total: it never raises and always returns
          the same output for the same input
        - '/' characters are preserved as separators
    """

    def transform(self, path: str) -> str:
        """Transform path to its case-insensitive form.

        Args:
            path: Request path with leading slash.

        Returns:
            The transformed path.
        """
        ...


@runtime_checkable
class DirectoryListingPort(Protocol):
    """Port interface for reading directory entries.

    Implementations give the filesystem canonicalizer access to the real
    names stored on disk, preserving their casing.

    Contract:
        - list_names() returns entry names (not full paths) of a directory;
          the canonicalizer takes the first case-insensitive match in this
          order, so production listers return names sorted
        - list_names() raises OSError if the directory cannot be read
        - is_dir() never raises; unreadable paths report False
    """

    def list_names(self, directory: str) -> list[str]:
        """List entry names of a directory.

        Args:
            directory: Absolute path of the directory to read.

        Returns:
            Entry names in listing order.

        Raises:
            OSError: If the directory is missing or unreadable.
        """
        ...

    def is_dir(self, path: str) -> bool:
        """Check whether path is an existing directory.

        Args:
            path: Absolute filesystem path.

        Returns:
            True if path is a directory, False otherwise.
        """
        ...
