"""Operating system directory lister adapter.

Implements DirectoryListingPort on top of os.scandir.
"""

from __future__ import annotations

import os


class OSDirectoryLister:
    """Adapter that reads directory entries from the local filesystem.

    Each listing opens and closes its own directory handle, so nothing is
    held between calls and the adapter is safe to share between threads.
    """

    def list_names(self, directory: str) -> list[str]:
        """List entry names of a directory.

        Args:
            directory: Absolute path of the directory to read.

        Returns:
            Entry names sorted by code point, independent of the order
            the filesystem reports them in.

        Raises:
            OSError: If the directory is missing or unreadable.
        """
        with os.scandir(directory) as entries:
            return sorted(entry.name for entry in entries)

    def is_dir(self, path: str) -> bool:
        """Check whether path is an existing directory."""
        return os.path.isdir(path)
