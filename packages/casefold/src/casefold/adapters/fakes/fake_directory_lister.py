"""Fake directory lister for testing.

Provides a test double for DirectoryListingPort backed by an in-memory
tree, recording every directory read.
"""

from __future__ import annotations

import posixpath
from typing import Any


class FakeDirectoryLister:
    """Fake implementation of DirectoryListingPort for testing.

    The tree is a nested dict: a dict value is a directory, any other value
    is a file. Entry order follows dict insertion order, which lets tests
    control listing order.

    Example:
        >>> fake = FakeDirectoryLister("/srv", {"Docs": {"README.md": ""}})
        >>> fake.list_names("/srv/Docs")
        ['README.md']
        >>> fake.reads
        ['/srv/Docs']
    """

    def __init__(self, root: str, tree: dict[str, Any]) -> None:
        """Initialize with an in-memory tree mounted at root.

        Args:
            root: Absolute path the tree is mounted at.
            tree: Nested dict describing directories and files.
        """
        self._root = posixpath.normpath(root)
        self._tree = tree
        self.reads: list[str] = []
        self.unreadable: set[str] = set()

    def _lookup(self, path: str) -> Any:
        """Return the tree node at path, or None if it does not exist."""
        path = posixpath.normpath(path)
        if path == self._root:
            return self._tree

        prefix = self._root.rstrip("/") + "/"
        if not path.startswith(prefix):
            return None

        node: Any = self._tree
        for part in path[len(prefix) :].split("/"):
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return node

    def list_names(self, directory: str) -> list[str]:
        """Return entry names of an in-memory directory and record the read.

        Raises:
            NotADirectoryError: If directory is a file.
            FileNotFoundError: If directory does not exist.
            PermissionError: If directory was marked unreadable.
        """
        self.reads.append(directory)
        if posixpath.normpath(directory) in self.unreadable:
            raise PermissionError(f"Permission denied: {directory}")

        node = self._lookup(directory)
        if node is None:
            raise FileNotFoundError(f"No such directory: {directory}")
        if not isinstance(node, dict):
            raise NotADirectoryError(f"Not a directory: {directory}")
        return list(node)

    def is_dir(self, path: str) -> bool:
        """Return True if path is an in-memory directory."""
        return isinstance(self._lookup(path), dict)
