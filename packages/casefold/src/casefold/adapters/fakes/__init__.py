"""Fake adapters for testing.

This module provides test doubles for port interfaces, enabling
deterministic testing without real I/O operations.
"""

from casefold.adapters.fakes.fake_directory_lister import FakeDirectoryLister

__all__ = [
    "FakeDirectoryLister",
]
