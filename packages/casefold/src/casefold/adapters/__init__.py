"""Interface adapters: Ports and filesystem access."""

from casefold.adapters.ports import CaserPort, DirectoryListingPort
from casefold.adapters.os_directory_lister import OSDirectoryLister

__all__ = [
    "CaserPort",
    "DirectoryListingPort",
    "OSDirectoryLister",
]
