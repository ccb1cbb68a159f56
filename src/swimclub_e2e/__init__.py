"""swimclub-e2e - End-to-end UI test suite for the HNT Swim Club storefront."""

from swimclub_e2e.__version__ import (
    __author__,
    __description__,
    __license__,
    __title__,
    __version__,
    __version_info__,
    get_version,
    get_version_info,
)

__all__ = [
    "__version__",
    "__version_info__",
    "__title__",
    "__description__",
    "__author__",
    "__license__",
    "get_version",
    "get_version_info",
]
