"""Version information for swimclub-e2e."""

__version__ = "0.1.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Release information
__title__ = "swimclub-e2e"
__description__ = "End-to-end UI test suite for the HNT Swim Club storefront"
__author__ = "HNT Swim Club QA"
__license__ = "MIT"


def get_version() -> str:
    """Return the current version string."""
    return __version__


def get_version_info() -> tuple[int, ...]:
    """Return the version as a tuple of integers."""
    return __version_info__
