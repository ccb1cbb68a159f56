"""
Reachability probe for the application under test.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import requests

from .config import Settings

logger = logging.getLogger(__name__)

DEFAULT_PROBE_TIMEOUT = 3.0


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of one HTTP probe."""

    url: str
    reachable: bool
    status_code: Optional[int] = None
    error: Optional[str] = None


def probe_application(
    settings: Settings, timeout: float = DEFAULT_PROBE_TIMEOUT
) -> ProbeResult:
    """
    Fetch the login page to check that the storefront is being served.

    Any HTTP response below 500 counts as reachable; connection failures
    and server errors do not.
    """
    url = settings.url_for("login")
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        logger.info("Application not reachable at %s: %s", url, e)
        return ProbeResult(url=url, reachable=False, error=str(e))

    reachable = response.status_code < 500
    if not reachable:
        logger.info("Application at %s returned %d", url, response.status_code)
    return ProbeResult(url=url, reachable=reachable,
                       status_code=response.status_code)
