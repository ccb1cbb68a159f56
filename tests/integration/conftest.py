"""
Fixtures for browser integration tests against the stub storefront.

The stub app is served by werkzeug in a background thread. Tests are
skipped when no browser can be launched (e.g. `playwright install` has
not been run).
"""

import threading
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from werkzeug.serving import make_server

from swimclub_e2e.config import Settings
from swimclub_e2e.driver import browser_session
from swimclub_e2e.exceptions import BrowserSetupError
from swimclub_e2e.session import Session
from swimclub_e2e.waits import WaitHelper

from .stub_app import STUB_PAGES, create_app


@pytest.fixture(scope="session")
def stub_url():
    """Serve the stub storefront on a free local port."""
    server = make_server("127.0.0.1", 0, create_app(), threaded=True)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_port}"
    server.shutdown()
    thread.join(timeout=5)


@pytest.fixture
def settings(stub_url) -> Settings:
    return Settings(
        _env_file=None,
        base_url=stub_url,
        browser="chromium",
        headless=True,
        explicit_wait=5.0,
        pages=STUB_PAGES,
    )


@pytest_asyncio.fixture
async def session(settings) -> AsyncGenerator[Session, None]:
    """A fresh headless browser session per test."""
    try:
        async with browser_session(settings) as live:
            yield live
    except BrowserSetupError as e:
        pytest.skip(f"No browser available: {e}")


@pytest.fixture
def wait(session, settings) -> WaitHelper:
    return WaitHelper(session, settings.explicit_wait)
