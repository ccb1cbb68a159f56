"""
Pytest fixtures for swimclub-e2e tests.

This module provides common fixtures used across test modules.
"""

import os
import sys

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from swimclub_e2e.config import Settings  # noqa: E402
from swimclub_e2e.pages import Interactable  # noqa: E402
from swimclub_e2e.waits import WaitHelper  # noqa: E402

from fakes import FakeSession  # noqa: E402

# Short bounds keep the timing-based unit tests fast
UNIT_WAIT_TIMEOUT = 1.0
UNIT_POLL_INTERVAL = 0.02


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "integration: drives a real browser against the local stub app")
    config.addinivalue_line(
        "markers", "e2e: runs against the live application under test")


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Store each phase's report on the item for failure-screenshot fixtures."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)


@pytest.fixture
def settings() -> Settings:
    """Settings independent of the developer's environment and .env file."""
    return Settings(_env_file=None, base_url="http://shop.test")


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def wait(session: FakeSession) -> WaitHelper:
    return WaitHelper(session, timeout=UNIT_WAIT_TIMEOUT,
                      poll_interval=UNIT_POLL_INTERVAL)


@pytest.fixture
def ui(session: FakeSession, wait: WaitHelper, settings: Settings) -> Interactable:
    return Interactable(session, wait, settings)

