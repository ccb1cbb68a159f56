"""
Pytest fixtures for E2E scenarios against the live storefront.

This module provides fixtures for browser sessions, page objects,
authentication and test data. Every scenario is skipped when the
configured application is not reachable, and a failing scenario leaves a
screenshot under ``<results_dir>/screenshots``.
"""

import logging
from typing import AsyncGenerator

import pytest
import pytest_asyncio

from swimclub_e2e.auth import AuthStorage
from swimclub_e2e.config import Settings, get_settings
from swimclub_e2e.data import DataFactory
from swimclub_e2e.driver import browser_session
from swimclub_e2e.exceptions import BrowserSetupError, SessionError
from swimclub_e2e.pages import (
    AdminPlayersPage,
    CartPage,
    HomePage,
    Interactable,
    LoginPage,
    OrdersPage,
    ProductDetailPage,
    RegisterPage,
)
from swimclub_e2e.preflight import probe_application
from swimclub_e2e.session import Session
from swimclub_e2e.waits import WaitHelper

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration
# =============================================================================

@pytest.fixture(scope="session")
def live_app():
    """Skip the whole suite when the application under test is down."""
    result = probe_application(get_settings())
    if not result.reachable:
        pytest.skip(
            f"Application not reachable at {result.url}: "
            f"{result.error or result.status_code}")
    return result


@pytest.fixture
def settings(live_app) -> Settings:
    return get_settings()


# =============================================================================
# Browser Fixtures
# =============================================================================

async def capture_failure(request, session: Session, settings: Settings) -> None:
    """Save a full-page screenshot if the test body failed."""
    report = getattr(request.node, "rep_call", None)
    if report is None or not report.failed:
        return

    screenshot_dir = settings.results_dir / "screenshots"
    screenshot_dir.mkdir(parents=True, exist_ok=True)
    path = screenshot_dir / f"{request.node.name}.png"
    try:
        await session.screenshot(path)
    except SessionError as e:
        logger.warning("Could not capture screenshot for %s: %s",
                       request.node.name, e)
    else:
        logger.info("Saved failure screenshot to %s", path)


@pytest_asyncio.fixture
async def session(request, settings) -> AsyncGenerator[Session, None]:
    """A fresh browser session per scenario."""
    try:
        async with browser_session(settings) as live:
            yield live
            await capture_failure(request, live, settings)
    except BrowserSetupError as e:
        pytest.skip(f"No browser available: {e}")


@pytest.fixture
def wait(session, settings) -> WaitHelper:
    return WaitHelper(session, settings.explicit_wait)


@pytest.fixture
def ui(session, wait, settings) -> Interactable:
    return Interactable(session, wait, settings)


@pytest.fixture
def auth(session) -> AuthStorage:
    return AuthStorage(session)


@pytest.fixture
def data_factory(settings) -> DataFactory:
    return DataFactory(settings)


# =============================================================================
# Page Object Fixtures
# =============================================================================

@pytest.fixture
def login_page(ui) -> LoginPage:
    return LoginPage(ui)


@pytest.fixture
def register_page(ui) -> RegisterPage:
    return RegisterPage(ui)


@pytest.fixture
def home_page(ui) -> HomePage:
    return HomePage(ui)


@pytest.fixture
def product_page(ui) -> ProductDetailPage:
    return ProductDetailPage(ui)


@pytest.fixture
def cart_page(ui) -> CartPage:
    return CartPage(ui)


@pytest.fixture
def orders_page(ui) -> OrdersPage:
    return OrdersPage(ui)


@pytest.fixture
def admin_page(ui) -> AdminPlayersPage:
    return AdminPlayersPage(ui)


# =============================================================================
# Authentication Fixtures
# =============================================================================

async def login_as(login_page: LoginPage, auth: AuthStorage, wait: WaitHelper,
                   email: str, password: str) -> None:
    """Log in through the UI and wait for the stored login flag."""
    await login_page.open()
    await login_page.login(email, password)
    await wait.wait_for_condition(auth.is_logged_in, f"{email} to be logged in")


@pytest_asyncio.fixture
async def logged_in_user(login_page, auth, wait, settings) -> str:
    await login_as(login_page, auth, wait,
                   settings.user_email, settings.user_password)
    return settings.user_email


@pytest_asyncio.fixture
async def logged_in_admin(login_page, auth, wait, settings) -> str:
    await login_as(login_page, auth, wait,
                   settings.admin_email, settings.admin_password)
    role = await auth.get_user_role()
    if role != "admin":
        pytest.fail(f"Admin login failed (role={role!r}); cannot run admin tests")
    return settings.admin_email
