"""
Browser launch and session construction.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from playwright.async_api import Browser, Playwright, async_playwright
from playwright.async_api import Error as PlaywrightError

from .config import Settings
from .exceptions import BrowserSetupError
from .session import Session

logger = logging.getLogger(__name__)

CHROMIUM_ARGS = [
    "--no-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
    "--disable-blink-features=AutomationControlled",
]

VIEWPORT = {"width": 1920, "height": 1080}

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


async def launch_browser(playwright: Playwright, settings: Settings) -> Browser:
    """
    Launch the configured browser engine.

    Raises:
        BrowserSetupError: If the browser cannot be started (for example
            when its binaries have not been installed).
    """
    browser_type = getattr(playwright, settings.browser)
    args = CHROMIUM_ARGS if settings.browser == "chromium" else []
    try:
        browser = await browser_type.launch(
            headless=settings.headless,
            slow_mo=settings.slow_mo,
            args=args,
        )
    except PlaywrightError as e:
        raise BrowserSetupError(
            f"Failed to launch {settings.browser}",
            details={"error": str(e)},
        ) from e
    logger.info("Launched %s (headless=%s)", settings.browser, settings.headless)
    return browser


async def open_session(browser: Browser, settings: Settings) -> Session:
    """Create a fresh browser context and wrap its page in a Session."""
    try:
        context = await browser.new_context(
            viewport=VIEWPORT,
            user_agent=USER_AGENT,
        )
        context.set_default_timeout(settings.implicit_wait_ms)
        page = await context.new_page()
    except PlaywrightError as e:
        raise BrowserSetupError(
            "Failed to create browser session", details={"error": str(e)}
        ) from e
    return Session(page)


@asynccontextmanager
async def browser_session(settings: Settings) -> AsyncIterator[Session]:
    """Run Playwright, a browser and one session for the duration of the block."""
    async with async_playwright() as playwright:
        browser = await launch_browser(playwright, settings)
        try:
            session = await open_session(browser, settings)
            try:
                yield session
            finally:
                await session.close()
        finally:
            await browser.close()
