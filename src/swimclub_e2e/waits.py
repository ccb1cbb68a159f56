"""
Bounded-poll synchronization primitives.

Every wait re-resolves its locator on each poll, treats SessionError as
transient, and either returns a value or raises WaitTimeoutError once the
deadline has passed. Nothing here waits without a bound.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, TypeVar

from .exceptions import SessionError, WaitTimeoutError
from .locators import Locator
from .session import DialogHandle, Element, Session

logger = logging.getLogger(__name__)

T = TypeVar("T")


class WaitHelper:
    """Synchronization policy shared by all page objects of one session."""

    POLL_INTERVAL = 0.1
    CLICK_RETRIES = 3
    CLICK_RETRY_BACKOFF = 0.5

    def __init__(self, session: Session, timeout: float = 10.0,
                 poll_interval: Optional[float] = None):
        """
        Args:
            session: Browser session to poll.
            timeout: Default bound in seconds (the explicit-wait setting).
            poll_interval: Seconds between probes.
        """
        self.session = session
        self.timeout = timeout
        self.poll_interval = (
            self.POLL_INTERVAL if poll_interval is None else poll_interval)

    async def until(
        self,
        probe: Callable[[], Awaitable[Optional[T]]],
        condition: str,
        timeout: Optional[float] = None,
        locator: Optional[Locator] = None,
    ) -> T:
        """
        Poll ``probe`` until it yields a result.

        The probe returns the result when the condition holds, and None or
        False while it does not. A SessionError raised by the probe is
        remembered and polling continues.

        Args:
            probe: Coroutine function evaluated once per poll.
            condition: Description used in the timeout error.
            timeout: Override of the default bound, in seconds.
            locator: Locator the condition is about, for error reporting.

        Returns:
            The probe's result.

        Raises:
            WaitTimeoutError: If the bound elapses first.
        """
        bound = self.timeout if timeout is None else timeout
        loop = asyncio.get_running_loop()
        deadline = loop.time() + bound
        last_error: Optional[SessionError] = None

        while True:
            try:
                result = await probe()
            except SessionError as exc:
                last_error = exc
                result = None
            if result is not None and result is not False:
                return result

            remaining = deadline - loop.time()
            if remaining <= 0:
                logger.debug("Timed out waiting for %s", condition)
                raise WaitTimeoutError(
                    condition, bound, locator=locator, last_error=last_error)
            await asyncio.sleep(min(self.poll_interval, remaining))

    # Element state
    async def _visible(self, locator: Locator) -> Optional[Element]:
        element = await self.session.try_find(locator)
        if element is not None and await element.is_displayed():
            return element
        return None

    async def _clickable(self, locator: Locator) -> Optional[Element]:
        element = await self._visible(locator)
        if element is not None and await element.is_enabled():
            return element
        return None

    async def wait_visible(self, locator: Locator,
                           timeout: Optional[float] = None) -> Element:
        """Wait until an element matching ``locator`` exists and is displayed."""
        return await self.until(
            lambda: self._visible(locator),
            f"{locator} to be visible", timeout, locator)

    async def wait_clickable(self, locator: Locator,
                             timeout: Optional[float] = None) -> Element:
        """Wait until the element is visible and enabled."""
        return await self.until(
            lambda: self._clickable(locator),
            f"{locator} to be clickable", timeout, locator)

    async def wait_present(self, locator: Locator,
                           timeout: Optional[float] = None) -> Element:
        """Wait until the element is in the document, visible or not."""
        return await self.until(
            lambda: self.session.try_find(locator),
            f"{locator} to be present", timeout, locator)

    async def wait_invisible(self, locator: Locator,
                             timeout: Optional[float] = None) -> None:
        """
        Wait until nothing matching ``locator`` is displayed.

        Absence counts as success, so this returns on the first probe when
        the element never existed.
        """

        async def gone() -> bool:
            element = await self.session.try_find(locator)
            if element is None:
                return True
            try:
                return not await element.is_displayed()
            except SessionError:
                # Detached between lookup and check
                return True

        await self.until(gone, f"{locator} to disappear", timeout, locator)

    async def wait_text_contains(self, locator: Locator, text: str,
                                 timeout: Optional[float] = None) -> str:
        """Wait until the element's text contains ``text``; return the full text."""

        async def contains() -> Optional[str]:
            element = await self.session.try_find(locator)
            if element is None:
                return None
            current = await element.text()
            return current if text in current else None

        return await self.until(
            contains, f"{locator} to contain {text!r}", timeout, locator)

    async def wait_url_contains(self, substring: str,
                                timeout: Optional[float] = None) -> str:
        """Wait until the current URL contains ``substring``; return the URL."""

        async def url_matches() -> Optional[str]:
            url = await self.session.current_url()
            return url if substring in url else None

        return await self.until(
            url_matches, f"URL to contain {substring!r}", timeout)

    async def wait_alert(self, timeout: Optional[float] = None) -> DialogHandle:
        """Wait for a native dialog to be open."""

        async def dialog() -> Optional[DialogHandle]:
            return self.session.pending_dialog()

        return await self.until(dialog, "a native dialog", timeout)

    async def wait_for_condition(
        self,
        condition: Callable[[], Awaitable[Any]],
        description: str,
        timeout: Optional[float] = None,
    ) -> Any:
        """Wait until an arbitrary async predicate returns a truthy value."""

        async def holds() -> Any:
            return await condition() or None

        return await self.until(holds, description, timeout)

    # Actions
    async def safe_click(self, locator: Locator,
                         retries: int = CLICK_RETRIES,
                         timeout: Optional[float] = None) -> None:
        """
        Click once the element is clickable, retrying transient failures.

        Each attempt re-resolves the element. Between attempts the helper
        backs off for CLICK_RETRY_BACKOFF seconds. After ``retries``
        failed attempts the last attempt's error propagates.
        """
        if retries < 1:
            raise ValueError("retries must be at least 1")

        for attempt in range(1, retries + 1):
            try:
                element = await self.wait_clickable(locator, timeout)
                await element.click()
                return
            except (WaitTimeoutError, SessionError) as exc:
                if attempt == retries:
                    raise
                logger.debug(
                    "Click on %s failed (attempt %d/%d): %s",
                    locator, attempt, retries, exc)
                await self._backoff()

    async def _backoff(self) -> None:
        await asyncio.sleep(self.CLICK_RETRY_BACKOFF)

    async def scroll_into_view(self, locator: Locator,
                               timeout: Optional[float] = None) -> None:
        element = await self.wait_visible(locator, timeout)
        await element.scroll_into_view()
