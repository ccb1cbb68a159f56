"""
Shared capability object for page objects.

Pages do not inherit behaviour; each one holds an Interactable and builds
its named operations from these helpers. Read helpers degrade to neutral
values when their element is absent. Mutating helpers wait for the element
to be actionable, act, and return without waiting for the effect.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..config import Settings
from ..exceptions import (
    ActionUnavailableError,
    ConfirmationUnresolvedError,
    WaitTimeoutError,
)
from ..locators import Locator
from ..session import Session
from ..waits import WaitHelper

logger = logging.getLogger(__name__)

# Bound for probing optional controls that may legitimately be missing
OPTIONAL_CONTROL_TIMEOUT = 1.0


class ConfirmationSurface(Enum):
    """Which UI confirmed a confirm-then-act flow."""

    MODAL = "modal"
    ALERT = "alert"
    NONE = "none"


@dataclass(frozen=True)
class Banner:
    """Snapshot of a transient status message."""

    text: str
    css_class: str

    @property
    def is_success(self) -> bool:
        return "success" in self.css_class

    @property
    def is_error(self) -> bool:
        return "error" in self.css_class


class Interactable:
    """Session, wait policy and settings bundled for page objects."""

    def __init__(self, session: Session, wait: WaitHelper, settings: Settings):
        self.session = session
        self.wait = wait
        self.settings = settings

    @classmethod
    def for_session(cls, session: Session, settings: Settings) -> "Interactable":
        """Build with a WaitHelper using the configured explicit wait."""
        return cls(session, WaitHelper(session, settings.explicit_wait), settings)

    # Navigation
    async def open(self, page: str, **query: Any) -> None:
        """Navigate to a logical screen without waiting for its content."""
        await self.session.navigate(self.settings.url_for(page, **query))

    # Mutations
    async def fill(self, locator: Locator, value: str,
                   timeout: Optional[float] = None) -> None:
        element = await self.wait.wait_visible(locator, timeout)
        await element.clear()
        await element.send_keys(value)

    async def fill_if_present(self, locator: Locator, value: str) -> bool:
        """Fill an optional field; return False when the page lacks it."""
        try:
            await self.fill(locator, value, OPTIONAL_CONTROL_TIMEOUT)
        except WaitTimeoutError:
            logger.warning("Optional field %s not available", locator)
            return False
        return True

    async def click(self, locator: Locator,
                    timeout: Optional[float] = None) -> None:
        await self.wait.safe_click(locator, timeout=timeout)

    async def click_if_present(self, locator: Locator, timeout: float) -> bool:
        """
        Click an optional control; return False when it never becomes clickable.

        The control gets a single wait of ``timeout``. Only a control that
        shows up goes through the retrying click.
        """
        try:
            await self.wait.wait_clickable(locator, timeout)
        except WaitTimeoutError:
            return False
        await self.click(locator)
        return True

    async def click_nth(self, locator: Locator, index: int, action: str,
                        timeout: Optional[float] = None) -> None:
        """
        Click the ``index``-th element matching ``locator``.

        Raises:
            WaitTimeoutError: If no match becomes visible.
            ActionUnavailableError: If fewer than ``index + 1`` elements match.
        """
        await self.wait.wait_visible(locator, timeout)
        elements = await self.session.find_all(locator)
        if index < 0 or index >= len(elements):
            raise ActionUnavailableError(action, locator, index, len(elements))
        await elements[index].click()

    # Reads
    async def count(self, locator: Locator, timeout: float) -> int:
        """Number of matches once one is visible; 0 if none appears."""
        try:
            await self.wait.wait_visible(locator, timeout)
        except WaitTimeoutError:
            return 0
        return len(await self.session.find_all(locator))

    async def text_or_empty(self, locator: Locator, timeout: float) -> str:
        try:
            element = await self.wait.wait_visible(locator, timeout)
            return await element.text()
        except WaitTimeoutError:
            return ""

    async def attribute_or_empty(self, locator: Locator, name: str,
                                 timeout: float) -> str:
        try:
            element = await self.wait.wait_present(locator, timeout)
            return await element.attribute(name) or ""
        except WaitTimeoutError:
            return ""

    async def nth_text_or_empty(self, locator: Locator, index: int,
                                timeout: float) -> str:
        try:
            await self.wait.wait_visible(locator, timeout)
        except WaitTimeoutError:
            return ""
        elements = await self.session.find_all(locator)
        if 0 <= index < len(elements):
            return await elements[index].text()
        return ""

    async def is_displayed(self, locator: Locator, timeout: float = 0) -> bool:
        """Whether a match is displayed within ``timeout`` (one probe by default)."""
        try:
            await self.wait.wait_visible(locator, timeout)
        except WaitTimeoutError:
            return False
        return True

    async def read_banner(self, locator: Locator, timeout: float) -> Banner:
        """Text and class of a status message; empty when none shows up."""
        try:
            element = await self.wait.wait_visible(locator, timeout)
            return Banner(await element.text(),
                          await element.attribute("class") or "")
        except WaitTimeoutError:
            return Banner("", "")

    # Confirm-then-act
    async def resolve_confirmation(
        self,
        modal: Locator,
        confirm_button: Locator,
        action: str,
        modal_timeout: float = 2.0,
        alert_timeout: float = 2.0,
        required: bool = True,
    ) -> ConfirmationSurface:
        """
        Accept whichever confirmation UI the triggering click produced.

        An in-page modal is tried first; the native dialog is tried once,
        only when the modal does not show up.

        Raises:
            ConfirmationUnresolvedError: If ``required`` and neither appears.
        """
        try:
            await self.wait.wait_visible(modal, modal_timeout)
        except WaitTimeoutError:
            logger.debug("No confirmation modal for %s; trying dialog", action)
        else:
            await self.wait.safe_click(confirm_button)
            logger.info("Confirmed %s via modal", action)
            return ConfirmationSurface.MODAL

        try:
            dialog = await self.wait.wait_alert(alert_timeout)
        except WaitTimeoutError:
            if required:
                raise ConfirmationUnresolvedError(
                    action, modal_timeout, alert_timeout)
            logger.info("No confirmation surface for %s", action)
            return ConfirmationSurface.NONE

        await dialog.accept()
        logger.info("Confirmed %s via native dialog", action)
        return ConfirmationSurface.ALERT
