"""
Browser session adapter over Playwright's async Page.

Session, Element and DialogHandle form the capability surface the wait
layer and the page objects are written against. Playwright errors are
translated into SessionError / StaleElementError so callers only deal with
this package's exception taxonomy.

Native dialogs are queued instead of being auto-handled. While one is open
the page's script thread is blocked, so DOM calls fail fast with
DialogOpenError rather than hanging until the dialog is resolved.
"""

import asyncio
import functools
import logging
from collections import deque
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional, TypeVar

from playwright.async_api import Dialog, ElementHandle, Page
from playwright.async_api import Error as PlaywrightError

from .exceptions import DialogOpenError, SessionError, StaleElementError
from .locators import Locator

logger = logging.getLogger(__name__)

T = TypeVar("T")

_DETACHED_MARKERS = (
    "not attached to the DOM",
    "Element is detached",
    "Execution context was destroyed",
)

# Bound for a click that was blocked by a dialog to finish once the dialog closes
SETTLE_TIMEOUT = 5.0


def translate_error(exc: PlaywrightError) -> SessionError:
    """Map a Playwright error onto the session error taxonomy."""
    message = getattr(exc, "message", None) or str(exc)
    if any(marker in message for marker in _DETACHED_MARKERS):
        return StaleElementError(message)
    return SessionError(message)


def _dom_call(
    func: Callable[..., Awaitable[T]]
) -> Callable[..., Awaitable[T]]:
    """Guard a DOM-touching coroutine: fail fast on open dialogs, translate errors."""

    @functools.wraps(func)
    async def wrapper(self: Any, *args: Any, **kwargs: Any) -> T:
        session: "Session" = getattr(self, "_session", self)
        session.ensure_unblocked()
        try:
            return await func(self, *args, **kwargs)
        except PlaywrightError as exc:
            raise translate_error(exc) from exc

    return wrapper


class Element:
    """
    Transient reference to one DOM node.

    Do not keep an Element across waits: the node may be replaced at any
    time and every call would then raise StaleElementError.
    """

    def __init__(self, session: "Session", handle: ElementHandle,
                 locator: Optional[Locator] = None):
        self._session = session
        self._handle = handle
        self.locator = locator

    def __repr__(self) -> str:
        return f"Element({self.locator})"

    @_dom_call
    async def text(self) -> str:
        """Rendered text of the element."""
        return await self._handle.inner_text()

    @_dom_call
    async def attribute(self, name: str) -> Optional[str]:
        return await self._handle.get_attribute(name)

    @_dom_call
    async def is_displayed(self) -> bool:
        return await self._handle.is_visible()

    @_dom_call
    async def is_enabled(self) -> bool:
        return await self._handle.is_enabled()

    @_dom_call
    async def click(self) -> None:
        await self._session._click(self._handle)

    @_dom_call
    async def send_keys(self, text: str) -> None:
        """Type text key by key, firing input events like a user would."""
        await self._handle.type(text)

    @_dom_call
    async def clear(self) -> None:
        await self._handle.fill("")

    @_dom_call
    async def fill(self, text: str) -> None:
        await self._handle.fill(text)

    @_dom_call
    async def press(self, key: str) -> None:
        await self._handle.press(key)

    @_dom_call
    async def select(self, value: str) -> None:
        await self._handle.select_option(value)

    @_dom_call
    async def set_files(self, path: str | Path) -> None:
        await self._handle.set_input_files(path)

    @_dom_call
    async def scroll_into_view(self) -> None:
        await self._handle.evaluate(
            "el => el.scrollIntoView({block: 'center'})")

    @_dom_call
    async def find_all(self, locator: Locator) -> list["Element"]:
        """Find descendants of this element."""
        handles = await self._handle.query_selector_all(locator.to_selector())
        return [Element(self._session, h, locator) for h in handles]


class DialogHandle:
    """A native alert/confirm/prompt dialog that is waiting to be resolved."""

    def __init__(self, session: "Session", dialog: Dialog):
        self._session = session
        self._dialog = dialog

    @property
    def kind(self) -> str:
        return self._dialog.type

    @property
    def message(self) -> str:
        return self._dialog.message

    async def accept(self, prompt_text: Optional[str] = None) -> None:
        await self._session._resolve_dialog(self._dialog, True, prompt_text)

    async def dismiss(self) -> None:
        await self._session._resolve_dialog(self._dialog, False)


class Session:
    """
    Live connection to one browser page.

    A Session is owned by a single scenario and issues one command at a
    time; it is not safe to share across concurrent callers.
    """

    def __init__(self, page: Page):
        self._page = page
        self._dialogs: deque[Dialog] = deque()
        self._dialog_opened = asyncio.Event()
        self._blocked_actions: list[asyncio.Future] = []
        page.on("dialog", self._on_dialog)

    @property
    def page(self) -> Page:
        """Underlying Playwright page, for test hooks such as tracing."""
        return self._page

    # Dialog bookkeeping
    def _on_dialog(self, dialog: Dialog) -> None:
        logger.info("Native %s dialog opened: %s", dialog.type, dialog.message)
        self._dialogs.append(dialog)
        self._dialog_opened.set()

    def ensure_unblocked(self) -> None:
        """Raise DialogOpenError if a native dialog is blocking the page."""
        if self._dialogs:
            raise DialogOpenError(self._dialogs[0].message)

    def pending_dialog(self) -> Optional[DialogHandle]:
        """Return the oldest unresolved native dialog, if any."""
        if not self._dialogs:
            return None
        return DialogHandle(self, self._dialogs[0])

    async def _resolve_dialog(self, dialog: Dialog, accept: bool,
                              prompt_text: Optional[str] = None) -> None:
        try:
            if accept and prompt_text is not None:
                await dialog.accept(prompt_text)
            elif accept:
                await dialog.accept()
            else:
                await dialog.dismiss()
        except PlaywrightError as exc:
            raise translate_error(exc) from exc
        finally:
            if dialog in self._dialogs:
                self._dialogs.remove(dialog)
            if not self._dialogs:
                self._dialog_opened.clear()
        logger.debug("Dialog %s", "accepted" if accept else "dismissed")
        await self._settle_blocked_actions()

    async def _click(self, handle: ElementHandle) -> None:
        # A click whose handler opens a native dialog does not return until
        # the dialog is resolved, so race it against the dialog event.
        click = asyncio.ensure_future(handle.click())
        opened = asyncio.ensure_future(self._dialog_opened.wait())
        try:
            done, _ = await asyncio.wait(
                {click, opened}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            opened.cancel()
        if click in done:
            await click
            return
        logger.debug("Click opened a native dialog; completion deferred")
        self._blocked_actions.append(click)

    async def _settle_blocked_actions(self) -> None:
        still_blocked = []
        for action in self._blocked_actions:
            opened = asyncio.ensure_future(self._dialog_opened.wait())
            done, _ = await asyncio.wait(
                {action, opened},
                timeout=SETTLE_TIMEOUT,
                return_when=asyncio.FIRST_COMPLETED,
            )
            opened.cancel()
            if action not in done:
                still_blocked.append(action)
            elif not action.cancelled() and action.exception() is not None:
                logger.warning(
                    "Action resumed after dialog failed: %s", action.exception())
        self._blocked_actions = still_blocked

    # Navigation
    @_dom_call
    async def navigate(self, url: str) -> None:
        """Navigate and return once the new document is parsed."""
        logger.info("Navigating to %s", url)
        await self._page.goto(url, wait_until="domcontentloaded")

    async def current_url(self) -> str:
        return self._page.url

    @_dom_call
    async def title(self) -> str:
        return await self._page.title()

    @_dom_call
    async def reload(self) -> None:
        await self._page.reload(wait_until="domcontentloaded")

    @_dom_call
    async def back(self) -> None:
        await self._page.go_back(wait_until="domcontentloaded")

    # Lookup
    @_dom_call
    async def try_find(self, locator: Locator) -> Optional[Element]:
        """Return the first match, or None when nothing matches."""
        handle = await self._page.query_selector(locator.to_selector())
        if handle is None:
            return None
        return Element(self, handle, locator)

    @_dom_call
    async def find_all(self, locator: Locator) -> list[Element]:
        handles = await self._page.query_selector_all(locator.to_selector())
        return [Element(self, h, locator) for h in handles]

    # Scripting
    @_dom_call
    async def execute_script(self, source: str, arg: Any = None) -> Any:
        """Evaluate a JavaScript function or expression in the page."""
        return await self._page.evaluate(source, arg)

    async def screenshot(self, path: str | Path) -> bytes:
        try:
            return await self._page.screenshot(path=str(path), full_page=True)
        except PlaywrightError as exc:
            raise translate_error(exc) from exc

    async def close(self) -> None:
        """Close the browser context that owns this page."""
        for action in self._blocked_actions:
            action.cancel()
        self._blocked_actions = []
        try:
            await self._page.context.close()
        except PlaywrightError as exc:
            raise translate_error(exc) from exc
