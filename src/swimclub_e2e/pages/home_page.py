"""
Home Page Object (trang chủ) for navigation and product listing tests.
"""

import logging

from ..exceptions import ActionUnavailableError, WaitTimeoutError
from ..locators import By
from .interactable import OPTIONAL_CONTROL_TIMEOUT, Interactable

logger = logging.getLogger(__name__)


class HomePage:
    """Page Object for the storefront home page."""

    PAGE = "home"
    PRODUCT_TIMEOUT = 5.0

    # Selectors
    LOGO = By.css(".logo")
    LOGIN_LINK = By.css('a[href*="login.html"]')
    PROFILE_LINK = By.css('a[href*="nguoidung.html"]')
    CART_LINK = By.css('a[href*="giohang"], a[href*="ghtt.html"]')
    PRODUCTS_LINK = By.css('a[href*="danhmuc_sp.html"]')
    PLAYERS_LINK = By.css('a[href*="tuyenthu"]')
    EVENTS_LINK = By.css('a[href*="sukien"]')
    PRODUCT_CARDS = By.css(".product-card, .product-item")
    ADD_TO_CART_BUTTONS = By.css(".add-btn, .btn-add-cart")
    SEARCH_INPUT = By.css('input[type="search"], .search-input')

    def __init__(self, ui: Interactable):
        self.ui = ui

    async def open(self) -> None:
        await self.ui.open(self.PAGE)

    async def is_logged_in(self) -> bool:
        """Whether the header shows the profile link."""
        try:
            await self.ui.wait.wait_present(
                self.PROFILE_LINK, OPTIONAL_CONTROL_TIMEOUT)
        except WaitTimeoutError:
            return False
        return True

    # Navigation links
    async def click_login_link(self) -> None:
        await self.ui.click(self.LOGIN_LINK)

    async def click_profile_link(self) -> None:
        await self.ui.click(self.PROFILE_LINK)

    async def click_cart_link(self) -> None:
        await self.ui.click(self.CART_LINK)

    async def click_products_link(self) -> None:
        await self.ui.click(self.PRODUCTS_LINK)

    async def click_players_link(self) -> None:
        await self.ui.click(self.PLAYERS_LINK)

    # Products
    async def get_product_count(self) -> int:
        return await self.ui.count(self.PRODUCT_CARDS, self.PRODUCT_TIMEOUT)

    async def click_first_product(self) -> None:
        """
        Open the first product card.

        Raises:
            ActionUnavailableError: If the page lists no products.
        """
        try:
            await self.ui.click_nth(
                self.PRODUCT_CARDS, 0, "open first product",
                timeout=self.PRODUCT_TIMEOUT)
        except WaitTimeoutError as exc:
            raise ActionUnavailableError(
                "open first product", self.PRODUCT_CARDS, 0, 0) from exc

    async def search(self, keyword: str) -> bool:
        """
        Type ``keyword`` into the search box and submit with Enter.

        Returns:
            False when this page has no search box.
        """
        try:
            box = await self.ui.wait.wait_visible(
                self.SEARCH_INPUT, OPTIONAL_CONTROL_TIMEOUT)
        except WaitTimeoutError:
            logger.warning("Search is not available on %s",
                           await self.ui.session.current_url())
            return False
        await box.clear()
        await box.send_keys(keyword)
        await box.press("Enter")
        return True

    async def logout(self) -> None:
        """Drop the stored session and reload the page."""
        await self.ui.session.execute_script("() => localStorage.clear()")
        await self.ui.session.reload()
