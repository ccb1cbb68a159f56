"""
Product Detail Page Object (chi tiết sản phẩm).
"""

import logging

from ..exceptions import WaitTimeoutError
from ..locators import By
from .interactable import OPTIONAL_CONTROL_TIMEOUT, Interactable

logger = logging.getLogger(__name__)


class ProductDetailPage:
    """Page Object for a single product."""

    PAGE = "product_detail"
    READ_TIMEOUT = 5.0

    PRODUCT_NAME = By.css(".product-name, h1, .detail-title")
    PRODUCT_PRICE = By.css(".product-price, .price")
    PRODUCT_IMAGE = By.css(".product-image img, .detail-image img")
    BUY_BUTTON = By.css('.btn-buy, .add-to-cart, button[onclick*="addToCart"]')
    BACK_BUTTON = By.css(
        '.btn-back, button[onclick*="back"], a[href*="trangchu"]')
    QUANTITY_INPUT = By.css('input[type="number"], .quantity-input')
    SIZE_SELECT = By.css('select[name="size"], .size-select')

    def __init__(self, ui: Interactable):
        self.ui = ui

    async def open(self, product_id: int | str) -> None:
        await self.ui.open(self.PAGE, id=product_id)

    async def get_product_name(self) -> str:
        return await self.ui.text_or_empty(self.PRODUCT_NAME, self.READ_TIMEOUT)

    async def get_product_price(self) -> str:
        return await self.ui.text_or_empty(self.PRODUCT_PRICE, self.READ_TIMEOUT)

    async def is_product_image_displayed(self) -> bool:
        return await self.ui.is_displayed(self.PRODUCT_IMAGE, self.READ_TIMEOUT)

    async def click_buy_button(self) -> None:
        await self.ui.click(self.BUY_BUTTON)

    async def click_back_button(self) -> None:
        """Use the page's back control, or browser history when it has none."""
        if not await self.ui.click_if_present(
                self.BACK_BUTTON, OPTIONAL_CONTROL_TIMEOUT):
            logger.info("No back control; using browser history")
            await self.ui.session.back()

    async def set_quantity(self, quantity: int) -> bool:
        return await self.ui.fill_if_present(self.QUANTITY_INPUT, str(quantity))

    async def select_size(self, size: str) -> bool:
        try:
            select = await self.ui.wait.wait_visible(
                self.SIZE_SELECT, OPTIONAL_CONTROL_TIMEOUT)
        except WaitTimeoutError:
            logger.warning("Size selector not available")
            return False
        await select.select(size)
        return True
