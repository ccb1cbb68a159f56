"""
Cart and Checkout Page Object (giỏ hàng / thanh toán).
"""

from enum import Enum

from ..data import CheckoutDetails
from ..exceptions import WaitTimeoutError
from ..locators import By
from .interactable import OPTIONAL_CONTROL_TIMEOUT, Interactable


class PaymentMethod(str, Enum):
    """Payment options offered on the checkout page."""

    COD = "cod"
    BANKING = "banking"
    MOMO = "momo"

    @property
    def shows_qr(self) -> bool:
        """Whether choosing this method reveals the payment QR code."""
        return self is not PaymentMethod.COD

    @classmethod
    def parse(cls, value: "str | PaymentMethod") -> "PaymentMethod":
        if isinstance(value, cls):
            return value
        try:
            return cls(value.lower())
        except ValueError:
            raise ValueError(f"Unknown payment method: {value}") from None


class CartPage:
    """Page Object for the cart and checkout pages."""

    CART_PAGE = "cart"
    CHECKOUT_PAGE = "checkout"
    READ_TIMEOUT = 3.0

    # Cart page
    CART_ITEMS = By.css(".cart-item, tbody tr")
    EMPTY_CART_MESSAGE = By.css(".empty-cart, .empty-msg")
    CHECKOUT_BUTTON = By.css(
        '.btn-checkout, button[onclick*="checkout"], a[href*="thanhtoan"]')
    TOTAL_PRICE = By.css(".total-price, #total-price")
    REMOVE_BUTTONS = By.css(".btn-remove, .remove-item")

    # Checkout page
    FULLNAME_INPUT = By.id("fullname")
    PHONE_INPUT = By.id("phone")
    ADDRESS_INPUT = By.id("address")
    NOTE_TEXTAREA = By.id("note")
    PAYMENT_RADIOS = {
        PaymentMethod.COD: By.css('input[value="cod"]'),
        PaymentMethod.BANKING: By.css('input[value="banking"]'),
        PaymentMethod.MOMO: By.css('input[value="momo"]'),
    }
    PLACE_ORDER_BUTTON = By.css('button[type="submit"], .btn-order')
    QR_SECTION = By.id("qr-section")
    QR_IMAGE = By.css(".qr-image img, #qr-section img")

    def __init__(self, ui: Interactable):
        self.ui = ui

    async def open_cart(self) -> None:
        await self.ui.open(self.CART_PAGE)

    async def open_checkout(self) -> None:
        await self.ui.open(self.CHECKOUT_PAGE)

    # Cart
    async def get_cart_item_count(self) -> int:
        return await self.ui.count(self.CART_ITEMS, self.READ_TIMEOUT)

    async def is_cart_empty(self) -> bool:
        """Empty when the placeholder shows or no item rows are listed."""
        try:
            await self.ui.wait.wait_present(
                self.EMPTY_CART_MESSAGE, OPTIONAL_CONTROL_TIMEOUT)
        except WaitTimeoutError:
            return await self.get_cart_item_count() == 0
        return True

    async def click_checkout_button(self) -> None:
        await self.ui.click(self.CHECKOUT_BUTTON)

    async def get_total_price(self) -> str:
        return await self.ui.text_or_empty(self.TOTAL_PRICE, self.READ_TIMEOUT)

    # Checkout
    async def fill_checkout_form(self, details: CheckoutDetails) -> None:
        """Fill the recipient fields that are set on ``details``."""
        fields = (
            (self.FULLNAME_INPUT, details.fullname),
            (self.PHONE_INPUT, details.phone),
            (self.ADDRESS_INPUT, details.address),
            (self.NOTE_TEXTAREA, details.note),
        )
        for locator, value in fields:
            if value:
                await self.ui.fill(locator, value)

    async def select_payment_method(self, method: "str | PaymentMethod") -> None:
        """
        Choose a payment option.

        Raises:
            ValueError: If ``method`` is not cod, banking or momo.
        """
        radio = self.PAYMENT_RADIOS[PaymentMethod.parse(method)]
        element = await self.ui.wait.wait_clickable(radio)
        await element.click()

    async def click_place_order_button(self) -> None:
        await self.ui.click(self.PLACE_ORDER_BUTTON)

    async def is_qr_section_visible(self, timeout: float = 0) -> bool:
        return await self.ui.is_displayed(self.QR_SECTION, timeout)

    async def is_qr_image_displayed(self, timeout: float = 0) -> bool:
        return await self.ui.is_displayed(self.QR_IMAGE, timeout)

    async def complete_checkout(
        self,
        details: CheckoutDetails,
        payment_method: "str | PaymentMethod" = PaymentMethod.COD,
    ) -> None:
        await self.fill_checkout_form(details)
        await self.select_payment_method(payment_method)
        await self.click_place_order_button()
