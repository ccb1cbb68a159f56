"""
Orders Page Object for the user's purchase history (đơn đã mua).
"""

import logging
import re
from typing import Optional

from ..exceptions import WaitTimeoutError
from ..locators import By
from .interactable import ConfirmationSurface, Interactable

logger = logging.getLogger(__name__)

_SHIPPED = re.compile(r"vận chuyển|shipped|delivered", re.IGNORECASE)
_FINISHED = re.compile(
    r"vận chuyển|shipped|delivered|hoàn thành|completed", re.IGNORECASE)


def is_shipped_status(status: str) -> bool:
    """Whether an order status means the parcel has left the shop."""
    return bool(_SHIPPED.search(status))


def is_cancellable_status(status: str) -> bool:
    """Orders can be cancelled until they ship or complete."""
    return bool(status) and not _FINISHED.search(status)


class OrdersPage:
    """Page Object for the orders tab of the user profile."""

    PAGE = "user_profile"
    READ_TIMEOUT = 3.0
    MESSAGE_TIMEOUT = 5.0
    TAB_TIMEOUT = 3.0
    CONFIRM_TIMEOUT = 2.0

    ORDERS_TAB = By.css(
        'a[href="#orders"], .tab-orders, button[onclick*="orders"]')
    ORDER_ITEMS = By.css(".order-item, .order-card")
    ORDER_STATUSES = By.css(".order-status")
    VIEW_DETAIL_BUTTONS = By.css(".view-detail-btn, .btn-detail")
    EDIT_BUTTONS = By.css('.edit-btn, button[onclick*="edit"]')
    CANCEL_BUTTONS = By.css('.cancel-btn, button[onclick*="cancel"]')
    CONFIRM_CANCEL_MODAL = By.css(".modal, .confirm-dialog")
    CONFIRM_CANCEL_BUTTON = By.css(
        '.confirm-yes, .btn-confirm, button[onclick*="confirmCancel"]')
    CANCELLED_TAB = By.css('a[href="#cancelled"], .tab-cancelled')
    EDIT_NAME_INPUT = By.css('input[name="recipient_name"], #edit-name')
    EDIT_ADDRESS_INPUT = By.css(
        'input[name="recipient_address"], textarea[name="address"], #edit-address')
    SAVE_EDIT_BUTTON = By.css('.save-btn, button[onclick*="save"]')
    SUCCESS_MESSAGE = By.css(".success-msg, .alert-success, #message.success")
    ERROR_MESSAGE = By.css(".error-msg, .alert-error, #message.error")

    def __init__(self, ui: Interactable):
        self.ui = ui

    async def open(self) -> None:
        """Open the profile page and switch to the orders tab if it has one."""
        await self.ui.open(self.PAGE)
        if not await self.ui.click_if_present(self.ORDERS_TAB, self.TAB_TIMEOUT):
            logger.info("Orders tab not found; assuming orders are shown")

    # Reads
    async def get_order_count(self) -> int:
        return await self.ui.count(self.ORDER_ITEMS, self.READ_TIMEOUT)

    async def get_order_status(self, index: int = 0) -> str:
        return await self.ui.nth_text_or_empty(
            self.ORDER_STATUSES, index, self.READ_TIMEOUT)

    async def get_order_statuses(self) -> list[str]:
        try:
            await self.ui.wait.wait_visible(self.ORDER_STATUSES, self.READ_TIMEOUT)
        except WaitTimeoutError:
            return []
        return [await el.text()
                for el in await self.ui.session.find_all(self.ORDER_STATUSES)]

    async def can_edit_order(self, index: int = 0) -> bool:
        """Whether the order's edit button exists and is enabled."""
        buttons = await self.ui.session.find_all(self.EDIT_BUTTONS)
        if index >= len(buttons):
            return False
        return await buttons[index].is_enabled()

    async def get_success_message(self) -> str:
        return await self.ui.text_or_empty(
            self.SUCCESS_MESSAGE, self.MESSAGE_TIMEOUT)

    async def get_error_message(self) -> str:
        return await self.ui.text_or_empty(
            self.ERROR_MESSAGE, self.MESSAGE_TIMEOUT)

    # Actions
    async def click_view_detail(self, index: int = 0) -> None:
        await self.ui.click_nth(self.VIEW_DETAIL_BUTTONS, index, "view order")

    async def click_edit_order(self, index: int = 0) -> None:
        await self.ui.click_nth(self.EDIT_BUTTONS, index, "edit order")

    async def edit_recipient_info(self, name: Optional[str],
                                  address: Optional[str]) -> None:
        """Fill the recipient fields that are given, then save."""
        if name:
            await self.ui.fill(self.EDIT_NAME_INPUT, name)
        if address:
            await self.ui.fill(self.EDIT_ADDRESS_INPUT, address)
        await self.ui.click(self.SAVE_EDIT_BUTTON)

    async def click_cancel_order(self, index: int = 0) -> None:
        await self.ui.click_nth(self.CANCEL_BUTTONS, index, "cancel order")

    async def confirm_cancellation(self) -> ConfirmationSurface:
        """
        Accept the cancellation prompt.

        Raises:
            ConfirmationUnresolvedError: If no modal or dialog appears.
        """
        return await self.ui.resolve_confirmation(
            self.CONFIRM_CANCEL_MODAL,
            self.CONFIRM_CANCEL_BUTTON,
            action="cancel order",
            modal_timeout=self.CONFIRM_TIMEOUT,
            alert_timeout=self.CONFIRM_TIMEOUT,
        )

    async def cancel_order_with_confirmation(
            self, index: int = 0) -> ConfirmationSurface:
        await self.click_cancel_order(index)
        return await self.confirm_cancellation()

    async def click_cancelled_tab(self) -> bool:
        """Switch to cancelled orders; False when the page has no such tab."""
        if not await self.ui.click_if_present(self.CANCELLED_TAB, self.TAB_TIMEOUT):
            logger.info("Cancelled tab not found")
            return False
        return True
