"""
Register Page Object for account creation tests.
"""

from typing import Optional

from ..exceptions import WaitTimeoutError
from ..locators import By
from .interactable import OPTIONAL_CONTROL_TIMEOUT, Banner, Interactable


class RegisterPage:
    """Page Object for the registration page."""

    PAGE = "register"
    MESSAGE_TIMEOUT = 5.0

    # Selectors
    FULLNAME_INPUT = By.id("reg_fullname")
    EMAIL_INPUT = By.id("reg_email")
    PASSWORD_INPUT = By.id("reg_password")
    CONFIRM_PASSWORD_INPUT = By.id("reg_confirm_password")
    REGISTER_BUTTON = By.id("registerBtn")
    MESSAGE = By.id("message")
    LOGIN_LINK = By.css('a[href*="login.html"]')

    def __init__(self, ui: Interactable):
        self.ui = ui

    async def open(self) -> None:
        """Navigate to the register page."""
        await self.ui.open(self.PAGE)

    async def register(
        self,
        fullname: str,
        email: str,
        password: str,
        confirm_password: Optional[str] = None,
    ) -> None:
        """
        Fill the registration form and submit.

        Args:
            fullname: Full name
            email: Email address
            password: Password
            confirm_password: Confirmation; defaults to ``password``
        """
        await self.ui.fill(self.FULLNAME_INPUT, fullname)
        await self.ui.fill(self.EMAIL_INPUT, email)
        await self.ui.fill(self.PASSWORD_INPUT, password)
        await self.ui.fill(
            self.CONFIRM_PASSWORD_INPUT,
            password if confirm_password is None else confirm_password,
        )
        await self.ui.click(self.REGISTER_BUTTON)

    async def click_login_link(self) -> None:
        await self.ui.click(self.LOGIN_LINK)

    async def get_message(self) -> Banner:
        return await self.ui.read_banner(self.MESSAGE, self.MESSAGE_TIMEOUT)

    async def get_message_text(self) -> str:
        return (await self.get_message()).text

    async def get_message_class(self) -> str:
        return (await self.get_message()).css_class

    async def is_success_message(self) -> bool:
        return (await self.get_message()).is_success

    async def is_error_message(self) -> bool:
        return (await self.get_message()).is_error

    async def is_register_button_disabled(self) -> bool:
        """Whether the submit button is disabled; False when it is missing."""
        try:
            element = await self.ui.wait.wait_present(
                self.REGISTER_BUTTON, OPTIONAL_CONTROL_TIMEOUT)
        except WaitTimeoutError:
            return False
        return not await element.is_enabled()
