"""
Login Page Object for authentication-related tests.
"""

from ..locators import By
from .interactable import Banner, Interactable


class LoginPage:
    """Page Object for the login page."""

    PAGE = "login"
    MESSAGE_TIMEOUT = 5.0

    # Selectors
    USERNAME_INPUT = By.id("username")
    PASSWORD_INPUT = By.id("password")
    LOGIN_BUTTON = By.id("loginBtn")
    MESSAGE = By.id("message")
    REGISTER_LINK = By.css('a[href*="đk.html"]')
    FORGOT_PASSWORD_LINK = By.css('a[href*="qmk.html"]')

    def __init__(self, ui: Interactable):
        self.ui = ui

    # Actions
    async def open(self) -> None:
        """Navigate to the login page."""
        await self.ui.open(self.PAGE)

    async def login(self, email: str, password: str) -> None:
        """
        Fill the credentials and submit.

        Does not wait for the outcome; follow with a wait on the message
        banner or the URL.

        Args:
            email: User email or username
            password: User password
        """
        await self.ui.fill(self.USERNAME_INPUT, email)
        await self.ui.fill(self.PASSWORD_INPUT, password)
        await self.ui.click(self.LOGIN_BUTTON)

    async def click_register_link(self) -> None:
        await self.ui.click(self.REGISTER_LINK)

    async def click_forgot_password_link(self) -> None:
        await self.ui.click(self.FORGOT_PASSWORD_LINK)

    # Reads
    async def get_message(self) -> Banner:
        return await self.ui.read_banner(self.MESSAGE, self.MESSAGE_TIMEOUT)

    async def get_message_text(self) -> str:
        """Text of the status message, or "" when none is shown."""
        return (await self.get_message()).text

    async def get_message_class(self) -> str:
        return (await self.get_message()).css_class

    async def is_success_message(self) -> bool:
        return (await self.get_message()).is_success

    async def is_error_message(self) -> bool:
        return (await self.get_message()).is_error
