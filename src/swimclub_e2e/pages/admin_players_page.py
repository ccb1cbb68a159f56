"""
Admin Players Page Object (quản lý tuyển thủ) for player CRUD tests.
"""

import logging
from pathlib import Path

from ..data import PlayerData
from ..exceptions import WaitTimeoutError
from ..locators import By
from .interactable import OPTIONAL_CONTROL_TIMEOUT, ConfirmationSurface, Interactable

logger = logging.getLogger(__name__)

# Text of the row the table shows when it has no data
PLACEHOLDER_ROW_MARKERS = ("Chưa có", "không")


class AdminPlayersPage:
    """Page Object for the admin player list and add/edit form."""

    PAGE = "admin_players"
    ADD_PAGE = "admin_add_player"
    READ_TIMEOUT = 3.0
    MESSAGE_TIMEOUT = 5.0
    CONFIRM_TIMEOUT = 2.0

    # List
    SEARCH_INPUT = By.css('.search-input, input[type="text"]')
    ADD_NEW_BUTTON = By.css('.btn-add-new, button[onclick*="addtt_admin"]')
    DATA_TABLE = By.css(".data-table")
    TABLE_ROWS = By.css(".data-table tbody tr")
    TABLE_CELLS = By.css("td")
    EDIT_BUTTONS = By.css('.btn-edit-admin, button[onclick*="editItem"]')
    DELETE_BUTTONS = By.css('.btn-delete-admin, button[onclick*="deleteItem"]')
    CONFIRM_DELETE_MODAL = By.css(".modal, .confirm-dialog")
    CONFIRM_DELETE_BUTTON = By.css(".confirm-yes, .btn-confirm")

    # Add/Edit form
    FULLNAME_INPUT = By.id("full_name")
    NICKNAME_INPUT = By.id("nickname")
    POSITION_INPUT = By.id("position")
    SPECIALTY_INPUT = By.id("specialty")
    AGE_INPUT = By.id("age")
    ACHIEVEMENTS_TEXTAREA = By.id("achievements")
    BIO_TEXTAREA = By.id("bio")
    IMAGE_INPUT = By.id("image_url")
    IMAGE_FILE_INPUT = By.css('input[type="file"]')
    SAVE_BUTTON = By.css('.btn-save, button[type="submit"]')
    CANCEL_BUTTON = By.css('.btn-cancel, button[onclick*="back"]')
    SUCCESS_MESSAGE = By.css(".success-msg, .alert-success")

    def __init__(self, ui: Interactable):
        self.ui = ui

    async def open(self) -> None:
        await self.ui.open(self.PAGE)

    async def open_add_player_page(self) -> None:
        await self.ui.open(self.ADD_PAGE)

    async def click_add_new_button(self) -> None:
        await self.ui.click(self.ADD_NEW_BUTTON)

    # Table
    async def get_player_count(self) -> int:
        """Number of player rows, ignoring the "no data" placeholder row."""
        try:
            await self.ui.wait.wait_visible(self.TABLE_ROWS, self.READ_TIMEOUT)
        except WaitTimeoutError:
            return 0
        count = 0
        for row in await self.ui.session.find_all(self.TABLE_ROWS):
            text = await row.text()
            if text and not any(m in text for m in PLACEHOLDER_ROW_MARKERS):
                count += 1
        return count

    async def get_player_name_from_table(self, index: int = 0) -> str:
        """Name cell (third column) of the given row, or ""."""
        try:
            await self.ui.wait.wait_visible(self.TABLE_ROWS, self.READ_TIMEOUT)
        except WaitTimeoutError:
            return ""
        rows = await self.ui.session.find_all(self.TABLE_ROWS)
        if index >= len(rows):
            return ""
        cells = await rows[index].find_all(self.TABLE_CELLS)
        if len(cells) > 2:
            return await cells[2].text()
        return ""

    async def search_player(self, keyword: str) -> None:
        """Type into the search box; the table filters as you type."""
        await self.ui.fill(self.SEARCH_INPUT, keyword)

    # Form
    async def fill_player_form(self, data: PlayerData) -> None:
        """Fill every field set on ``data``; bio and image URL are optional."""
        required = (
            (self.FULLNAME_INPUT, data.full_name),
            (self.NICKNAME_INPUT, data.nickname),
            (self.POSITION_INPUT, data.position),
            (self.SPECIALTY_INPUT, data.specialty),
            (self.AGE_INPUT, data.age),
            (self.ACHIEVEMENTS_TEXTAREA, data.achievements),
        )
        # Wait for the form itself before touching the first set field
        await self.ui.wait.wait_visible(self.FULLNAME_INPUT)
        for locator, value in required:
            if value:
                await self.ui.fill(locator, value)
        if data.bio:
            await self.ui.fill_if_present(self.BIO_TEXTAREA, data.bio)
        if data.image_url:
            await self.ui.fill_if_present(self.IMAGE_INPUT, data.image_url)

    async def upload_image(self, file_path: str | Path) -> bool:
        """Attach an image file; False when the form has no file input."""
        try:
            file_input = await self.ui.wait.wait_present(
                self.IMAGE_FILE_INPUT, OPTIONAL_CONTROL_TIMEOUT)
        except WaitTimeoutError:
            logger.warning("File upload not available")
            return False
        await file_input.set_files(file_path)
        return True

    async def click_save_button(self) -> None:
        await self.ui.click(self.SAVE_BUTTON)

    async def add_player(self, data: PlayerData) -> None:
        await self.fill_player_form(data)
        await self.click_save_button()

    async def get_success_message(self) -> str:
        return await self.ui.text_or_empty(
            self.SUCCESS_MESSAGE, self.MESSAGE_TIMEOUT)

    # Row actions
    async def click_edit_player(self, index: int = 0) -> None:
        await self.ui.click_nth(self.EDIT_BUTTONS, index, "edit player")

    async def click_delete_player(self, index: int = 0) -> None:
        await self.ui.click_nth(self.DELETE_BUTTONS, index, "delete player")

    async def confirm_deletion(self) -> ConfirmationSurface:
        """
        Accept the delete prompt.

        Some admin screens delete without asking, so a missing prompt
        yields ConfirmationSurface.NONE instead of an error.
        """
        return await self.ui.resolve_confirmation(
            self.CONFIRM_DELETE_MODAL,
            self.CONFIRM_DELETE_BUTTON,
            action="delete player",
            modal_timeout=self.CONFIRM_TIMEOUT,
            alert_timeout=self.CONFIRM_TIMEOUT,
            required=False,
        )

    async def delete_player_with_confirmation(self, index: int = 0) -> int:
        """
        Delete a row and confirm.

        Returns:
            The player count before deletion, for comparing afterwards.
        """
        initial_count = await self.get_player_count()
        await self.click_delete_player(index)
        await self.confirm_deletion()
        return initial_count
