"""
Access to the login state the storefront keeps in localStorage.
"""

import logging
from typing import Optional

from .session import Session

logger = logging.getLogger(__name__)

AUTH_KEYS = ("token", "userId", "role", "userEmail")

_SET_ITEMS = """(items) => {
    for (const [key, value] of Object.entries(items)) {
        localStorage.setItem(key, value);
    }
}"""
_GET_ITEM = "(key) => localStorage.getItem(key)"
_REMOVE_ITEMS = """(keys) => {
    for (const key of keys) {
        localStorage.removeItem(key);
    }
}"""


class AuthStorage:
    """Reads and writes the authentication keys of the current origin."""

    def __init__(self, session: Session):
        self.session = session

    async def set_auth_token(
        self,
        token: str,
        user_id: Optional[str] = None,
        role: Optional[str] = None,
        email: Optional[str] = None,
    ) -> None:
        """Store a token (and optional user fields) to fake a logged-in user."""
        items = {"token": token}
        if user_id:
            items["userId"] = user_id
        if role:
            items["role"] = role
        if email:
            items["userEmail"] = email
        await self.session.execute_script(_SET_ITEMS, items)
        logger.debug("Stored auth keys: %s", ", ".join(items))

    async def get_auth_token(self) -> Optional[str]:
        return await self.session.execute_script(_GET_ITEM, "token")

    async def get_user_role(self) -> Optional[str]:
        return await self.session.execute_script(_GET_ITEM, "role")

    async def clear_auth(self) -> None:
        await self.session.execute_script(_REMOVE_ITEMS, list(AUTH_KEYS))

    async def is_logged_in(self) -> bool:
        """The stored login flag: a non-empty token."""
        return bool(await self.get_auth_token())
