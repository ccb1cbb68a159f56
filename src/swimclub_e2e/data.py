"""
Test data records and generators.
"""

import time
import uuid
from dataclasses import dataclass
from typing import Optional

from .config import Settings

UNIQUE_USER_PASSWORD = "Test@123456"


@dataclass
class UserData:
    """Registration / login data for one user."""

    fullname: str
    email: str
    password: str


@dataclass
class PlayerData:
    """Player record as entered on the admin form; unset fields are skipped."""

    full_name: Optional[str] = None
    nickname: Optional[str] = None
    position: Optional[str] = None
    specialty: Optional[str] = None
    age: Optional[str] = None
    achievements: Optional[str] = None
    bio: Optional[str] = None
    image_url: Optional[str] = None


@dataclass
class CheckoutDetails:
    """Recipient details for the checkout form."""

    fullname: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    note: Optional[str] = None


def _timestamp() -> int:
    return int(time.time() * 1000)


class DataFactory:
    """Builds test records, unique per call where the backend requires it."""

    def __init__(self, settings: Settings):
        self.settings = settings

    @staticmethod
    def unique_email(prefix: str = "test") -> str:
        return f"{prefix}_{_timestamp()}_{uuid.uuid4().hex[:6]}@test.com"

    @staticmethod
    def unique_username(prefix: str = "user") -> str:
        return f"{prefix}_{uuid.uuid4().hex[:12]}"

    def user_data(self, unique: Optional[bool] = None) -> UserData:
        """
        Data for a user account.

        Args:
            unique: Generate a fresh account instead of the configured test
                user. Defaults to ``settings.generate_unique_users``.
        """
        if unique is None:
            unique = self.settings.generate_unique_users
        if unique:
            return UserData(
                fullname=f"Test User {_timestamp()}",
                email=self.unique_email("testuser"),
                password=UNIQUE_USER_PASSWORD,
            )
        return UserData(
            fullname=self.settings.user_fullname,
            email=self.settings.user_email,
            password=self.settings.user_password,
        )

    @staticmethod
    def player_data() -> PlayerData:
        stamp = _timestamp()
        return PlayerData(
            full_name=f"Tuyển thủ Test {stamp}",
            nickname=f"Nickname {stamp}",
            position="Bơi ngửa",
            specialty="100m Ngửa",
            age="20",
            achievements="Vô địch giải Quốc gia 2024",
            bio="Đây là tuyển thủ test được tạo tự động",
        )

    def checkout_details(self) -> CheckoutDetails:
        return CheckoutDetails(
            fullname=self.settings.user_fullname,
            phone="0912345678",
            address="123 Test Street, Test City",
            note="Automated test order",
        )
