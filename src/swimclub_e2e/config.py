"""
Suite configuration management for swimclub-e2e.

Settings are loaded once (environment variables, an optional ``.env`` file
or a TOML file) into an immutable object that is passed explicitly to the
driver factory, the wait layer and the page objects.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any
from urllib.parse import urlencode

import tomllib

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import InvalidConfigError, MissingConfigError

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


class PagePaths(BaseModel):
    """Paths of the application's screens, relative to the base URL."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    login: str = "/HNT-SWIM-CLUB-main/đn/login.html"
    # Field name must not shadow BaseModel.register
    register_page: str = Field(
        default="/HNT-SWIM-CLUB-main/đk/đk.html", alias="register")
    home: str = "/HNT-SWIM-CLUB-main/sp_home/trangchu.html"
    products: str = "/HNT-SWIM-CLUB-main/sp_home/danhmuc_sp.html"
    product_detail: str = "/HNT-SWIM-CLUB-main/sp_home/chitiet_sp.html"
    cart: str = "/HNT-SWIM-CLUB-main/giohang/ghtt.html"
    checkout: str = "/HNT-SWIM-CLUB-main/giohang/thanhtoan.html"
    user_profile: str = "/HNT-SWIM-CLUB-main/nguoidung/nguoidung.html"
    admin_home: str = "/HNT-SWIM-CLUB-main/admin/home.html"
    admin_players: str = "/HNT-SWIM-CLUB-main/admin/admin.html"
    admin_add_player: str = "/HNT-SWIM-CLUB-main/admin/addtt_admin.html"
    players: str = "/HNT-SWIM-CLUB-main/tuyenthu/user.html"


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="E2E_LOG_",
        extra="ignore",
        frozen=True,
    )

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v_upper


class Settings(BaseSettings):
    """Main suite settings."""

    model_config = SettingsConfigDict(
        env_prefix="E2E_",
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        frozen=True,
    )

    # Application under test
    base_url: str = Field(
        default="http://localhost:3000", description="Storefront base URL")
    api_url: str = Field(
        default="http://localhost:3000/api", description="Backend API URL")

    # Test credentials
    user_email: str = "testuser@example.com"
    user_password: str = "password123"
    user_fullname: str = "Test User"
    admin_email: str = "admin@hntswimclub.com"
    admin_password: str = "admin123"

    # Browser
    browser: str = Field(default="chromium", description="Browser engine")
    headless: bool = Field(default=True, description="Run without a window")
    slow_mo: int = Field(default=0, ge=0, description="Delay per action (ms)")

    # Timeouts
    implicit_wait_ms: int = Field(
        default=5000, ge=0, description="Default per-action driver timeout (ms)")
    explicit_wait: float = Field(
        default=10.0, gt=0, description="Default bound for wait primitives (s)")

    # Test data
    generate_unique_users: bool = False

    # Artifacts
    results_dir: Path = Path("test-results")

    pages: PagePaths = Field(default_factory=PagePaths)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("base_url", "api_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate URL format."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("browser")
    @classmethod
    def validate_browser(cls, v: str) -> str:
        """Validate browser engine name."""
        v_lower = v.lower()
        if v_lower not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"Browser must be one of: {', '.join(SUPPORTED_BROWSERS)}")
        return v_lower

    def url_for(self, page: str, **query: Any) -> str:
        """
        Build the absolute URL of a logical screen.

        Args:
            page: Screen name as declared on PagePaths (e.g. "login").
            **query: Optional query-string parameters.

        Returns:
            Absolute URL.

        Raises:
            InvalidConfigError: If the screen name is unknown.
        """
        paths = self.pages.model_dump(by_alias=True)
        if page not in paths:
            raise InvalidConfigError(
                config_key="pages",
                value=page,
                reason=f"Unknown page; expected one of: {', '.join(paths)}",
            )
        url = f"{self.base_url}{paths[page]}"
        if query:
            url += "?" + urlencode(query)
        return url

    @classmethod
    def from_toml(cls, path: str | Path) -> "Settings":
        """
        Load settings from a TOML configuration file.

        Args:
            path: Path to the TOML configuration file.

        Returns:
            Settings instance with loaded configuration.

        Raises:
            ConfigurationError: If the file cannot be read or parsed.
        """
        path = Path(path)
        if not path.exists():
            raise MissingConfigError("config_file", details={"path": str(path)})

        try:
            with open(path, "rb") as f:
                config_data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise InvalidConfigError(
                config_key="config_file",
                value=str(path),
                reason=f"Failed to parse TOML: {e}",
            ) from e

        return cls._from_dict(config_data)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Settings":
        """
        Create settings from a dictionary.

        Top-level ``[suite]`` keys map to Settings fields, ``[pages]`` to
        PagePaths and ``[logging]`` to LoggingSettings.
        """
        settings_kwargs: dict[str, Any] = {}

        if "suite" in data:
            settings_kwargs.update(data["suite"])

        if "pages" in data:
            settings_kwargs["pages"] = PagePaths(**data["pages"])

        if "logging" in data:
            settings_kwargs["logging"] = LoggingSettings(**data["logging"])

        return cls(**settings_kwargs)


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached suite settings.

    Loads from environment variables, or from the TOML file named by
    ``E2E_CONFIG_FILE`` when it exists.

    Returns:
        Settings instance.
    """
    config_file = os.getenv("E2E_CONFIG_FILE")

    if config_file and Path(config_file).exists():
        settings = Settings.from_toml(config_file)
    else:
        settings = Settings()

    return settings


def reload_settings() -> Settings:
    """
    Reload settings, clearing the cache.

    Returns:
        Fresh Settings instance.
    """
    get_settings.cache_clear()
    return get_settings()
