"""
Custom exceptions for the swimclub-e2e suite.

This module defines the failure taxonomy shared by the synchronization
layer, the page objects and the browser/config plumbing around them.
"""

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .locators import Locator


class SwimClubE2EError(Exception):
    """Base exception for all swimclub-e2e errors."""

    def __init__(self, message: str,
                 details: Optional[dict[str, Any]] = None) -> None:
        """
        Initialize the base exception.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error details.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


# Synchronization Exceptions
class WaitTimeoutError(SwimClubE2EError):
    """
    Raised when a bounded wait elapses without its condition holding.

    This is the only failure kind produced by the wait primitives. It does
    not distinguish "never appeared" from "appeared then vanished".
    """

    def __init__(
        self,
        condition: str,
        timeout: float,
        locator: Optional["Locator"] = None,
        last_error: Optional[BaseException] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize wait timeout error.

        Args:
            condition: Description of the condition that was awaited.
            timeout: The bound (seconds) that elapsed.
            locator: The locator the condition was about, if any.
            last_error: Last transient session error seen while polling.
            details: Optional dictionary with additional error details.
        """
        message = f"Timed out after {timeout:g}s waiting for {condition}"
        if last_error is not None:
            message += f" (last error: {last_error})"
        super().__init__(message, details)
        self.condition = condition
        self.timeout = timeout
        self.locator = locator
        self.last_error = last_error


class ActionUnavailableError(SwimClubE2EError):
    """Raised when the Nth interactive element for an action does not exist."""

    def __init__(
        self,
        action: str,
        locator: "Locator",
        index: int,
        available: int,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = (
            f"Cannot {action}: no element at index {index} for {locator} "
            f"({available} available)"
        )
        super().__init__(message, details)
        self.action = action
        self.locator = locator
        self.index = index
        self.available = available


class ConfirmationUnresolvedError(SwimClubE2EError):
    """Raised when neither a modal nor a native dialog confirms an action."""

    def __init__(
        self,
        action: str,
        modal_timeout: float,
        alert_timeout: float,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = (
            f"No confirmation surface found for '{action}' "
            f"(modal {modal_timeout:g}s, dialog {alert_timeout:g}s)"
        )
        super().__init__(message, details)
        self.action = action
        self.modal_timeout = modal_timeout
        self.alert_timeout = alert_timeout


# Session Exceptions
class SessionError(SwimClubE2EError):
    """Raised when a browser command fails in a way that may be transient."""


class StaleElementError(SessionError):
    """Raised when an element handle refers to a detached DOM node."""


class DialogOpenError(SessionError):
    """Raised when the DOM is unreachable because a native dialog is open."""

    def __init__(self, dialog_message: str = "",
                 details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(
            f"A native dialog is open: {dialog_message!r}", details)
        self.dialog_message = dialog_message


class BrowserSetupError(SwimClubE2EError):
    """Raised when the browser cannot be launched or a session created."""


# Configuration Exceptions
class ConfigurationError(SwimClubE2EError):
    """Base exception for configuration-related errors."""


class MissingConfigError(ConfigurationError):
    """Raised when a required configuration value is missing."""

    def __init__(
        self, config_key: str, details: Optional[dict[str, Any]] = None
    ) -> None:
        """
        Initialize missing config error.

        Args:
            config_key: The missing configuration key.
            details: Optional dictionary with additional error details.
        """
        super().__init__(
            f"Missing required configuration: '{config_key}'", details)
        self.config_key = config_key


class InvalidConfigError(ConfigurationError):
    """Raised when a configuration value is invalid."""

    def __init__(
        self,
        config_key: str,
        value: Any,
        reason: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize invalid config error.

        Args:
            config_key: The configuration key with invalid value.
            value: The invalid value.
            reason: Optional reason why the value is invalid.
            details: Optional dictionary with additional error details.
        """
        message = f"Invalid configuration value for '{config_key}': {value}"
        if reason:
            message += f" - {reason}"
        super().__init__(message, details)
        self.config_key = config_key
        self.value = value
        self.reason = reason
