"""
Declarative element locators.

A Locator is an immutable (strategy, value) pair. Pages declare them once
as class attributes and the Session turns them into Playwright selectors
at lookup time.
"""

import json
from dataclasses import dataclass
from enum import Enum


class Strategy(str, Enum):
    """How a locator's value is interpreted."""

    ID = "id"
    CSS = "css"
    XPATH = "xpath"
    TEXT = "text"


@dataclass(frozen=True)
class Locator:
    """Immutable description of how to find an element."""

    strategy: Strategy
    value: str

    def to_selector(self) -> str:
        """Convert to a Playwright selector string."""
        if self.strategy is Strategy.ID:
            # Attribute form so ids with '.', ':' or non-ASCII stay literal
            return f"[id={json.dumps(self.value, ensure_ascii=False)}]"
        if self.strategy is Strategy.CSS:
            return self.value
        if self.strategy is Strategy.XPATH:
            return f"xpath={self.value}"
        if self.strategy is Strategy.TEXT:
            return f"text={self.value}"
        raise ValueError(f"Unsupported locator strategy: {self.strategy!r}")

    def __str__(self) -> str:
        return f"By.{self.strategy.value}({self.value!r})"


class By:
    """Factory for locators, mirroring the familiar WebDriver spelling."""

    @staticmethod
    def id(value: str) -> Locator:
        return Locator(Strategy.ID, value)

    @staticmethod
    def css(value: str) -> Locator:
        return Locator(Strategy.CSS, value)

    @staticmethod
    def xpath(value: str) -> Locator:
        return Locator(Strategy.XPATH, value)

    @staticmethod
    def text(value: str) -> Locator:
        return Locator(Strategy.TEXT, value)
