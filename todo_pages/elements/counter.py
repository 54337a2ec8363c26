"""Counter element variant."""

from __future__ import annotations

import re

from playwright.sync_api import Locator

from todo_pages.elements.base_element import ElementHandle

_DIGITS = re.compile(r"\d+")


class Counter:
    """Text element displaying a count, such as "3 items left"."""

    def __init__(self, locator: Locator):
        self.element = ElementHandle(locator)

    def get_text(self) -> str:
        return self.element.get_text()

    def is_visible(self) -> bool:
        return self.element.is_visible()

    def get_numeric_value(self) -> int | None:
        """
        Extract the first run of digits from the counter text.

        Returns:
            The number, or None if the text contains no digits.
        """
        match = _DIGITS.search(self.get_text())
        return int(match.group(0)) if match else None

    def contains_number(self, number: int) -> bool:
        """Check whether the counter text contains ``number``."""
        return str(number) in self.get_text()

    def contains_text(self, text: str) -> bool:
        return text in self.get_text()

    def is_empty(self) -> bool:
        """Check whether the counter shows only whitespace."""
        return self.get_text().strip() == ""

    def get_locator(self) -> Locator:
        """Locator for expect() assertions such as to_have_text."""
        return self.element.locator
