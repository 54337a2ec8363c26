"""Text input element variant."""

from __future__ import annotations

from playwright.sync_api import Locator

from todo_pages.elements.base_element import ElementHandle


class Input:
    """Single-line text input."""

    def __init__(self, locator: Locator):
        self.element = ElementHandle(locator)

    def fill(self, text: str) -> None:
        """
        Replace the entire current value with ``text``.

        Args:
            text: New value; never appended to the existing one.
        """
        self.element.invoke("fill", text)

    def clear(self) -> None:
        """Empty the field."""
        self.fill("")

    def get_value(self) -> str:
        """Get the current value of the field."""
        return self.element.invoke("input_value")

    def is_empty(self) -> bool:
        return self.get_value() == ""

    def is_not_empty(self) -> bool:
        return not self.is_empty()

    def press(self, key: str) -> None:
        """
        Press a key while the field has focus.

        Args:
            key: Playwright key name, e.g. ``"Enter"`` or ``"Escape"``.
        """
        self.element.invoke("press", key)

    def focus(self) -> None:
        self.element.invoke("focus")

    def blur(self) -> None:
        """Remove focus from the field."""
        self.element.invoke("blur")

    def is_visible(self) -> bool:
        return self.element.is_visible()

    def is_disabled(self) -> bool:
        return self.element.invoke("is_disabled")

    def is_enabled(self) -> bool:
        return self.element.invoke("is_enabled")

    def get_placeholder(self) -> str | None:
        """Get the placeholder text, or None if there is none."""
        return self.element.get_attribute("placeholder")
