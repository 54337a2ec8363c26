"""Button element variant."""

from __future__ import annotations

from playwright.sync_api import Locator

from todo_pages.elements.base_element import ElementHandle


class Button:
    """Clickable button."""

    def __init__(self, locator: Locator):
        self.element = ElementHandle(locator)

    def click(self) -> None:
        """Click the button."""
        self.element.click()

    def is_visible(self) -> bool:
        return self.element.is_visible()

    def is_hidden(self) -> bool:
        return self.element.is_hidden()

    def is_disabled(self) -> bool:
        """Check if the button is disabled."""
        return self.element.invoke("is_disabled")

    def is_enabled(self) -> bool:
        """Check if the button is enabled."""
        return self.element.invoke("is_enabled")

    def get_disabled_attribute(self) -> str | None:
        """Get the raw value of the ``disabled`` attribute."""
        return self.element.get_attribute("disabled")
