"""Link element variant."""

from __future__ import annotations

from playwright.sync_api import Locator

from todo_pages.elements.base_element import ElementHandle

SELECTED_CLASS = "selected"


class Link:
    """
    Anchor link that may be marked as the active one.

    A link counts as active when its class attribute contains
    ``selected``. This inherits the substring behavior of
    ``ElementHandle.has_class``.
    """

    def __init__(self, locator: Locator):
        self.element = ElementHandle(locator)

    def click(self) -> None:
        self.element.click()

    def is_visible(self) -> bool:
        return self.element.is_visible()

    def get_href(self) -> str | None:
        """Get the link target."""
        return self.element.get_attribute("href")

    def is_active(self) -> bool:
        return self.element.has_class(SELECTED_CLASS)

    def is_inactive(self) -> bool:
        return not self.is_active()

    def get_locator(self) -> Locator:
        """Locator for expect() assertions."""
        return self.element.locator
