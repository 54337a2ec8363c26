"""Label element variant."""

from __future__ import annotations

from playwright.sync_api import Locator

from todo_pages.elements.base_element import ElementHandle


class Label:
    """Text label, optionally associated with a form control."""

    def __init__(self, locator: Locator):
        self.element = ElementHandle(locator)

    def get_text(self) -> str:
        return self.element.get_text()

    def is_visible(self) -> bool:
        return self.element.is_visible()

    def get_for_attribute(self) -> str | None:
        """Get the ``for`` attribute linking the label to a control."""
        return self.element.get_attribute("for")

    def is_associated_with(self, element_id: str) -> bool:
        """
        Check whether the label points at a specific control.

        Args:
            element_id: ``id`` of the form control.

        Returns:
            True if the ``for`` attribute equals ``element_id``.
        """
        return self.get_for_attribute() == element_id
