"""Checkbox element variant."""

from __future__ import annotations

from playwright.sync_api import Locator

from todo_pages.elements.base_element import ElementHandle


class Checkbox:
    """
    Checkbox with idempotent check/uncheck.

    ``check`` on an already-checked box (and ``uncheck`` on an unchecked
    one) is a no-op; Playwright performs the state test itself.
    """

    def __init__(self, locator: Locator):
        self.element = ElementHandle(locator)

    def check(self) -> None:
        """Ensure the checkbox is checked."""
        self.element.invoke("check")

    def uncheck(self) -> None:
        """Ensure the checkbox is unchecked."""
        self.element.invoke("uncheck")

    def toggle(self) -> None:
        """Invert the current checked state."""
        if self.is_checked():
            self.uncheck()
        else:
            self.check()

    def is_checked(self) -> bool:
        return self.element.invoke("is_checked")

    def is_unchecked(self) -> bool:
        return not self.is_checked()

    def is_visible(self) -> bool:
        return self.element.is_visible()

    def is_disabled(self) -> bool:
        return self.element.invoke("is_disabled")

    def is_enabled(self) -> bool:
        return self.element.invoke("is_enabled")

    def get_checked_attribute(self) -> str | None:
        """Get the raw value of the ``checked`` attribute."""
        return self.element.get_attribute("checked")
