"""List element variant: a locator matching many sibling items."""

from __future__ import annotations

from playwright.sync_api import Locator

from todo_pages.elements.base_element import ElementHandle


class ElementList:
    """
    A collection of elements addressed by one multi-match locator.

    ``get_item_by_index`` never fails at construction: an out-of-range
    index yields a locator that matches nothing, which surfaces as
    ElementNotFoundError on its first use. ``get_all_items`` materializes
    one locator per element matched at call time; it is not a live view.
    """

    def __init__(self, locator: Locator):
        self.element = ElementHandle(locator)

    def get_item_count(self) -> int:
        """Number of items currently matched."""
        return self.element.count()

    def get_item_by_index(self, index: int) -> Locator:
        """
        Get a locator for one item.

        Args:
            index: 0-based position in the list.

        Returns:
            Locator for the item (resolved lazily).
        """
        return self.element.locator.nth(index)

    def get_all_items(self) -> list[Locator]:
        """Get one locator per item currently in the list."""
        return [self.get_item_by_index(i) for i in range(self.get_item_count())]

    def is_empty(self) -> bool:
        return self.get_item_count() == 0

    def is_not_empty(self) -> bool:
        return not self.is_empty()

    def has_item_count(self, expected_count: int) -> bool:
        return self.get_item_count() == expected_count

    def get_items_locator(self) -> Locator:
        """Locator matching all items, for expect() assertions."""
        return self.element.locator
