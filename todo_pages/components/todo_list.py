"""
Todo list component.

Aggregate queries and bulk mutations over the rendered rows. Bulk
mutations are plain loops over per-row operations: they are not atomic,
and a failure partway leaves the list partially mutated and propagates
to the caller.
"""

from __future__ import annotations

import logging

from playwright.sync_api import Locator

from todo_pages.components.todo_item import TodoItem
from todo_pages.elements import ElementHandle, ElementList

logger = logging.getLogger(__name__)


class TodoList:
    """Component for the ``.todo-list`` container and its rows."""

    def __init__(self, locator: Locator):
        """
        Initialize TodoList.

        Args:
            locator: Locator for the list container.
        """
        self.root = ElementHandle(locator)
        self.items = ElementList(locator.get_by_test_id("todo-item"))

    # -------------------------------------------------------------------------
    # Row Access
    # -------------------------------------------------------------------------

    def get_item_count(self) -> int:
        """Number of rendered rows (respects the current filter)."""
        return self.items.get_item_count()

    def get_item_by_index(self, index: int) -> TodoItem:
        """
        Get a row by position.

        Args:
            index: 0-based position among rendered rows.

        Returns:
            TodoItem for that position; out-of-range fails on first use.
        """
        return TodoItem(self.items.get_item_by_index(index))

    def get_all_items(self) -> list[TodoItem]:
        """Get one TodoItem per row rendered right now."""
        return [TodoItem(locator) for locator in self.items.get_all_items()]

    def get_all_titles(self) -> list[str]:
        """Get the titles of all rendered rows, in display order."""
        return [item.get_title() for item in self.get_all_items()]

    def get_item_by_title(self, title: str) -> TodoItem | None:
        """
        Find the first row with an exact title.

        Returns:
            The matching TodoItem, or None.
        """
        for item in self.get_all_items():
            if item.get_title() == title:
                return item
        return None

    def has_titles(self, expected_titles: list[str]) -> bool:
        """Check the rendered titles against ``expected_titles``, ignoring order."""
        return sorted(self.get_all_titles()) == sorted(expected_titles)

    def get_completed_items(self) -> list[TodoItem]:
        return [item for item in self.get_all_items() if item.is_completed()]

    def get_active_items(self) -> list[TodoItem]:
        return [item for item in self.get_all_items() if not item.is_completed()]

    def get_completed_count(self) -> int:
        return len(self.get_completed_items())

    def get_active_count(self) -> int:
        return len(self.get_active_items())

    def is_empty(self) -> bool:
        return self.items.is_empty()

    def get_items_locator(self) -> Locator:
        """Locator matching all rows, for expect() assertions."""
        return self.items.get_items_locator()

    # -------------------------------------------------------------------------
    # Bulk Mutations
    # -------------------------------------------------------------------------
    # Rows are processed highest index first: a row that leaves the view
    # (deleted, or filtered out) then never shifts the nth() locator of a
    # row still waiting to be processed.

    def mark_all_as_completed(self) -> None:
        """Check every row that is not yet completed, one at a time."""
        for item in reversed(self.get_all_items()):
            if not item.is_completed():
                item.mark_as_completed()

    def mark_all_as_incomplete(self) -> None:
        """Uncheck every completed row, one at a time."""
        for item in reversed(self.get_all_items()):
            if item.is_completed():
                item.mark_as_incomplete()

    def delete_completed_items(self) -> None:
        """Delete every completed row by editing it to an empty title."""
        completed = self.get_completed_items()
        logger.debug("Deleting %d completed rows", len(completed))
        for item in reversed(completed):
            item.delete()
