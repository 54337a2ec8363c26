"""
TodoMVC Page Object.

This page object is the task-level facade for the TodoMVC screen: adding
todos, bulk completion through the toggle-all checkbox, filtering, and
clearing completed items. It holds no state of its own beyond the
components it composes; every method is a named sequence of component
operations.
"""

from __future__ import annotations

import logging
import re

from playwright.sync_api import Locator, Page, expect

from todo_pages.components import FilterKind, TodoFilter, TodoItem, TodoList
from todo_pages.elements import Button, Checkbox, Counter, Input
from todo_pages.pages.base_page import BasePage
from todo_pages.storage import STORAGE_KEY, TodoStorage

logger = logging.getLogger(__name__)

NEW_TODO_PLACEHOLDER = "What needs to be done?"
TOGGLE_ALL_LABEL = "Mark all as complete"


class TodoPage(BasePage):
    """
    Page object for the TodoMVC application.

    Provides methods for:
    - Adding todos
    - Completing / un-completing all todos
    - Filtering by All / Active / Completed
    - Clearing completed todos
    - Reading the items-left counter
    """

    URL_PATH = "/todomvc"

    def __init__(
        self,
        page: Page,
        base_url: str,
        storage_key: str = STORAGE_KEY,
        timeout: float | None = None,
    ):
        """
        Initialize TodoPage.

        Args:
            page: Playwright page instance.
            base_url: Base URL of the application.
            storage_key: localStorage key the app persists todos under.
            timeout: Default storage-wait deadline in milliseconds.
        """
        super().__init__(page, base_url)
        self.new_todo_input = Input(page.get_by_placeholder(NEW_TODO_PLACEHOLDER))
        self.toggle_all_checkbox = Checkbox(page.get_by_label(TOGGLE_ALL_LABEL))
        self.todo_list = TodoList(page.locator(".todo-list"))
        self.todo_filter = TodoFilter(page.locator(".filters"))
        self.clear_completed_button = Button(page.get_by_role("button", name="Clear completed"))
        self.todo_count = Counter(page.get_by_test_id("todo-count"))
        self.storage = TodoStorage(page, key=storage_key, timeout=timeout)

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def navigate(self) -> "TodoPage":
        """
        Navigate to the TodoMVC page and wait for the input to render.

        Returns:
            Self for method chaining.
        """
        self.navigate_to(self.URL_PATH)
        self.wait_for_load()
        return self

    def is_loaded(self) -> bool:
        return self.new_todo_input.is_visible()

    def wait_for_load(self) -> None:
        """Wait until the new-todo input is visible."""
        self.new_todo_input.element.wait_for_visible()

    # -------------------------------------------------------------------------
    # Adding Todos
    # -------------------------------------------------------------------------

    def add_todo(self, text: str) -> "TodoPage":
        """
        Add a todo by typing it and pressing Enter.

        Args:
            text: Title of the new todo.

        Returns:
            Self for method chaining.
        """
        logger.info("Adding todo %r", text)
        self.new_todo_input.fill(text)
        self.new_todo_input.press("Enter")
        return self

    def add_todos(self, texts: list[str]) -> "TodoPage":
        """
        Add several todos, one after another, in the given order.

        The application appends to the end of its list, so the rendered
        order matches ``texts``.

        Returns:
            Self for method chaining.
        """
        for text in texts:
            self.add_todo(text)
        return self

    def get_new_todo_input(self) -> Input:
        return self.new_todo_input

    def is_new_todo_input_empty(self) -> bool:
        return self.new_todo_input.is_empty()

    # -------------------------------------------------------------------------
    # Todo Access
    # -------------------------------------------------------------------------

    def get_todo_list(self) -> TodoList:
        return self.todo_list

    def get_todo_filter(self) -> TodoFilter:
        return self.todo_filter

    def get_todo_item(self, index: int) -> TodoItem:
        """Get a rendered todo row by 0-based index."""
        return self.todo_list.get_item_by_index(index)

    def get_all_todo_items(self) -> list[TodoItem]:
        return self.todo_list.get_all_items()

    def get_all_todo_titles(self) -> list[str]:
        return self.todo_list.get_all_titles()

    def get_visible_todo_items_locator(self) -> Locator:
        """Locator for the rendered rows (i.e. after filtering)."""
        return self.page.get_by_test_id("todo-item")

    # -------------------------------------------------------------------------
    # Toggle All
    # -------------------------------------------------------------------------

    def mark_all_as_completed(self) -> None:
        """Complete every todo through the toggle-all checkbox."""
        logger.info("Marking all todos as completed")
        self.toggle_all_checkbox.check()

    def mark_all_as_incomplete(self) -> None:
        """Clear the completed state of every todo through toggle-all."""
        logger.info("Marking all todos as incomplete")
        self.toggle_all_checkbox.uncheck()

    def is_toggle_all_checked(self) -> bool:
        return self.toggle_all_checkbox.is_checked()

    # -------------------------------------------------------------------------
    # Counter
    # -------------------------------------------------------------------------

    def get_todo_count(self) -> int:
        """Number of rendered rows."""
        return self.todo_list.get_item_count()

    def get_todo_count_text(self) -> str:
        """Raw counter text, e.g. "3 items left"."""
        return self.todo_count.get_text()

    def todo_count_contains(self, number: int) -> bool:
        return self.todo_count.contains_number(number)

    def get_items_left(self) -> int | None:
        """Numeric value of the items-left counter, or None if absent."""
        return self.todo_count.get_numeric_value()

    def get_todo_count_locator(self) -> Locator:
        return self.todo_count.get_locator()

    # -------------------------------------------------------------------------
    # Filters
    # -------------------------------------------------------------------------

    def show_all_todos(self) -> None:
        self.todo_filter.show_all()

    def show_active_todos(self) -> None:
        self.todo_filter.show_active()

    def show_completed_todos(self) -> None:
        self.todo_filter.show_completed()

    def set_filter(self, filter_kind: FilterKind | str) -> None:
        """Switch the list to ``filter_kind``."""
        logger.info("Showing %s todos", FilterKind(filter_kind).value)
        self.todo_filter.set_filter(filter_kind)

    def get_active_filter(self, strict: bool = False) -> FilterKind:
        return self.todo_filter.get_active_filter(strict=strict)

    def get_filter_link_locator(self, filter_kind: FilterKind | str) -> Locator:
        """Locator of a filter link, for class/visibility assertions."""
        return self.todo_filter.get_filter_link(filter_kind).get_locator()

    # -------------------------------------------------------------------------
    # Clear Completed
    # -------------------------------------------------------------------------

    def clear_completed(self) -> None:
        """Remove all completed todos with the footer button."""
        logger.info("Clearing completed todos")
        self.clear_completed_button.click()

    def is_clear_completed_button_visible(self) -> bool:
        return self.clear_completed_button.is_visible()

    def is_clear_completed_button_hidden(self) -> bool:
        return self.clear_completed_button.is_hidden()

    # -------------------------------------------------------------------------
    # Data Extraction
    # -------------------------------------------------------------------------

    def get_completed_count(self) -> int:
        return self.todo_list.get_completed_count()

    def get_active_count(self) -> int:
        return self.todo_list.get_active_count()

    def get_filter_counts(self) -> dict[str, int]:
        """
        Count rendered rows by completion state.

        Counts reflect what is rendered, so call this with the All filter
        selected to count every todo.

        Returns:
            Dict with ``all``, ``active`` and ``completed`` counts.
        """
        items = self.todo_list.get_all_items()
        completed = sum(1 for item in items if item.is_completed())
        return {"all": len(items), "active": len(items) - completed, "completed": completed}

    # -------------------------------------------------------------------------
    # Assertions
    # -------------------------------------------------------------------------

    def assert_titles(self, expected: list[str]) -> None:
        """Assert the rendered titles, in order, with auto-retry."""
        titles = self.todo_list.get_items_locator().get_by_test_id("todo-title")
        expect(titles).to_have_text(expected)

    def assert_item_count(self, expected: int) -> None:
        """Assert the number of rendered rows, with auto-retry."""
        expect(self.get_visible_todo_items_locator()).to_have_count(expected)

    def assert_filter_selected(self, filter_kind: FilterKind | str) -> None:
        """Assert that a filter link carries the ``selected`` class."""
        expect(self.get_filter_link_locator(filter_kind)).to_have_class(re.compile(r"\bselected\b"))
