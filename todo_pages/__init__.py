"""
Page-object toolkit for the TodoMVC demo application.

The package is layered leaves-first:

- ``elements``: a single ``ElementHandle`` over a Playwright locator plus
  typed variants (button, checkbox, input, label, link, counter, list)
- ``components``: cohesive UI regions (a todo row, the filter bar, the list)
- ``pages``: task-level facades bound to one Playwright page
- ``storage``: polling verifier for the app's localStorage snapshot
- ``generators``: seeded test data builders
"""

from todo_pages.components import FilterKind, RowState, TodoFilter, TodoItem, TodoList
from todo_pages.errors import (
    ElementNotFoundError,
    InvalidStateError,
    PageObjectError,
    WaitTimeoutError,
)
from todo_pages.generators import TodoDataGenerator, generate_default_todos
from todo_pages.pages import BasePage, TodoPage
from todo_pages.storage import TodoStorage

__all__ = [
    "BasePage",
    "ElementNotFoundError",
    "FilterKind",
    "InvalidStateError",
    "PageObjectError",
    "RowState",
    "TodoDataGenerator",
    "TodoFilter",
    "TodoItem",
    "TodoList",
    "TodoPage",
    "TodoStorage",
    "WaitTimeoutError",
    "generate_default_todos",
]
