"""Page facades."""

from todo_pages.pages.base_page import BasePage
from todo_pages.pages.todo_page import TodoPage

__all__ = ["BasePage", "TodoPage"]
