"""Composite components assembled from element variants."""

from todo_pages.components.todo_filter import FilterKind, TodoFilter
from todo_pages.components.todo_item import RowState, TodoItem
from todo_pages.components.todo_list import TodoList

__all__ = ["FilterKind", "RowState", "TodoFilter", "TodoItem", "TodoList"]
