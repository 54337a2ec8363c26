"""
Todo row component.

A single ``<li data-testid="todo-item">`` in the TodoMVC list: a completion
checkbox, the title label, a hidden edit field and a delete button that
only appears on hover.

Row state machine:

    DISPLAY --start_editing (double-click)--> EDITING
    EDITING --Enter / blur--> DISPLAY  (row is destroyed if trimmed text is empty)
    EDITING --Escape--> DISPLAY        (title reverts)

State is always queried from the page (is the edit field visible?), never
tracked on the Python side.
"""

from __future__ import annotations

import enum
import logging

from playwright.sync_api import Locator

from todo_pages.elements import Button, Checkbox, ElementHandle, Input, Label
from todo_pages.errors import InvalidStateError

logger = logging.getLogger(__name__)

COMPLETED_CLASS = "completed"


class RowState(enum.Enum):
    """Rendering mode of a todo row."""

    DISPLAY = "display"
    EDITING = "editing"


class TodoItem:
    """
    Component for one todo row.

    Attributes:
        root: Handle on the row element itself.
        checkbox: Completion toggle.
        title: Display label.
        edit_input: Edit-mode text field.
        delete_button: Destroy button (visible on hover).
    """

    def __init__(self, locator: Locator):
        """
        Initialize TodoItem.

        Args:
            locator: Locator for the row; children are scoped under it.
        """
        self.root = ElementHandle(locator)
        self.checkbox = Checkbox(locator.get_by_role("checkbox"))
        self.title = Label(locator.get_by_test_id("todo-title"))
        self.edit_input = Input(locator.get_by_role("textbox", name="Edit"))
        self.delete_button = Button(locator.get_by_role("button", name="Delete"))

    @property
    def edit_input_field(self) -> Input:
        """The edit field, for tests that drive it step by step."""
        return self.edit_input

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    def get_state(self) -> RowState:
        """Query whether the row is displaying or being edited."""
        return RowState.EDITING if self.edit_input.is_visible() else RowState.DISPLAY

    def is_editing(self) -> bool:
        return self.get_state() is RowState.EDITING

    def get_title(self) -> str:
        """Get the displayed title."""
        return self.title.get_text()

    def is_completed(self) -> bool:
        """
        Check whether the row carries the ``completed`` class.

        Substring match; see ElementHandle.has_class.
        """
        return self.root.has_class(COMPLETED_CLASS)

    def is_checkbox_checked(self) -> bool:
        return self.checkbox.is_checked()

    def is_checkbox_visible(self) -> bool:
        return self.checkbox.is_visible()

    def is_title_visible(self) -> bool:
        return self.title.is_visible()

    def is_delete_button_visible(self) -> bool:
        return self.delete_button.is_visible()

    def get_edit_value(self) -> str:
        """
        Get the current text of the edit field.

        Raises:
            InvalidStateError: If the row is not being edited.
        """
        if not self.is_editing():
            raise InvalidStateError("edit value is only available while editing")
        return self.edit_input.get_value()

    # -------------------------------------------------------------------------
    # Completion
    # -------------------------------------------------------------------------

    def mark_as_completed(self) -> None:
        """
        Check the completion box. Idempotent.

        Raises:
            InvalidStateError: If the row is being edited.
        """
        self._require_display("mark_as_completed")
        self.checkbox.check()

    def mark_as_incomplete(self) -> None:
        """
        Uncheck the completion box. Idempotent.

        Raises:
            InvalidStateError: If the row is being edited.
        """
        self._require_display("mark_as_incomplete")
        self.checkbox.uncheck()

    def toggle_completion(self) -> None:
        if self.is_completed():
            self.mark_as_incomplete()
        else:
            self.mark_as_completed()

    def _require_display(self, action: str) -> None:
        # The checkbox is hidden while editing, so Playwright would block
        # until its own timeout instead of failing fast.
        if self.is_editing():
            raise InvalidStateError(f"{action} is not allowed while the row is being edited")

    # -------------------------------------------------------------------------
    # Editing
    # -------------------------------------------------------------------------

    def start_editing(self) -> None:
        """Enter edit mode by double-clicking the row."""
        self.root.double_click()

    def edit_text(self, new_text: str) -> None:
        """
        Replace the title and commit with Enter.

        The application trims the text; an empty result deletes the row.

        Args:
            new_text: Replacement title.
        """
        logger.debug("Editing todo to %r", new_text)
        self.start_editing()
        self.edit_input.fill(new_text)
        self.edit_input.press("Enter")

    def save_editing_on_blur(self, new_text: str) -> None:
        """Replace the title and commit by moving focus away."""
        self.start_editing()
        self.edit_input.fill(new_text)
        self.edit_input.blur()

    def cancel_editing(self) -> None:
        """Discard the edit with Escape. No-op when not editing."""
        if self.is_editing():
            self.edit_input.press("Escape")

    def delete(self) -> None:
        """Delete the row by committing an empty title."""
        self.edit_text("")

    def click_delete(self) -> None:
        """Delete the row through its destroy button."""
        # The button is display:none until the row is hovered.
        self.root.hover()
        self.delete_button.click()
