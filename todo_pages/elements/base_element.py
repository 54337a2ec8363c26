"""
ElementHandle: the primitive wrapper every page object is built from.

An ElementHandle owns exactly one Playwright locator and is the only place
that talks to the driver. Typed variants (Button, Checkbox, ...) hold a
handle rather than subclass it, and route every driver call through
``invoke`` so that error translation and logging happen in one spot.

Key Concepts Demonstrated:
- Composition over inheritance for element wrappers
- Lazy locators: nothing is resolved until an action or query runs
- Translating driver timeouts into a small error taxonomy
"""

from __future__ import annotations

import logging
from typing import Any

from playwright.sync_api import Locator
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from todo_pages.errors import ElementNotFoundError, WaitTimeoutError

logger = logging.getLogger(__name__)


class ElementHandle:
    """
    Wrapper around a single Playwright locator.

    Attributes:
        locator: Playwright locator this handle addresses (read-only).
    """

    def __init__(self, locator: Locator):
        """
        Initialize the handle.

        Args:
            locator: Playwright locator for the element.
        """
        self._locator = locator

    @property
    def locator(self) -> Locator:
        """Locator for the element, for scoping children and expect()."""
        return self._locator

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._locator!r})"

    # -------------------------------------------------------------------------
    # Driver Gateway
    # -------------------------------------------------------------------------

    def invoke(self, method: str, *args: Any, **kwargs: Any) -> Any:
        """
        Call a locator method, translating driver timeouts.

        A Playwright timeout on a locator that matches nothing becomes
        ElementNotFoundError; any other timeout becomes WaitTimeoutError.
        Other driver errors propagate unchanged. Nothing is retried.

        Args:
            method: Name of the Playwright Locator method to call.
            *args: Positional arguments for the method.
            **kwargs: Keyword arguments for the method.

        Returns:
            Whatever the locator method returns.
        """
        logger.debug("%s %r", method, self._locator)
        try:
            return getattr(self._locator, method)(*args, **kwargs)
        except PlaywrightTimeoutError as exc:
            if self._locator.count() == 0:
                raise ElementNotFoundError(self._locator, method) from exc
            raise WaitTimeoutError(
                f"{method} timed out on {self._locator!r}", timeout=kwargs.get("timeout")
            ) from exc

    # -------------------------------------------------------------------------
    # State Queries
    # -------------------------------------------------------------------------

    def is_visible(self) -> bool:
        """
        Check current visibility without waiting.

        May race with pending animations: do not assume consistency right
        after a mutating action.
        """
        return self.invoke("is_visible")

    def is_hidden(self) -> bool:
        """Check that the element is hidden or absent, without waiting."""
        return self.invoke("is_hidden")

    def get_text(self) -> str:
        """Get the element's text content, or an empty string if it has none."""
        return self.invoke("text_content") or ""

    def get_attribute(self, name: str) -> str | None:
        """
        Get an attribute value.

        Args:
            name: Attribute name.

        Returns:
            The attribute value, or None when the attribute is absent.
        """
        return self.invoke("get_attribute", name)

    def has_class(self, class_name: str) -> bool:
        """
        Check whether the class attribute contains ``class_name``.

        This is a substring check, not a token match: ``"completed"`` also
        matches an element with class ``"completed-soon"``.

        Args:
            class_name: CSS class to look for.

        Returns:
            True if the class attribute contains the given text.
        """
        class_list = self.get_attribute("class")
        return class_name in (class_list or "")

    def count(self) -> int:
        """Number of DOM nodes the locator currently matches."""
        return self.invoke("count")

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def click(self) -> None:
        """Click the element. Does not wait for the UI to settle."""
        self.invoke("click")

    def double_click(self) -> None:
        """Double-click the element."""
        self.invoke("dblclick")

    def hover(self) -> None:
        """Hover over the element."""
        self.invoke("hover")

    # -------------------------------------------------------------------------
    # Wait Methods
    # -------------------------------------------------------------------------

    def wait_for_visible(self, timeout: float | None = None) -> None:
        """
        Wait for the element to become visible.

        Args:
            timeout: Maximum wait time in milliseconds; None uses the
                driver default.

        Raises:
            WaitTimeoutError: If the element is not visible in time.
        """
        self._wait_for("visible", timeout)

    def wait_for_hidden(self, timeout: float | None = None) -> None:
        """
        Wait for the element to become hidden or detached.

        Args:
            timeout: Maximum wait time in milliseconds; None uses the
                driver default.

        Raises:
            WaitTimeoutError: If the element is still visible in time.
        """
        self._wait_for("hidden", timeout)

    def _wait_for(self, state: str, timeout: float | None) -> None:
        logger.debug("wait_for %s %r", state, self._locator)
        try:
            self._locator.wait_for(state=state, timeout=timeout)
        except PlaywrightTimeoutError as exc:
            raise WaitTimeoutError(
                f"{self._locator!r} did not become {state}", timeout=timeout
            ) from exc
