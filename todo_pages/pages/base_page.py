"""
Base Page class for the Page Object Model.

This class provides common functionality shared by all page objects,
including navigation, locator factories, and utility methods.

Key Concepts Demonstrated:
- Base class pattern for code reuse
- Locator strategies (data-testid, role, text, placeholder, label, CSS)
- Navigation and history (goto, reload, back)
- Assertion helpers
"""

from __future__ import annotations

import logging
import os
import re
from typing import Any

from playwright.sync_api import Locator, Page, expect

logger = logging.getLogger(__name__)

SCREENSHOT_DIR = "test-results/screenshots"


class BasePage:
    """
    Base class for all page objects.

    Attributes:
        page: Playwright page instance (the driving context).
        base_url: Base URL of the application.
    """

    URL_PATH = "/"

    def __init__(self, page: Page, base_url: str):
        """
        Initialize the base page.

        Args:
            page: Playwright page instance.
            base_url: Base URL of the application.
        """
        self.page = page
        self.base_url = base_url.rstrip("/")

    # -------------------------------------------------------------------------
    # Navigation Methods
    # -------------------------------------------------------------------------

    def navigate_to(self, path: str = "") -> None:
        """
        Navigate to a specific path.

        Args:
            path: URL path relative to base URL.
        """
        url = f"{self.base_url}{path}"
        logger.info("Navigating to %s", url)
        self.page.goto(url)

    def reload(self) -> None:
        """Reload the current page."""
        self.page.reload()

    def go_back(self) -> None:
        """Go back one entry in browser history."""
        self.page.go_back()

    def wait_for_page_load(self, state: str = "load") -> None:
        """
        Wait for the page to reach a load state.

        Args:
            state: "load", "domcontentloaded" or "networkidle".
        """
        self.page.wait_for_load_state(state)

    # -------------------------------------------------------------------------
    # Page Info
    # -------------------------------------------------------------------------

    def get_title(self) -> str:
        return self.page.title()

    def get_url(self) -> str:
        return self.page.url

    # -------------------------------------------------------------------------
    # Script Evaluation
    # -------------------------------------------------------------------------

    def evaluate(self, expression: str, arg: Any = None) -> Any:
        """
        Run JavaScript in the page and return its result.

        Args:
            expression: JS expression or function source.
            arg: Serializable argument passed to the function.
        """
        return self.page.evaluate(expression, arg)

    def wait_for_function(
        self, expression: str, arg: Any = None, timeout: float | None = None
    ) -> None:
        """
        Wait until a JS function returns a truthy value.

        Args:
            expression: JS function source.
            arg: Serializable argument passed to the function.
            timeout: Maximum wait time in milliseconds.
        """
        self.page.wait_for_function(expression, arg=arg, timeout=timeout)

    # -------------------------------------------------------------------------
    # Locator Factories
    # -------------------------------------------------------------------------

    def locator(self, selector: str) -> Locator:
        """Get a locator by CSS selector."""
        return self.page.locator(selector)

    def get_by_test_id(self, test_id: str) -> Locator:
        """
        Get element by data-testid attribute.

        This is the preferred locator strategy as data-testid
        attributes are stable and designed for testing.

        Args:
            test_id: Value of the data-testid attribute.

        Returns:
            Locator for the element.
        """
        return self.page.get_by_test_id(test_id)

    def get_by_role(self, role: str, **kwargs: Any) -> Locator:
        """Get a locator by ARIA role (``name=`` and friends pass through)."""
        return self.page.get_by_role(role, **kwargs)

    def get_by_text(self, text: str) -> Locator:
        return self.page.get_by_text(text)

    def get_by_placeholder(self, placeholder: str) -> Locator:
        return self.page.get_by_placeholder(placeholder)

    def get_by_label(self, label: str) -> Locator:
        return self.page.get_by_label(label)

    # -------------------------------------------------------------------------
    # Assertion Methods
    # -------------------------------------------------------------------------

    def assert_url_contains(self, expected: str) -> None:
        """
        Assert that current URL contains expected string.

        Args:
            expected: String expected to be in the URL.
        """
        expect(self.page).to_have_url(re.compile(re.escape(expected)))

    # -------------------------------------------------------------------------
    # Utility Methods
    # -------------------------------------------------------------------------

    def take_screenshot(self, name: str) -> str:
        """
        Take a screenshot of the current page.

        Args:
            name: Name for the screenshot file.

        Returns:
            Path to the saved screenshot.
        """
        os.makedirs(SCREENSHOT_DIR, exist_ok=True)
        path = f"{SCREENSHOT_DIR}/{name}.png"
        self.page.screenshot(path=path)
        return path
