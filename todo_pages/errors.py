"""
Error taxonomy for page-object operations.

Components never recover from these locally; every error surfaces to the
calling test. The underlying Playwright error is chained via
``raise ... from``.
"""

from __future__ import annotations

from typing import Any


class PageObjectError(Exception):
    """Base class for all page-object errors."""


class ElementNotFoundError(PageObjectError):
    """A locator matched no elements when the operation required one."""

    def __init__(self, locator: Any, action: str):
        self.locator = locator
        self.action = action
        super().__init__(f"{action}: no element matches {locator}")


class WaitTimeoutError(PageObjectError):
    """A wait or poll did not reach its condition before the deadline."""

    def __init__(self, message: str, timeout: float | None = None, snapshot: Any = None):
        self.timeout = timeout
        self.snapshot = snapshot
        super().__init__(message)


class InvalidStateError(PageObjectError):
    """An operation was attempted on a component in the wrong state."""
