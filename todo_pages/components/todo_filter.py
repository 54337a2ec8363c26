"""Filter bar component: the All / Active / Completed links."""

from __future__ import annotations

import enum
import logging

from playwright.sync_api import Locator

from todo_pages.elements import ElementHandle, Link
from todo_pages.errors import InvalidStateError

logger = logging.getLogger(__name__)


class FilterKind(str, enum.Enum):
    """Which subset of todos the list renders."""

    ALL = "All"
    ACTIVE = "Active"
    COMPLETED = "Completed"


class TodoFilter:
    """
    Component for the filter links in the footer.

    Exactly one link is expected to carry the ``selected`` class.
    """

    def __init__(self, locator: Locator):
        """
        Initialize TodoFilter.

        Args:
            locator: Locator for the filter bar container.
        """
        self.root = ElementHandle(locator)
        self.links: dict[FilterKind, Link] = {
            kind: Link(locator.get_by_role("link", name=kind.value)) for kind in FilterKind
        }

    def get_filter_link(self, filter_kind: FilterKind | str) -> Link:
        """
        Get the link for a filter.

        Args:
            filter_kind: FilterKind or its string value ("All", ...).

        Raises:
            ValueError: If the filter name is unknown.
        """
        return self.links[FilterKind(filter_kind)]

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def show_all(self) -> None:
        self.set_filter(FilterKind.ALL)

    def show_active(self) -> None:
        self.set_filter(FilterKind.ACTIVE)

    def show_completed(self) -> None:
        self.set_filter(FilterKind.COMPLETED)

    def set_filter(self, filter_kind: FilterKind | str) -> None:
        """Click the link for ``filter_kind``."""
        logger.debug("Switching filter to %s", FilterKind(filter_kind).value)
        self.get_filter_link(filter_kind).click()

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def is_filter_active(self, filter_kind: FilterKind | str) -> bool:
        return self.get_filter_link(filter_kind).is_active()

    def is_all_filter_active(self) -> bool:
        return self.is_filter_active(FilterKind.ALL)

    def is_active_filter_active(self) -> bool:
        return self.is_filter_active(FilterKind.ACTIVE)

    def is_completed_filter_active(self) -> bool:
        return self.is_filter_active(FilterKind.COMPLETED)

    def get_active_filter(self, strict: bool = False) -> FilterKind:
        """
        Determine which filter is selected.

        Links are checked in All, Active, Completed order and the first
        active one wins. If none reports active the bar is in an invalid
        state; by default this falls back to ALL with a warning.

        Args:
            strict: Raise instead of falling back when no link is active.

        Returns:
            The selected FilterKind.

        Raises:
            InvalidStateError: If ``strict`` and no link is active.
        """
        for kind, link in self.links.items():
            if link.is_active():
                return kind
        if strict:
            raise InvalidStateError("no filter link is selected")
        logger.warning("No filter link is selected; assuming %s", FilterKind.ALL.value)
        return FilterKind.ALL

    def are_all_filters_visible(self) -> bool:
        return all(link.is_visible() for link in self.links.values())
