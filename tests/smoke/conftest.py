"""
Smoke-test fixtures for the TodoMVC app.

Provides the ``smoke_base_url`` session-scoped fixture that yields a
reachable app URL shared across the whole smoke suite. Reachability is
delegated to :func:`shared.live_stack.live_app_url`, which skips the suite
when the app cannot be reached.
"""

from __future__ import annotations

from collections.abc import Generator

import pytest

from shared.live_stack import live_app_url
from todo_pages.pages.todo_page import TodoPage


@pytest.fixture(scope="session")
def smoke_base_url(suite_config) -> Generator[str, None, None]:
    """Yield a reachable TodoMVC base URL for smoke tests."""
    yield from live_app_url(
        suite_config.BASE_URL,
        path=TodoPage.URL_PATH,
        timeout=suite_config.READY_TIMEOUT_S,
        suite_name="smoke",
    )
