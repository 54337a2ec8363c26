"""Playwright fixtures for TodoMVC E2E tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator

import pytest
from playwright.sync_api import Browser, BrowserContext, Page

from shared.live_stack import live_app_url
from todo_pages.config import Config
from todo_pages.pages.todo_page import TodoPage
from todo_pages.storage import TodoStorage

logger = logging.getLogger(__name__)


@pytest.fixture(scope="session", autouse=True)
def live_server(suite_config: type[Config]) -> Generator[str, None, None]:
    """
    Return the base URL of a reachable TodoMVC app.

    Autouse, so an unreachable app skips the suite before any browser
    is launched.
    """
    yield from live_app_url(
        suite_config.BASE_URL,
        path=TodoPage.URL_PATH,
        timeout=suite_config.READY_TIMEOUT_S,
        suite_name="e2e",
    )


@pytest.fixture(scope="session")
def browser_context_args():
    return {
        "viewport": {"width": 1280, "height": 720},
        "ignore_https_errors": True,
    }


@pytest.fixture(scope="function")
def context(
    browser: Browser, browser_context_args: dict, suite_config: type[Config]
) -> Generator[BrowserContext, None, None]:
    context = browser.new_context(**browser_context_args)
    context.set_default_timeout(suite_config.DEFAULT_TIMEOUT_MS)
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context: BrowserContext) -> Generator[Page, None, None]:
    page = context.new_page()
    yield page
    page.close()


@pytest.fixture
def todo_page(page: Page, live_server: str, suite_config: type[Config]) -> TodoPage:
    """Open a fresh TodoMVC page (new context, so storage starts empty)."""
    todo = TodoPage(
        page,
        live_server,
        storage_key=suite_config.STORAGE_KEY,
        timeout=suite_config.DEFAULT_TIMEOUT_MS,
    )
    return todo.navigate()


@pytest.fixture
def storage(todo_page: TodoPage) -> TodoStorage:
    return todo_page.storage


@pytest.fixture
def seeded_todos(todo_page: TodoPage, storage: TodoStorage, todo_titles: list[str]) -> list[str]:
    """Add the three default todos and wait until they are persisted."""
    todo_page.add_todos(todo_titles)
    storage.wait_for_todo_count(len(todo_titles))
    return todo_titles


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture screenshot on UI test failure."""
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        page = item.funcargs.get("page")
        if page:
            screenshot_dir = "test-results/screenshots"
            os.makedirs(screenshot_dir, exist_ok=True)
            test_name = item.name.replace("/", "_").replace("::", "_")
            screenshot_path = f"{screenshot_dir}/{test_name}.png"
            try:
                page.screenshot(path=screenshot_path)
                logger.info("Screenshot saved: %s", screenshot_path)
            except Exception as exc:  # pragma: no cover - best effort logging
                logger.warning("Failed to capture screenshot: %s", exc)
