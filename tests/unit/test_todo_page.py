"""
Unit tests for the page facades (BasePage, TodoPage).

The Playwright page is mocked; these tests check that each task-level
operation drives the right element in the right order.
"""

from unittest.mock import call

import pytest

from todo_pages.components import FilterKind
from todo_pages.pages import BasePage, TodoPage
from todo_pages.storage import TodoStorage


pytestmark = pytest.mark.unit

BASE_URL = "https://demo.playwright.dev/"


@pytest.fixture
def todo_page(mock_page) -> TodoPage:
    return TodoPage(mock_page, BASE_URL)


def _new_todo_input(page):
    return page.get_by_placeholder("What needs to be done?")


def _toggle_all(page):
    return page.get_by_label("Mark all as complete")


class TestBasePage:
    """Navigation and driver pass-throughs."""

    def test_navigate_to_joins_base_url_and_path(self, mock_page):
        BasePage(mock_page, BASE_URL).navigate_to("/todomvc")

        mock_page.goto.assert_called_once_with("https://demo.playwright.dev/todomvc")

    def test_history_and_reload(self, mock_page):
        base_page = BasePage(mock_page, BASE_URL)

        base_page.reload()
        base_page.go_back()
        base_page.wait_for_page_load("networkidle")

        mock_page.reload.assert_called_once()
        mock_page.go_back.assert_called_once()
        mock_page.wait_for_load_state.assert_called_once_with("networkidle")

    def test_page_info(self, mock_page):
        mock_page.title.return_value = "React • TodoMVC"

        base_page = BasePage(mock_page, BASE_URL)

        assert base_page.get_title() == "React • TodoMVC"
        assert base_page.get_url() == mock_page.url

    def test_evaluate_and_wait_for_function(self, mock_page):
        mock_page.evaluate.return_value = 3
        base_page = BasePage(mock_page, BASE_URL)

        result = base_page.evaluate("n => n + 1", 2)
        base_page.wait_for_function("() => true", timeout=500)

        assert result == 3
        mock_page.evaluate.assert_called_once_with("n => n + 1", 2)
        mock_page.wait_for_function.assert_called_once_with("() => true", arg=None, timeout=500)

    def test_locator_factories(self, mock_page):
        base_page = BasePage(mock_page, BASE_URL)

        assert base_page.get_by_test_id("todo-item") is mock_page.get_by_test_id("todo-item")
        assert base_page.get_by_role("link", name="All") is mock_page.get_by_role("link", name="All")
        assert base_page.locator(".filters") is mock_page.locator(".filters")

    def test_take_screenshot(self, mock_page, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        path = BasePage(mock_page, BASE_URL).take_screenshot("after-add")

        assert path == "test-results/screenshots/after-add.png"
        assert (tmp_path / "test-results" / "screenshots").is_dir()
        mock_page.screenshot.assert_called_once_with(path=path)


class TestTodoPageNavigation:

    def test_navigate_opens_todomvc_and_waits_for_input(self, todo_page, mock_page):
        result = todo_page.navigate()

        assert result is todo_page
        mock_page.goto.assert_called_once_with("https://demo.playwright.dev/todomvc")
        _new_todo_input(mock_page).wait_for.assert_called_once_with(state="visible", timeout=None)

    def test_is_loaded(self, todo_page, mock_page):
        _new_todo_input(mock_page).is_visible.return_value = True

        assert todo_page.is_loaded() is True


class TestTodoPageAdding:

    def test_add_todo_fills_and_presses_enter(self, todo_page, mock_page):
        todo_page.add_todo("buy some cheese")

        new_todo = _new_todo_input(mock_page)
        new_todo.fill.assert_called_once_with("buy some cheese")
        new_todo.press.assert_called_once_with("Enter")

    def test_add_todos_preserves_order(self, todo_page, mock_page, todo_titles):
        todo_page.add_todos(todo_titles)

        new_todo = _new_todo_input(mock_page)
        assert new_todo.fill.call_args_list == [call(title) for title in todo_titles]
        assert new_todo.press.call_count == len(todo_titles)

    def test_add_todos_stops_at_first_failure(self, todo_page, mock_page):
        new_todo = _new_todo_input(mock_page)
        new_todo.press.side_effect = [None, RuntimeError("browser closed"), None]

        with pytest.raises(RuntimeError):
            todo_page.add_todos(["a", "b", "c"])

        assert new_todo.fill.call_args_list == [call("a"), call("b")]

    def test_is_new_todo_input_empty(self, todo_page, mock_page):
        _new_todo_input(mock_page).input_value.return_value = ""

        assert todo_page.is_new_todo_input_empty() is True


class TestTodoPageToggleAll:

    def test_mark_all_as_completed_checks_toggle_all(self, todo_page, mock_page):
        todo_page.mark_all_as_completed()

        _toggle_all(mock_page).check.assert_called_once()

    def test_mark_all_as_incomplete_unchecks_toggle_all(self, todo_page, mock_page):
        todo_page.mark_all_as_incomplete()

        _toggle_all(mock_page).uncheck.assert_called_once()

    def test_is_toggle_all_checked(self, todo_page, mock_page):
        _toggle_all(mock_page).is_checked.return_value = False

        assert todo_page.is_toggle_all_checked() is False


class TestTodoPageCounter:

    def test_counter_reads(self, todo_page, mock_page):
        mock_page.get_by_test_id("todo-count").text_content.return_value = "3 items left"

        assert todo_page.get_todo_count_text() == "3 items left"
        assert todo_page.get_items_left() == 3
        assert todo_page.todo_count_contains(3) is True

    def test_get_todo_count_counts_rendered_rows(self, todo_page, mock_page):
        rows = mock_page.locator(".todo-list").get_by_test_id("todo-item")
        rows.count.return_value = 2

        assert todo_page.get_todo_count() == 2


class TestTodoPageFilters:

    def test_set_filter_clicks_link_in_filter_bar(self, todo_page, mock_page):
        todo_page.set_filter(FilterKind.COMPLETED)

        link = mock_page.locator(".filters").get_by_role("link", name="Completed")
        link.click.assert_called_once()

    def test_show_active_todos(self, todo_page, mock_page):
        todo_page.show_active_todos()

        link = mock_page.locator(".filters").get_by_role("link", name="Active")
        link.click.assert_called_once()

    def test_get_filter_link_locator(self, todo_page, mock_page):
        locator = todo_page.get_filter_link_locator("All")

        assert locator is mock_page.locator(".filters").get_by_role("link", name="All")


class TestTodoPageClearCompleted:

    def test_clear_completed_clicks_button(self, todo_page, mock_page):
        todo_page.clear_completed()

        mock_page.get_by_role("button", name="Clear completed").click.assert_called_once()

    def test_clear_completed_visibility(self, todo_page, mock_page):
        button = mock_page.get_by_role("button", name="Clear completed")
        button.is_visible.return_value = False
        button.is_hidden.return_value = True

        assert todo_page.is_clear_completed_button_visible() is False
        assert todo_page.is_clear_completed_button_hidden() is True


class TestTodoPageCounts:

    def test_get_filter_counts(self, todo_page, mock_page):
        rows = mock_page.locator(".todo-list").get_by_test_id("todo-item")
        rows.count.return_value = 3
        for index, completed in enumerate([False, True, False]):
            rows.nth(index).get_attribute.return_value = "completed" if completed else ""

        assert todo_page.get_filter_counts() == {"all": 3, "active": 2, "completed": 1}


class TestTodoPageStorage:

    def test_storage_is_bound_to_same_page(self, todo_page, mock_page):
        assert isinstance(todo_page.storage, TodoStorage)
        assert todo_page.storage.page is mock_page
        assert todo_page.storage.key == "react-todos"

    def test_custom_storage_key_and_timeout(self, mock_page):
        page = TodoPage(mock_page, BASE_URL, storage_key="vue-todos", timeout=2000)

        assert page.storage.key == "vue-todos"
        assert page.storage.timeout == 2000
