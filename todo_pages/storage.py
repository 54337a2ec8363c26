"""
Persisted-state verifier for the TodoMVC localStorage store.

TodoMVC writes its list to ``localStorage["react-todos"]`` as a JSON array
of ``{id, title, completed}`` records, slightly after the UI updates. The
helpers here poll that store until a predicate holds, so tests can
synchronize assertions with asynchronous persistence.

Key Concepts Demonstrated:
- Delegating polling to Playwright's wait_for_function
- Keeping each predicate as a pure function (JS for the browser, Python
  for diagnostics) so it can be checked against a captured snapshot
- Timeouts that report the last observed state
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from playwright.sync_api import Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from todo_pages.errors import WaitTimeoutError
from todo_pages.models import TodoRecord

logger = logging.getLogger(__name__)

STORAGE_KEY = "react-todos"

Snapshot = list[TodoRecord]

_READ_SCRIPT = "key => JSON.parse(window.localStorage.getItem(key) || '[]')"


@dataclass(frozen=True)
class StoragePredicate:
    """
    A condition over the persisted snapshot.

    Attributes:
        description: Human-readable summary used in error messages.
        expression: JS function ``(todos, arg) => boolean`` run in the page.
        arg: Serializable argument passed to ``expression``.
        check: The same condition as a pure Python function of a snapshot.
    """

    description: str
    expression: str
    arg: Any
    check: Callable[[Snapshot], bool]

    def matches(self, snapshot: Snapshot) -> bool:
        """Evaluate the predicate against an already-read snapshot."""
        return self.check(snapshot)


def todo_count(expected: int) -> StoragePredicate:
    """The store holds exactly ``expected`` records."""
    return StoragePredicate(
        description=f"{expected} todos",
        expression="(todos, e) => todos.length === e",
        arg=expected,
        check=lambda todos: len(todos) == expected,
    )


def completed_count(expected: int) -> StoragePredicate:
    """Exactly ``expected`` records are completed."""
    return StoragePredicate(
        description=f"{expected} completed todos",
        expression="(todos, e) => todos.filter(todo => todo.completed).length === e",
        arg=expected,
        check=lambda todos: sum(1 for todo in todos if todo.completed) == expected,
    )


def contains_title(title: str) -> StoragePredicate:
    """Some record has exactly this title."""
    return StoragePredicate(
        description=f"a todo titled {title!r}",
        expression="(todos, t) => todos.some(todo => todo.title === t)",
        arg=title,
        check=lambda todos: any(todo.title == title for todo in todos),
    )


def is_empty() -> StoragePredicate:
    """The store holds no records (a missing key counts as empty)."""
    return todo_count(0)


class TodoStorage:
    """
    Read and wait on the application's persisted todo list.

    The ``wait_*`` methods never mutate the store. ``clear`` and
    ``set_todos`` exist for fixtures that need to seed state.
    """

    def __init__(
        self,
        page: Page,
        key: str = STORAGE_KEY,
        timeout: float | None = None,
        poll_interval: float = 100,
    ):
        """
        Initialize TodoStorage.

        Args:
            page: Playwright page the application runs in.
            key: localStorage key holding the JSON array.
            timeout: Default wait deadline in milliseconds; None uses the
                driver default.
            poll_interval: Delay between reads, in milliseconds, when
                polling a plain Python predicate.
        """
        self.page = page
        self.key = key
        self.timeout = timeout
        self.poll_interval = poll_interval

    # -------------------------------------------------------------------------
    # Snapshot Access
    # -------------------------------------------------------------------------

    def get_todos(self) -> Snapshot:
        """Read and deserialize the store once."""
        raw = self.page.evaluate(_READ_SCRIPT, self.key)
        return [TodoRecord.from_dict(item) for item in raw]

    def clear(self) -> None:
        """Remove the key from localStorage."""
        self.page.evaluate("key => window.localStorage.removeItem(key)", self.key)

    def set_todos(self, todos: list[TodoRecord]) -> None:
        """
        Overwrite the store with ``todos``.

        The application only reads storage on load; reload afterwards.
        """
        payload = json.dumps([todo.to_dict() for todo in todos])
        self.page.evaluate(
            "([key, value]) => window.localStorage.setItem(key, value)", [self.key, payload]
        )

    # -------------------------------------------------------------------------
    # Waiting
    # -------------------------------------------------------------------------

    def wait_until(
        self,
        predicate: StoragePredicate | Callable[[Snapshot], bool],
        timeout: float | None = None,
    ) -> None:
        """
        Block until the persisted snapshot satisfies ``predicate``.

        A StoragePredicate is polled inside the browser by
        ``page.wait_for_function``. A plain callable is polled from Python,
        re-reading the store every ``poll_interval`` milliseconds.

        Args:
            predicate: StoragePredicate or a pure function of the snapshot.
            timeout: Deadline in milliseconds; defaults to the instance's.

        Raises:
            WaitTimeoutError: If the deadline passes first. The error
                carries the last snapshot observed.
        """
        timeout = self.timeout if timeout is None else timeout
        if isinstance(predicate, StoragePredicate):
            self._wait_in_browser(predicate, timeout)
        else:
            self._wait_in_python(predicate, timeout)

    def wait_for_todo_count(self, expected: int, timeout: float | None = None) -> None:
        self.wait_until(todo_count(expected), timeout)

    def wait_for_completed_count(self, expected: int, timeout: float | None = None) -> None:
        self.wait_until(completed_count(expected), timeout)

    def wait_for_title(self, title: str, timeout: float | None = None) -> None:
        self.wait_until(contains_title(title), timeout)

    def wait_until_empty(self, timeout: float | None = None) -> None:
        self.wait_until(is_empty(), timeout)

    def _wait_in_browser(self, predicate: StoragePredicate, timeout: float | None) -> None:
        script = (
            "([key, arg]) => {"
            " const todos = JSON.parse(window.localStorage.getItem(key) || '[]');"
            f" return ({predicate.expression})(todos, arg);"
            " }"
        )
        try:
            self.page.wait_for_function(script, arg=[self.key, predicate.arg], timeout=timeout)
        except PlaywrightTimeoutError as exc:
            snapshot = self.get_todos()
            logger.warning("Storage never reached %s; last snapshot: %s", predicate.description, snapshot)
            raise WaitTimeoutError(
                f"localStorage[{self.key!r}] did not reach {predicate.description}",
                timeout=timeout,
                snapshot=snapshot,
            ) from exc

    def _wait_in_python(self, predicate: Callable[[Snapshot], bool], timeout: float | None) -> None:
        # Playwright's own default action timeout
        budget = 30_000 if timeout is None else timeout
        deadline = time.monotonic() + budget / 1000
        while True:
            snapshot = self.get_todos()
            if predicate(snapshot):
                return
            if time.monotonic() >= deadline:
                logger.warning("Storage predicate still false; last snapshot: %s", snapshot)
                raise WaitTimeoutError(
                    f"localStorage[{self.key!r}] predicate not satisfied",
                    timeout=timeout,
                    snapshot=snapshot,
                )
            self.page.wait_for_timeout(self.poll_interval)
