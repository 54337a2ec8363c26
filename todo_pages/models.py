"""
Domain data for the TodoMVC application under test.

``TodoData`` is what tests feed into the UI; ``TodoRecord`` is what the
application writes to its localStorage key.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class TodoData:
    """A todo as entered by a test: a title and its completion flag."""

    title: str
    completed: bool = False


@dataclass(frozen=True)
class TodoRecord:
    """
    One record of the persisted store snapshot.

    Attributes:
        id: Identifier assigned by the application.
        title: Todo title as stored (already trimmed by the app).
        completed: Completion flag.
    """

    id: str
    title: str
    completed: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TodoRecord":
        """
        Build a record from one deserialized JSON object.

        Args:
            data: Mapping with ``title`` and optionally ``id``/``completed``.

        Returns:
            TodoRecord instance.
        """
        return cls(
            id=str(data.get("id", "")),
            title=str(data.get("title", "")),
            completed=bool(data.get("completed", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the application's storage shape."""
        return asdict(self)
