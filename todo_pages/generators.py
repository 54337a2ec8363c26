"""
Test data generators for the TodoMVC suite.

Two flavours of data:

- a fixed default set (``DEFAULT_TODOS``) for scenarios whose assertions
  depend on exact titles
- randomized titles from ``TodoDataGenerator``, which owns a seeded Faker
  instance so a failing run can be replayed with the same seed
"""

from __future__ import annotations

import math
import random

from faker import Faker

from todo_pages.models import TodoData

DEFAULT_TODOS = ("buy some cheese", "feed the cat", "book a doctors appointment")

ACTIONS = (
    "buy",
    "sell",
    "find",
    "create",
    "update",
    "delete",
    "check",
    "review",
    "organize",
    "clean",
    "fix",
    "build",
    "learn",
    "practice",
    "study",
)

OBJECTS = (
    "some cheese",
    "the cat",
    "a doctors appointment",
    "groceries",
    "a new book",
    "the house",
    "the car",
    "the garden",
    "the kitchen",
    "the documents",
    "the project",
    "the presentation",
    "the report",
    "the website",
    "the application",
    "the database",
    "the server",
)

EDIT_TEXTS = (
    "buy some sausages",
    "feed the dog",
    "book a dentist appointment",
    "clean the house",
    "fix the computer",
)


def generate_default_todos() -> list[str]:
    """Return a fresh copy of the three fixed todo titles."""
    return list(DEFAULT_TODOS)


def generate_text_with_spaces(text: str, padding: int = 4) -> str:
    """
    Surround text with spaces, for exercising the app's trimming.

    Args:
        text: Text to pad.
        padding: Number of spaces on each side.

    Returns:
        Padded text.
    """
    spaces = " " * padding
    return f"{spaces}{text}{spaces}"


class TodoDataGenerator:
    """
    Seeded source of randomized todo data.

    Attributes:
        seed: Seed the Faker instance was initialised with. Drawn at random
            when none is given, so every run can be replayed.
        fake: The generator's own Faker instance.

    Example:
        generator = TodoDataGenerator(seed=42)
        titles = generator.todo_titles(5)
    """

    def __init__(self, seed: int | None = None):
        if seed is None:
            seed = random.SystemRandom().randrange(2**32)
        self.seed = seed
        self.fake = Faker()
        self.fake.seed_instance(seed)

    def random_todo_text(self) -> str:
        """Build one "<action> <object>" title."""
        action = self.fake.random_element(elements=ACTIONS)
        target = self.fake.random_element(elements=OBJECTS)
        return f"{action} {target}"

    def todo_titles(self, count: int) -> list[str]:
        """
        Build ``count`` distinct random titles.

        Args:
            count: Number of titles.

        Returns:
            Unique titles, in generation order.

        Raises:
            ValueError: If count is negative or exceeds the number of
                distinct titles available.
        """
        available = len(ACTIONS) * len(OBJECTS)
        if count < 0 or count > available:
            raise ValueError(f"count must be between 0 and {available}, got {count}")

        titles: list[str] = []
        seen: set[str] = set()
        while len(titles) < count:
            text = self.random_todo_text()
            if text not in seen:
                seen.add(text)
                titles.append(text)
        return titles

    def todo_item(self, title: str | None = None, completed: bool = False) -> TodoData:
        """Build one todo, with a random title unless one is given."""
        return TodoData(title=title or self.random_todo_text(), completed=completed)

    def todo_objects(self, count: int, completed_ratio: float = 0.0) -> list[TodoData]:
        """
        Build ``count`` todos where the leading share is completed.

        Args:
            count: Number of todos.
            completed_ratio: Fraction (0..1) of todos marked completed; the
                first ``floor(count * completed_ratio)`` are completed.

        Returns:
            List of TodoData with unique titles.
        """
        if not 0 <= completed_ratio <= 1:
            raise ValueError(f"completed_ratio must be within [0, 1], got {completed_ratio}")
        completed = math.floor(count * completed_ratio)
        return [
            TodoData(title=title, completed=index < completed)
            for index, title in enumerate(self.todo_titles(count))
        ]

    def random_todo_count(self) -> int:
        """Pick a list size between 1 and 10."""
        return self.fake.random_int(min=1, max=10)

    def edit_text(self) -> str:
        """Pick a replacement title for edit scenarios."""
        return self.fake.random_element(elements=EDIT_TEXTS)
