"""
Shared pytest fixtures for the TodoMVC test suite.

This module contains fixtures that are shared across all test modules:
configuration, seeded test data, and Playwright mocks for unit tests.
Each test gets fresh mocks and a fresh generator to keep tests isolated.

Key Concepts Demonstrated:
- Fixture scopes (function, session)
- Seeded data factories for reproducible runs
- Mock driver objects built on the real Playwright API spec
"""

from __future__ import annotations

import logging

import pytest

from shared.test_helpers import make_locator, make_page
from todo_pages.config import Config, get_config
from todo_pages.generators import TodoDataGenerator, generate_default_todos

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Configuration Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def suite_config() -> type[Config]:
    """Configuration class for the current environment (TODO_ENV / CI)."""
    return get_config()


# -----------------------------------------------------------------------------
# Test Data Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def data_generator(suite_config: type[Config]) -> TodoDataGenerator:
    """
    Provide a seeded data generator.

    The seed comes from TODO_DATA_SEED, or is drawn at random when unset.
    It is logged so a failing run can be replayed with TODO_DATA_SEED.
    """
    generator = TodoDataGenerator(seed=suite_config.DATA_SEED)
    logger.info("Test data seed: %s", generator.seed)
    return generator


@pytest.fixture
def todo_titles() -> list[str]:
    """Provide the three fixed todo titles used by most scenarios."""
    return generate_default_todos()


# -----------------------------------------------------------------------------
# Playwright Mock Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def mock_page():
    """Provide a Playwright Page mock with derivable locators."""
    return make_page()


@pytest.fixture
def mock_locator():
    """Provide a Playwright Locator mock with derivable sub-locators."""
    return make_locator()
