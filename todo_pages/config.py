"""
Test-suite configuration module.

Configuration classes for the environments the suite runs in (a developer
machine or CI). Values are loaded from environment variables with sensible
defaults, so the same suite can target a local TodoMVC build or the public
Playwright demo.
"""

import os


def _optional_int(value: str | None) -> int | None:
    if value is None or value == "":
        return None
    return int(value)


class Config:
    """Base configuration with default settings."""

    BASE_URL: str = os.environ.get("TODO_BASE_URL", "https://demo.playwright.dev")
    STORAGE_KEY: str = os.environ.get("TODO_STORAGE_KEY", "react-todos")

    # Playwright timeouts are expressed in milliseconds
    DEFAULT_TIMEOUT_MS: float = float(os.environ.get("TODO_TIMEOUT_MS", "5000"))

    # Seed for TodoDataGenerator; None means a fresh random seed per run
    DATA_SEED: int | None = _optional_int(os.environ.get("TODO_DATA_SEED"))

    # Seconds to wait for the app under test to answer before skipping e2e
    READY_TIMEOUT_S: int = int(os.environ.get("TODO_READY_TIMEOUT", "10"))


class LocalConfig(Config):
    """Developer machine configuration."""


class CIConfig(Config):
    """CI configuration: shared runners are slower, so waits are longer."""

    DEFAULT_TIMEOUT_MS: float = float(os.environ.get("TODO_TIMEOUT_MS", "15000"))
    READY_TIMEOUT_S: int = int(os.environ.get("TODO_READY_TIMEOUT", "60"))


# Configuration mapping for easy access
config = {
    "local": LocalConfig,
    "ci": CIConfig,
    "default": LocalConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (local, ci). If None, uses the TODO_ENV
             environment variable, then "ci" when CI is set.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("TODO_ENV") or ("ci" if os.environ.get("CI") else "local")
    return config.get(env, config["default"])
