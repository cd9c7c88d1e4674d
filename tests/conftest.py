"""Shared pytest fixtures and configuration for the Nyumba test suite.

This file is loaded automatically by pytest before any test module.
"""

from __future__ import annotations

import logging
import os

import pytest
from pydantic_settings import SettingsConfigDict

from nyumba.catalog.store import PropertyCatalog
from nyumba.core import configure_logging
from nyumba.core.settings import Settings

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _configure_test_logging() -> None:
    """Force DEBUG logging in text format for every test.

    ``force=True`` applies the configuration even when pytest's own
    ``log_cli`` handler is already present.
    """
    configure_logging(level="DEBUG", fmt="text", force=True)


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every Nyumba setting from the environment for one test.

    Also disables pydantic-settings ``.env`` loading, since a local ``.env``
    file is read directly rather than via ``os.environ``.
    """
    prefixes = (
        "CATALOG_",
        "DEFAULT_SORT",
        "CURRENCY_",
        "MIN_PASSWORD",
        "TENANT_",
        "LANDLORD_",
        "LOG_LEVEL",
        "LOG_FORMAT",
    )
    for key in list(os.environ):
        if any(key.upper().startswith(prefix) for prefix in prefixes):
            monkeypatch.delenv(key, raising=False)

    monkeypatch.setattr(
        Settings,
        "model_config",
        SettingsConfigDict(
            env_file=None,
            env_file_encoding="utf-8",
            extra="ignore",
        ),
    )


# ---------------------------------------------------------------------------
# Data
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_catalog() -> PropertyCatalog:
    """The six bundled sample listings."""
    return PropertyCatalog.sample()


@pytest.fixture()
def logger() -> logging.Logger:
    return logging.getLogger("tests")
