"""Nyumba application settings loaded from environment and ``.env`` files.

Uses :mod:`pydantic_settings` to parse environment variables (and optionally
an ``.env`` file) into a validated settings object.  The field name is the
**lowercase** version of the env-var name (e.g. ``CATALOG_PATH`` →
``catalog_path``).

Typical usage::

    from nyumba.core.settings import Settings

    settings = Settings()
    criteria = settings.to_filter_criteria()
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from nyumba.core.criteria import FilterCriteria, SortKey

__all__ = ["Settings"]

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Central application configuration.

    Values are loaded in priority order:

    1. Actual environment variables (highest priority).
    2. ``.env`` file in the working directory.
    3. Field defaults (lowest priority).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------
    catalog_path: str = Field(
        default="",
        description="JSON file of property records; empty = built-in sample data.",
    )

    # ------------------------------------------------------------------
    # Listings view
    # ------------------------------------------------------------------
    default_sort: SortKey = Field(
        default=SortKey.NEWEST,
        description="Initial sort order of the listings view.",
    )
    currency_symbol: str = Field(
        default="$",
        description="Prefix used when formatting rents.",
    )

    # ------------------------------------------------------------------
    # Auth
    # ------------------------------------------------------------------
    min_password_length: int = Field(
        default=6,
        ge=1,
        description="Minimum password length accepted by the sign-up form.",
    )
    tenant_home_path: str = Field(
        default="/home",
        description="Redirect target after a tenant signs in or up.",
    )
    landlord_home_path: str = Field(
        default="/dashboard",
        description="Redirect target after a landlord signs in or up.",
    )

    # ------------------------------------------------------------------
    # Runtime
    # ------------------------------------------------------------------
    log_level: str = Field(default="INFO", description="Logging level.")
    log_format: str = Field(default="text", description="Log format: 'text' or 'json'.")

    # ------------------------------------------------------------------
    # Field validators
    # ------------------------------------------------------------------

    @field_validator("default_sort", mode="before")
    @classmethod
    def _validate_default_sort(cls, v: object) -> object:
        # Unlike FilterCriteria, a bad configured value is an operator error.
        if isinstance(v, str):
            v_lower = v.strip().lower()
            allowed = {key.value for key in SortKey}
            if v_lower not in allowed:
                raise ValueError(f"default_sort must be one of {sorted(allowed)}, got {v!r}")
            return v_lower
        return v

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR"}
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"log_level must be one of {allowed}, got {v!r}")
        return v_upper

    @field_validator("log_format")
    @classmethod
    def _validate_log_format(cls, v: str) -> str:
        allowed = {"text", "json"}
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"log_format must be one of {allowed}, got {v!r}")
        return v_lower

    # ------------------------------------------------------------------
    # Derived helpers
    # ------------------------------------------------------------------

    def to_filter_criteria(self) -> FilterCriteria:
        """Build the criteria a fresh listings view starts from."""
        return FilterCriteria(sort_by=self.default_sort)

    def home_path_for(self, role: str) -> str:
        """Return the post-sign-in redirect for a user *role*."""
        if role == "landlord":
            return self.landlord_home_path
        return self.tenant_home_path

    @property
    def catalog_configured(self) -> bool:
        """``True`` if an external catalog file is configured."""
        return bool(self.catalog_path.strip())

    @property
    def catalog_path_resolved(self) -> Path | None:
        """The catalog path as a resolved :class:`~pathlib.Path`, if set."""
        if not self.catalog_configured:
            return None
        return Path(self.catalog_path).resolve()
