"""Nyumba exception taxonomy.

Every custom exception inherits from :class:`NyumbaError`.  Exceptions are
organised by architectural layer so callers can catch at the right granularity:

    Layer hierarchy
    ---------------
    NyumbaError
    ├── ConfigError
    ├── CatalogError
    │   ├── CatalogLoadError
    │   ├── DuplicatePropertyError
    │   ├── InvalidListingError
    │   └── PropertyNotFoundError
    └── AuthError
        ├── InvalidCredentialsError
        ├── AccountExistsError
        └── AuthBackendError

The listing filter/sort pipeline raises none of these: it normalises bad
criteria instead of failing.

Usage:

    from nyumba.core.exceptions import PropertyNotFoundError

    raise PropertyNotFoundError("42")
"""

from __future__ import annotations

import logging

__all__ = [
    "NyumbaError",
    # Config
    "ConfigError",
    # Catalog
    "CatalogError",
    "CatalogLoadError",
    "DuplicatePropertyError",
    "InvalidListingError",
    "PropertyNotFoundError",
    # Auth
    "AuthError",
    "InvalidCredentialsError",
    "AccountExistsError",
    "AuthBackendError",
]

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------


class NyumbaError(Exception):
    """Root exception for all Nyumba errors.

    Catch this to handle any application-level error uniformly.  Prefer
    catching layer-specific subclasses wherever possible.
    """


# ---------------------------------------------------------------------------
# Config layer
# ---------------------------------------------------------------------------


class ConfigError(NyumbaError):
    """Raised when the application configuration is invalid or incomplete.

    Examples:
        - ``CATALOG_PATH`` points at a file that does not exist.
        - A variable contains an out-of-range value.
    """


# ---------------------------------------------------------------------------
# Catalog layer
# ---------------------------------------------------------------------------


class CatalogError(NyumbaError):
    """Base class for errors raised by the property catalog."""


class CatalogLoadError(CatalogError):
    """Raised when a property data file cannot be read or parsed.

    Args:
        source: Path or label of the data source.
        message: Human-readable error description.
    """

    def __init__(self, source: str, message: str) -> None:
        self.source = source
        super().__init__(f"[{source}] {message}")


class DuplicatePropertyError(CatalogError):
    """Raised when two records in one collection share an id.

    Args:
        property_id: The id that appears more than once.
    """

    def __init__(self, property_id: str) -> None:
        self.property_id = property_id
        super().__init__(f"Duplicate property id in collection: {property_id!r}")


class InvalidListingError(CatalogError):
    """Raised when an add-property form is turned into a record while invalid.

    Args:
        field_errors: ``{field: message}`` as returned by ``validate()``.
    """

    def __init__(self, field_errors: dict[str, str]) -> None:
        self.field_errors = dict(field_errors)
        fields = ", ".join(sorted(self.field_errors))
        super().__init__(f"Invalid listing: {fields}")


class PropertyNotFoundError(CatalogError):
    """Raised when a property id is not present in the catalog.

    Args:
        property_id: The id that was looked up.
    """

    def __init__(self, property_id: str) -> None:
        self.property_id = property_id
        super().__init__(f"Property not found: {property_id!r}")


# ---------------------------------------------------------------------------
# Auth layer
# ---------------------------------------------------------------------------


class AuthError(NyumbaError):
    """Base class for errors raised by an authentication back end.

    The sign-in / sign-up controller turns these into inline messages; they
    never reach the listing pipeline.
    """


class InvalidCredentialsError(AuthError):
    """Raised when an email/password pair is not accepted."""

    def __init__(self, message: str = "Invalid email or password") -> None:
        super().__init__(message)


class AccountExistsError(AuthError):
    """Raised when signing up with an email that is already registered.

    Args:
        email: The conflicting email address.
    """

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"An account with this email already exists: {email!r}")


class AuthBackendError(AuthError):
    """Raised when the back end itself fails (unreachable, timed out, etc.)."""
