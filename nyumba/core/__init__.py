"""Core domain models, criteria, settings, logging configuration, and errors."""

from nyumba.core.criteria import BedroomBucket, FilterCriteria, PriceBucket, SortKey
from nyumba.core.exceptions import (
    AccountExistsError,
    AuthBackendError,
    AuthError,
    CatalogError,
    CatalogLoadError,
    ConfigError,
    DuplicatePropertyError,
    InvalidCredentialsError,
    InvalidListingError,
    NyumbaError,
    PropertyNotFoundError,
)
from nyumba.core.logging_config import JsonFormatter, configure_logging, session_scope
from nyumba.core.models import PropertyRecord, PropertyType
from nyumba.core.settings import Settings

__all__ = [
    # Logging
    "configure_logging",
    "session_scope",
    "JsonFormatter",
    # Domain models
    "PropertyRecord",
    "PropertyType",
    # Settings
    "Settings",
    # Criteria
    "FilterCriteria",
    "PriceBucket",
    "BedroomBucket",
    "SortKey",
    # Exceptions: base
    "NyumbaError",
    # Exceptions: config
    "ConfigError",
    # Exceptions: catalog
    "CatalogError",
    "CatalogLoadError",
    "DuplicatePropertyError",
    "InvalidListingError",
    "PropertyNotFoundError",
    # Exceptions: auth
    "AuthError",
    "InvalidCredentialsError",
    "AccountExistsError",
    "AuthBackendError",
]
