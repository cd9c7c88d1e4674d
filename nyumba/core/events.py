"""Structured log event name constants.

Key transitions emit a log record with an ``event`` field, passed via
``extra={"event": events.X}``.  In ``LOG_FORMAT=json`` mode it surfaces as
``extra.event``; in text mode the message is self-describing.

Usage example::

    import logging
    from nyumba.core import events

    logger = logging.getLogger(__name__)

    logger.info("Catalog loaded", extra={"event": events.CATALOG_LOADED})
"""

from __future__ import annotations

__all__ = [
    # Catalog
    "CATALOG_LOADED",
    "PROPERTY_ADDED",
    "PROPERTY_REMOVED",
    # Listings view
    "LISTINGS_RECOMPUTED",
    "PROPERTY_SAVED",
    "PROPERTY_UNSAVED",
    # Auth
    "SIGNIN_OK",
    "SIGNIN_FAILED",
    "SIGNUP_OK",
    "SIGNUP_FAILED",
    "SIGNOUT",
]

# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

#: A property collection was built (sample data or JSON file).
CATALOG_LOADED: str = "CATALOG_LOADED"

#: A landlord listing was added to a catalog.
PROPERTY_ADDED: str = "PROPERTY_ADDED"

#: A listing was removed from a catalog.
PROPERTY_REMOVED: str = "PROPERTY_REMOVED"

# ---------------------------------------------------------------------------
# Listings view
# ---------------------------------------------------------------------------

#: The filter/sort pipeline ran after a criteria change.
LISTINGS_RECOMPUTED: str = "LISTINGS_RECOMPUTED"

#: A property id was added to the saved set.
PROPERTY_SAVED: str = "PROPERTY_SAVED"

#: A property id was removed from the saved set.
PROPERTY_UNSAVED: str = "PROPERTY_UNSAVED"

# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------

SIGNIN_OK: str = "SIGNIN_OK"
SIGNIN_FAILED: str = "SIGNIN_FAILED"
SIGNUP_OK: str = "SIGNUP_OK"
SIGNUP_FAILED: str = "SIGNUP_FAILED"
SIGNOUT: str = "SIGNOUT"
