"""Nyumba core domain models.

This module defines :class:`PropertyRecord`, the immutable snapshot of one
rental listing that every layer (catalog, pipeline, views) shares, and the
:class:`PropertyType` enumeration.

Records accept both the snake_case field names and the camelCase keys used by
the front-end data files (``propertyType``, ``datePosted``), so a JSON fixture
can be validated directly.

Typical usage::

    from datetime import date
    from nyumba.core.models import PropertyRecord, PropertyType

    record = PropertyRecord(
        id="1",
        title="Modern Downtown Apartment",
        location="123 Main St, New York, NY 10001",
        price=2500,
        bedrooms=2,
        bathrooms=2,
        property_type=PropertyType.APARTMENT,
        date_posted=date(2024, 1, 15),
        landlord="Sarah Johnson",
    )
"""

from __future__ import annotations

import logging
from datetime import date
from enum import StrEnum

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

__all__ = [
    "PropertyType",
    "PropertyRecord",
]

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class PropertyType(StrEnum):
    """Kinds of rental property a listing can describe."""

    APARTMENT = "apartment"
    HOUSE = "house"
    CONDO = "condo"
    TOWNHOUSE = "townhouse"
    STUDIO = "studio"
    DUPLEX = "duplex"


# ---------------------------------------------------------------------------
# Core domain model
# ---------------------------------------------------------------------------


class PropertyRecord(BaseModel):
    """Immutable snapshot of a rental listing.

    The model is **frozen** so records can be hashed, shared between view
    states and passed through the pipeline without copying.

    Attributes:
        id: Identifier, unique within the collection it belongs to.
        title: Listing headline.
        description: Free-text body.  Defaults to an empty string.
        location: Street address / city line.
        price: Monthly rent in whole currency units.
        bedrooms: Bedroom count; ``0`` means a studio.
        bathrooms: Bathroom count; may be fractional (``1.5``).
        property_type: One of :class:`PropertyType`.
        amenities: Amenity labels, in display order.
        images: Image URLs; the first one is used on cards.
        rating: Average review score in ``[0, 5]``.
        reviews: Number of reviews behind :attr:`rating`.
        available: ``False`` when the unit is already let.
        date_posted: Calendar date the listing went up; never in the future.
        landlord: Landlord display name.
        featured: Promoted on the landing page.
    """

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "alias_generator": to_camel,
    }

    id: str = Field(..., min_length=1, description="Listing identifier.")
    title: str = Field(..., min_length=1, description="Listing headline.")
    description: str = Field(default="", description="Listing body text.")
    location: str = Field(default="", description="Address or city line.")
    price: int = Field(..., ge=0, description="Monthly rent (non-negative integer).")
    bedrooms: int = Field(default=0, ge=0, description="Bedroom count; 0 = studio.")
    bathrooms: float = Field(default=1, ge=0, description="Bathroom count.")
    property_type: PropertyType = Field(..., description="Kind of property.")
    amenities: tuple[str, ...] = Field(default=(), description="Amenity labels.")
    images: tuple[str, ...] = Field(default=(), description="Image URLs.")
    rating: float = Field(default=0.0, ge=0, le=5, description="Average rating 0-5.")
    reviews: int = Field(default=0, ge=0, description="Review count.")
    available: bool = Field(default=True, description="Open for applications.")
    date_posted: date = Field(..., description="Publication date.")
    landlord: str = Field(default="", description="Landlord display name.")
    featured: bool = Field(default=False, description="Promoted listing.")

    # ------------------------------------------------------------------
    # Validators
    # ------------------------------------------------------------------

    @field_validator("property_type", mode="before")
    @classmethod
    def _lowercase_type(cls, v: object) -> object:
        """Accept ``"Apartment"`` as well as ``"apartment"``."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("date_posted")
    @classmethod
    def _not_in_future(cls, v: date) -> date:
        if v > date.today():
            raise ValueError(f"date_posted {v.isoformat()} is in the future")
        return v

    @field_validator("amenities", "images", mode="before")
    @classmethod
    def _drop_blank_entries(cls, v: object) -> object:
        """Discard blank strings from list-valued fields."""
        if isinstance(v, (list, tuple)):
            return tuple(item for item in v if not (isinstance(item, str) and not item.strip()))
        return v

    # ------------------------------------------------------------------
    # Derived helpers
    # ------------------------------------------------------------------

    @property
    def is_studio(self) -> bool:
        return self.bedrooms == 0

    @property
    def cover_image(self) -> str | None:
        """First image URL, or ``None`` when the listing has no photos."""
        return self.images[0] if self.images else None
