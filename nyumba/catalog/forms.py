"""Landlord add-property form.

:class:`AddPropertyForm` holds what a landlord typed into the new-listing
form.  ``validate()`` returns a ``{field: message}`` dict in the same shape as
the sign-in forms; ``to_record()`` turns a valid form into a
:class:`~nyumba.core.models.PropertyRecord` ready for
:meth:`PropertyCatalog.with_record`.

Typical usage::

    form = AddPropertyForm(
        title="Garden Cottage",
        location="Area 10, Lilongwe",
        price="1800",
        property_type="house",
        bedrooms="2",
        bathrooms="1",
        description="Quiet two bedroom cottage with a walled garden.",
    )
    catalog = catalog.with_record(form.to_record(landlord="Sarah Johnson"))
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date
from uuid import uuid4

from nyumba.core.exceptions import InvalidListingError
from nyumba.core.models import PropertyRecord, PropertyType

__all__ = ["AddPropertyForm", "MIN_DESCRIPTION_LENGTH"]

logger = logging.getLogger(__name__)

MIN_DESCRIPTION_LENGTH: int = 20


def _parse_count(raw: str) -> float | None:
    """``"studio"`` → 0, ``"4+"`` → 4, ``"1.5"`` → 1.5; None if not a number."""
    text = raw.strip().lower()
    if text == "studio":
        return 0
    try:
        value = float(text.replace("+", ""))
    except ValueError:
        return None
    if math.isnan(value) or value < 0:
        return None
    return value


def _is_whole(value: float | None) -> bool:
    return value is not None and float(value).is_integer()


def _parse_price(raw: str) -> float | None:
    try:
        value = float(raw.strip())
    except ValueError:
        return None
    if math.isnan(value) or value <= 0:
        return None
    return value


@dataclass(frozen=True)
class AddPropertyForm:
    """Fields of the new-listing form.

    Numeric fields stay as typed text until :meth:`to_record`.  Bedrooms
    accept ``"studio"`` and a trailing ``+`` (``"4+"``), as offered by the
    drop-downs.

    Attributes:
        title: Listing headline.
        location: Street address or area.
        price: Monthly rent; must be a positive number.
        property_type: One of :class:`~nyumba.core.models.PropertyType`.
        bedrooms: ``"studio"``, ``"1"`` ... ``"4+"``.
        bathrooms: ``"1"``, ``"1.5"`` ... ``"3+"``.
        description: At least :data:`MIN_DESCRIPTION_LENGTH` characters.
        amenities: Optional amenity labels.
        available: Whether the listing is open to tenants.
    """

    title: str = ""
    location: str = ""
    price: str = ""
    property_type: str = ""
    bedrooms: str = ""
    bathrooms: str = ""
    description: str = ""
    amenities: tuple[str, ...] = ()
    available: bool = True

    def validate(self) -> dict[str, str]:
        errors: dict[str, str] = {}

        if not self.title.strip():
            errors["title"] = "Property title is required"

        if not self.location.strip():
            errors["location"] = "Location is required"

        if not self.price.strip():
            errors["price"] = "Price is required"
        elif _parse_price(self.price) is None:
            errors["price"] = "Please enter a valid price"

        if not self.property_type.strip():
            errors["property_type"] = "Property type is required"
        elif self.property_type.strip().lower() not in {t.value for t in PropertyType}:
            errors["property_type"] = "Please select a valid property type"

        if not self.bedrooms.strip():
            errors["bedrooms"] = "Number of bedrooms is required"
        elif not _is_whole(_parse_count(self.bedrooms)):
            errors["bedrooms"] = "Please enter a valid number of bedrooms"

        if not self.bathrooms.strip():
            errors["bathrooms"] = "Number of bathrooms is required"
        elif _parse_count(self.bathrooms) is None:
            errors["bathrooms"] = "Please enter a valid number of bathrooms"

        if not self.description.strip():
            errors["description"] = "Property description is required"
        elif len(self.description) < MIN_DESCRIPTION_LENGTH:
            errors["description"] = (
                f"Description must be at least {MIN_DESCRIPTION_LENGTH} characters"
            )

        return errors

    def to_record(
        self,
        landlord: str = "",
        *,
        property_id: str | None = None,
        posted: date | None = None,
    ) -> PropertyRecord:
        """Build the listing described by this form.

        New listings start unrated with no reviews and are posted today
        unless *posted* says otherwise.

        Args:
            landlord: Display name of the landlord creating the listing.
            property_id: Id to use; a fresh random id when omitted.
            posted: Posting date; defaults to today.

        Raises:
            InvalidListingError: If :meth:`validate` reports any error.
        """
        errors = self.validate()
        if errors:
            logger.debug("Add-property form rejected: %s", errors)
            raise InvalidListingError(errors)

        return PropertyRecord(
            id=property_id or uuid4().hex[:12],
            title=self.title.strip(),
            description=self.description.strip(),
            location=self.location.strip(),
            price=round(_parse_price(self.price) or 0),
            bedrooms=int(_parse_count(self.bedrooms) or 0),
            bathrooms=_parse_count(self.bathrooms) or 0,
            property_type=self.property_type.strip().lower(),
            amenities=self.amenities,
            rating=0,
            reviews=0,
            available=self.available,
            date_posted=posted or date.today(),
            landlord=landlord.strip(),
        )
