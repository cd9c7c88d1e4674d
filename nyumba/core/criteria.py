"""Listing search, filter and sort criteria.

Defines :class:`FilterCriteria`, the transient value describing *what the
user is currently looking at* in the listings view: a free-text search term,
a price bucket, a bedroom bucket, a property type and a sort key.

Criteria are rebuilt on every interaction and never persisted.  Construction
is total: an unrecognised bucket, type or sort string silently falls back to
the permissive default (``all`` / ``newest``) so a bad query parameter can
never break the listings page.

Typical usage::

    from nyumba.core.criteria import FilterCriteria

    criteria = FilterCriteria(
        search_term="downtown",
        price_bucket="2000-3000",
        bedroom_bucket="4+",
        sort_by="price-low",
    )

    if criteria.matches_price(2500):
        ...  # proceed
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel, Field, field_validator

from nyumba.core.models import PropertyType

if TYPE_CHECKING:
    from nyumba.core.models import PropertyRecord

__all__ = [
    "PriceBucket",
    "BedroomBucket",
    "SortKey",
    "FilterCriteria",
]

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class PriceBucket(StrEnum):
    """Coarse monthly-rent ranges offered by the price drop-down.

    ``2000-3000`` and ``3000-4000`` are inclusive at both ends, so a rent of
    exactly 3000 falls in both.
    """

    ALL = "all"
    UNDER_2000 = "under-2000"
    FROM_2000_TO_3000 = "2000-3000"
    FROM_3000_TO_4000 = "3000-4000"
    OVER_4000 = "over-4000"


class BedroomBucket(StrEnum):
    """Bedroom-count choices offered by the bedrooms drop-down.

    Any count of 4 or more (``"4"``, ``7``) selects :attr:`FOUR_PLUS`.
    """

    ALL = "all"
    STUDIO = "studio"
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR_PLUS = "4-plus"


class SortKey(StrEnum):
    """Display orderings for the listings grid."""

    NEWEST = "newest"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    RATING = "rating"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_E = TypeVar("_E", bound=StrEnum)

_BEDROOM_ALIASES: dict[str, str] = {"4+": "4-plus", "4plus": "4-plus", "0": "studio"}
_EXACT_BEDROOMS: dict[BedroomBucket, int] = {
    BedroomBucket.ONE: 1,
    BedroomBucket.TWO: 2,
    BedroomBucket.THREE: 3,
}


def _coerce_choice(
    enum_cls: type[_E],
    value: object,
    default: _E | None,
    aliases: dict[str, str] | None = None,
) -> _E | None:
    """Map *value* onto a member of *enum_cls*, falling back to *default*.

    Strings are stripped and lower-cased first; ints are accepted for
    numeric choices such as bedroom counts.
    """
    if isinstance(value, enum_cls):
        return value
    if value is None:
        return default
    if isinstance(value, (str, int)) and not isinstance(value, bool):
        key = str(value).strip().lower()
        if aliases:
            key = aliases.get(key, key)
        try:
            return enum_cls(key)
        except ValueError:
            pass
    logger.debug(
        "Unrecognised %s value %r; using %r",
        enum_cls.__name__,
        value,
        default.value if default is not None else "all",
    )
    return default


# ---------------------------------------------------------------------------
# Model
# ---------------------------------------------------------------------------


class FilterCriteria(BaseModel):
    """User-selected search, filter and sort parameters.

    Frozen and hashable, so a view can memoise pipeline output keyed on the
    criteria value.

    Attributes:
        search_term: Substring matched case-insensitively against title,
            location and description.  Empty string means *no search*.
        price_bucket: Rent range; :attr:`PriceBucket.ALL` means no limit.
        bedroom_bucket: Bedroom choice; :attr:`BedroomBucket.ALL` means any.
        property_type: Exact property type, or ``None`` for all types.  The
            string ``"all"`` is accepted and stored as ``None``.
        sort_by: Display ordering, :attr:`SortKey.NEWEST` by default.
    """

    model_config = {"frozen": True}

    search_term: str = Field(default="", description="Free-text search; empty = none.")
    price_bucket: PriceBucket = Field(default=PriceBucket.ALL)
    bedroom_bucket: BedroomBucket = Field(default=BedroomBucket.ALL)
    property_type: PropertyType | None = Field(
        default=None,
        description="Exact property type; None = all types.",
    )
    sort_by: SortKey = Field(default=SortKey.NEWEST)

    # ------------------------------------------------------------------
    # Normalising validators
    # ------------------------------------------------------------------

    @field_validator("search_term", mode="before")
    @classmethod
    def _coerce_search_term(cls, v: object) -> str:
        if v is None:
            return ""
        if isinstance(v, str):
            return v
        logger.debug("Non-string search term %r; using its text form", v)
        return str(v)

    @field_validator("price_bucket", mode="before")
    @classmethod
    def _normalise_price_bucket(cls, v: object) -> PriceBucket | None:
        return _coerce_choice(PriceBucket, v, PriceBucket.ALL)

    @field_validator("bedroom_bucket", mode="before")
    @classmethod
    def _normalise_bedroom_bucket(cls, v: object) -> BedroomBucket | None:
        if isinstance(v, (str, int)) and not isinstance(v, bool):
            key = str(v).strip()
            if key.isdigit() and int(key) >= 4:
                return BedroomBucket.FOUR_PLUS
        return _coerce_choice(BedroomBucket, v, BedroomBucket.ALL, _BEDROOM_ALIASES)

    @field_validator("property_type", mode="before")
    @classmethod
    def _normalise_property_type(cls, v: object) -> PropertyType | None:
        if isinstance(v, str) and v.strip().lower() == "all":
            return None
        return _coerce_choice(PropertyType, v, None)

    @field_validator("sort_by", mode="before")
    @classmethod
    def _normalise_sort_key(cls, v: object) -> SortKey | None:
        return _coerce_choice(SortKey, v, SortKey.NEWEST)

    # ------------------------------------------------------------------
    # Derived helpers
    # ------------------------------------------------------------------

    @property
    def is_unfiltered(self) -> bool:
        """``True`` when no filter axis narrows the collection."""
        return (
            not self.search_term
            and self.price_bucket is PriceBucket.ALL
            and self.bedroom_bucket is BedroomBucket.ALL
            and self.property_type is None
        )

    def replace(self, **changes: Any) -> FilterCriteria:
        """Return a copy with *changes* applied, normalised like the constructor.

        Raw strings in *changes* get the same fallback rules as at
        construction.
        """
        return FilterCriteria.model_validate({**self.model_dump(), **changes})

    # ------------------------------------------------------------------
    # Matching helpers (used by the pipeline)
    # ------------------------------------------------------------------

    def matches_search(self, title: str, location: str = "", description: str = "") -> bool:
        """Return True if the search term occurs in any of the text fields.

        Matching uses :meth:`str.casefold` on both sides.  The term is not
        trimmed: ``" "`` only matches text containing a space.
        """
        if not self.search_term:
            return True
        term = self.search_term.casefold()
        return (
            term in title.casefold()
            or term in location.casefold()
            or term in description.casefold()
        )

    def matches_price(self, price: int) -> bool:
        """Return True if *price* falls inside the selected price bucket."""
        bucket = self.price_bucket
        if bucket is PriceBucket.UNDER_2000:
            return price < 2000
        if bucket is PriceBucket.FROM_2000_TO_3000:
            return 2000 <= price <= 3000
        if bucket is PriceBucket.FROM_3000_TO_4000:
            return 3000 <= price <= 4000
        if bucket is PriceBucket.OVER_4000:
            return price > 4000
        return True

    def matches_bedrooms(self, bedrooms: int) -> bool:
        """Return True if *bedrooms* satisfies the selected bedroom bucket."""
        bucket = self.bedroom_bucket
        if bucket is BedroomBucket.STUDIO:
            return bedrooms == 0
        if bucket is BedroomBucket.FOUR_PLUS:
            return bedrooms >= 4
        if bucket in _EXACT_BEDROOMS:
            return bedrooms == _EXACT_BEDROOMS[bucket]
        return True

    def matches_type(self, property_type: PropertyType | str) -> bool:
        if self.property_type is None:
            return True
        return property_type == self.property_type

    def matches_record(self, record: PropertyRecord) -> tuple[bool, str]:
        """Evaluate every filter axis against *record*.

        Checks run in a fixed order and stop at the first failure.

        Args:
            record: The property to evaluate.

        Returns:
            A ``(passed, reason)`` tuple.  *reason* is ``""`` on pass, or a
            short explanation of the first failed check.
        """
        if not self.matches_search(record.title, record.location, record.description):
            return False, f"search {self.search_term!r} not found"
        if not self.matches_price(record.price):
            return False, f"price {record.price} outside bucket {self.price_bucket.value}"
        if not self.matches_bedrooms(record.bedrooms):
            return False, f"bedrooms {record.bedrooms} outside bucket {self.bedroom_bucket.value}"
        if not self.matches_type(record.property_type):
            return False, f"type {record.property_type.value} is not {self.property_type}"
        return True, ""
