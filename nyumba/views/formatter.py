"""Plain-text rendering of property records.

Converts :class:`~nyumba.core.models.PropertyRecord` values into the text the
CLI prints: a results header, compact cards for the listings grid, one-line
rows for list mode, and the full detail view.

Public API
----------
:func:`format_price`: ``2500`` → ``"$2,500"``.

:func:`bedroom_label` / :func:`bathroom_label`: ``0`` → ``"Studio"``,
    ``2.5`` → ``"2.5 bath"``.

:func:`format_results_header`: ``"Showing 3 of 6 properties"``.

:func:`format_card` / :func:`format_row` / :func:`format_detail`: render one
    record.
"""

from __future__ import annotations

import logging
from datetime import date

from nyumba.core.models import PropertyRecord

__all__ = [
    "format_price",
    "bedroom_label",
    "bathroom_label",
    "format_results_header",
    "format_card",
    "format_row",
    "format_detail",
]

logger = logging.getLogger(__name__)

#: Amenity badges shown on a card before collapsing into ``+N more``.
CARD_AMENITY_LIMIT: int = 3

#: Description characters shown on a card.
CARD_DESCRIPTION_MAX_CHARS: int = 120

# ---------------------------------------------------------------------------
# Field formatters
# ---------------------------------------------------------------------------


def format_price(amount: int, symbol: str = "$") -> str:
    """Format a rent with thousands separators, e.g. ``"$2,500"``."""
    return f"{symbol}{amount:,}"


def bedroom_label(bedrooms: int) -> str:
    return "Studio" if bedrooms == 0 else f"{bedrooms} bed"


def bathroom_label(bathrooms: float) -> str:
    """``2.0`` → ``"2 bath"``, ``1.5`` → ``"1.5 bath"``."""
    return f"{bathrooms:g} bath"


def _fmt_date(value: date) -> str:
    return value.strftime("%d %b %Y")


def _fmt_rating(record: PropertyRecord) -> str:
    return f"★ {record.rating:g} ({record.reviews})"


def _fmt_amenities(amenities: tuple[str, ...], limit: int = CARD_AMENITY_LIMIT) -> str:
    shown = list(amenities[:limit])
    if len(amenities) > limit:
        shown.append(f"+{len(amenities) - limit} more")
    return " · ".join(shown)


def _title_line(record: PropertyRecord, saved: bool) -> str:
    title = record.title
    if not record.available:
        title += " [Unavailable]"
    if saved:
        title += " ♥"
    return title


def _truncate(text: str, max_chars: int) -> str:
    text = text.strip()
    if len(text) > max_chars:
        return text[:max_chars].rstrip() + "…"
    return text


# ---------------------------------------------------------------------------
# Record formatters
# ---------------------------------------------------------------------------


def format_results_header(shown: int, total: int) -> str:
    if shown == 0:
        return "No properties found. Try adjusting your search criteria."
    noun = "property" if total == 1 else "properties"
    return f"Showing {shown} of {total} {noun}"


def format_card(record: PropertyRecord, *, saved: bool = False, symbol: str = "$") -> str:
    """Render a grid card.

    Layout::

        Modern Downtown Apartment ♥
        $2,500 per month  •  2 bed  •  2 bath  •  ★ 4.8 (24)
        123 Main St, New York, NY 10001
        Beautiful modern apartment in the heart of downtown…
        Gym · Pool · Parking · +1 more

    Unavailable listings get an ``[Unavailable]`` tag after the title.
    """
    details = "  •  ".join(
        [
            f"{format_price(record.price, symbol)} per month",
            bedroom_label(record.bedrooms),
            bathroom_label(record.bathrooms),
            _fmt_rating(record),
        ]
    )
    lines = [_title_line(record, saved), details]
    if record.location:
        lines.append(record.location)
    if record.description:
        lines.append(_truncate(record.description, CARD_DESCRIPTION_MAX_CHARS))
    if record.amenities:
        lines.append(_fmt_amenities(record.amenities))
    return "\n".join(lines)


def format_row(record: PropertyRecord, *, saved: bool = False, symbol: str = "$") -> str:
    """Render a single line for list mode."""
    marker = "♥" if saved else " "
    details = [f"{format_price(record.price, symbol)}/mo", bedroom_label(record.bedrooms)]
    if record.location:
        details.append(record.location)
    status = "" if record.available else "  (unavailable)"
    return f"{marker} [{record.id}] {record.title} — {', '.join(details)}{status}"


def format_detail(record: PropertyRecord, *, saved: bool = False, symbol: str = "$") -> str:
    """Render the full detail view of one property."""
    lines: list[str] = [_title_line(record, saved)]
    lines.append(f"{format_price(record.price, symbol)} per month")
    lines.append("")
    lines.append(f"Type:       {record.property_type.value.capitalize()}")
    lines.append(f"Bedrooms:   {bedroom_label(record.bedrooms)}")
    lines.append(f"Bathrooms:  {bathroom_label(record.bathrooms)}")
    lines.append(f"Location:   {record.location or '-'}")
    lines.append(f"Rating:     {_fmt_rating(record)} reviews")
    lines.append(f"Landlord:   {record.landlord or '-'}")
    lines.append(f"Posted:     {_fmt_date(record.date_posted)}")
    lines.append(f"Available:  {'yes' if record.available else 'no'}")

    if record.description:
        lines.append("")
        lines.append(record.description.strip())

    if record.amenities:
        lines.append("")
        lines.append("Amenities:")
        lines.extend(f"  - {amenity}" for amenity in record.amenities)

    return "\n".join(lines)
