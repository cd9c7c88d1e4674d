"""Listings view state and plain-text rendering."""

from nyumba.views.formatter import (
    format_card,
    format_detail,
    format_price,
    format_results_header,
    format_row,
)
from nyumba.views.state import ListingsViewState, ViewMode

__all__ = [
    "ListingsViewState",
    "ViewMode",
    "format_card",
    "format_detail",
    "format_price",
    "format_results_header",
    "format_row",
]
