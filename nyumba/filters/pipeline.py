"""Listing filter/sort pipeline.

Turns an ordered collection of :class:`~nyumba.core.models.PropertyRecord`
plus a :class:`~nyumba.core.criteria.FilterCriteria` into the records the
listings view should show, in display order:

* **Search**: case-insensitive substring of title, location or description.
* **Price**: record rent inside the selected bucket.
* **Bedrooms**: studio, exact 1/2/3, or 4 and more.
* **Type**: exact property type.

Survivors are then sorted by the selected key with a stable sort, so records
that tie keep their input order.

The pipeline is pure and total: inputs are never mutated, a fresh list is
returned every call, and no criteria value can make it raise.

Typical usage::

    from nyumba.core.criteria import FilterCriteria
    from nyumba.filters.pipeline import filter_and_sort

    visible = filter_and_sort(catalog.all(), FilterCriteria(sort_by="price-low"))
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from nyumba.core.criteria import FilterCriteria, SortKey
from nyumba.core.models import PropertyRecord

__all__ = [
    "FilterResult",
    "ListingFilter",
    "filter_and_sort",
    "sort_records",
]

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------

# sort key -> (key function, descending)
_SORT_SPECS: dict[SortKey, tuple[Callable[[PropertyRecord], Any], bool]] = {
    SortKey.NEWEST: (lambda r: r.date_posted, True),
    SortKey.PRICE_LOW: (lambda r: r.price, False),
    SortKey.PRICE_HIGH: (lambda r: r.price, True),
    SortKey.RATING: (lambda r: r.rating, True),
}


def sort_records(records: Iterable[PropertyRecord], sort_by: SortKey) -> list[PropertyRecord]:
    """Return *records* ordered by *sort_by* as a new list.

    :func:`sorted` stays stable with ``reverse=True``, so descending orders
    also keep ties in input order.

    Args:
        records: Records to order.  Not modified.
        sort_by: Ordering to apply; unknown keys fall back to newest first.

    Returns:
        A new list in display order.
    """
    key, descending = _SORT_SPECS.get(sort_by, _SORT_SPECS[SortKey.NEWEST])
    return sorted(records, key=key, reverse=descending)


# ---------------------------------------------------------------------------
# Result type
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class FilterResult:
    """Outcome of evaluating one record against the criteria.

    Attributes:
        passed: ``True`` if the record satisfies every active filter.
        reason: Empty when passed; otherwise the first failed check.
        record_id: ``PropertyRecord.id`` of the evaluated record.
    """

    passed: bool
    reason: str
    record_id: str


# ---------------------------------------------------------------------------
# Filter
# ---------------------------------------------------------------------------


class ListingFilter:
    """Rule-based gate deciding which records the listings view shows.

    Stateless apart from the criteria it was built with, so one instance can
    be reused for any number of collections.

    Args:
        criteria: The active search/filter/sort selection.
    """

    def __init__(self, criteria: FilterCriteria) -> None:
        self._criteria = criteria

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    def evaluate(self, record: PropertyRecord) -> FilterResult:
        """Evaluate a single record against the configured criteria."""
        passed, reason = self._criteria.matches_record(record)
        if not passed:
            logger.debug("DROP  %s: %s | %r", record.id, reason, record.title)
        return FilterResult(passed=passed, reason=reason, record_id=record.id)

    def filter_many(
        self,
        records: Sequence[PropertyRecord],
    ) -> tuple[list[PropertyRecord], list[FilterResult]]:
        """Evaluate a batch and return the passing records separately.

        Args:
            records: Records to evaluate.  May be empty.

        Returns:
            ``(passing_records, all_results)``; ``all_results`` has the same
            length and order as the input, ``passing_records`` keeps input
            order.
        """
        if not records:
            return [], []

        all_results = [self.evaluate(record) for record in records]
        passing = [record for record, result in zip(records, all_results) if result.passed]
        return passing, all_results

    def apply(self, records: Sequence[PropertyRecord]) -> list[PropertyRecord]:
        """Filter *records* and sort the survivors for display."""
        passing, _ = self.filter_many(records)
        ordered = sort_records(passing, self._criteria.sort_by)
        logger.debug(
            "Listing pipeline: %d/%d records visible (sort=%s)",
            len(ordered),
            len(records),
            self._criteria.sort_by.value,
        )
        return ordered


def filter_and_sort(
    records: Sequence[PropertyRecord],
    criteria: FilterCriteria,
) -> list[PropertyRecord]:
    """Return the records matching *criteria*, in the order it selects.

    Args:
        records: The externally owned collection.  Read only.
        criteria: Current search/filter/sort selection.

    Returns:
        A new list; empty when nothing matches.
    """
    return ListingFilter(criteria).apply(records)
