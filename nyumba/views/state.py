"""Listings view state.

:class:`ListingsViewState` owns everything the property-listings screen needs
between interactions: the current :class:`~nyumba.core.criteria.FilterCriteria`,
the resulting visible records, the saved (favourited) property ids, and two
pieces of pure display state (grid/list mode and the filter panel toggle).

There is no implicit reactivity.  Every setter builds a new criteria value
and then explicitly calls :meth:`ListingsViewState.recompute`, which runs the
filter/sort pipeline and notifies subscribers so they can re-render::

    state = ListingsViewState(catalog.all())
    state.subscribe(lambda visible: render(visible))

    state.set_search_term("loft")
    state.set_sort("price-low")
    for record in state.visible:
        ...
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from enum import StrEnum

from nyumba.core import events
from nyumba.core.criteria import BedroomBucket, FilterCriteria, PriceBucket, SortKey
from nyumba.core.models import PropertyRecord, PropertyType
from nyumba.filters.pipeline import filter_and_sort

__all__ = ["ListingsViewState", "ViewMode"]

logger = logging.getLogger(__name__)

Subscriber = Callable[[tuple[PropertyRecord, ...]], None]


class ViewMode(StrEnum):
    """Card layout of the listings screen."""

    GRID = "grid"
    LIST = "list"


class ListingsViewState:
    """Explicit state holder for the property-listings screen.

    The record collection is borrowed, never copied or mutated.  Pipeline
    output is memoised on (collection identity, criteria), so repeated
    recomputes with unchanged criteria are free.

    Args:
        records: The externally owned record collection.
        criteria: Starting criteria; defaults to :class:`FilterCriteria()`.
    """

    def __init__(
        self,
        records: Sequence[PropertyRecord],
        criteria: FilterCriteria | None = None,
    ) -> None:
        self._records = records
        self._criteria = criteria or FilterCriteria()
        self._initial_sort = self._criteria.sort_by
        self._visible: tuple[PropertyRecord, ...] = ()
        self._memo_key: tuple[int, FilterCriteria] | None = None
        self._saved: dict[str, None] = {}
        self._subscribers: list[Subscriber] = []
        self.view_mode: ViewMode = ViewMode.GRID
        self.show_filters: bool = False
        self.recompute()

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    @property
    def records(self) -> Sequence[PropertyRecord]:
        return self._records

    @property
    def visible(self) -> tuple[PropertyRecord, ...]:
        """Records currently shown, in display order."""
        return self._visible

    @property
    def result_count(self) -> int:
        return len(self._visible)

    # ------------------------------------------------------------------
    # Criteria setters
    # ------------------------------------------------------------------

    def set_criteria(self, criteria: FilterCriteria) -> tuple[PropertyRecord, ...]:
        """Replace the whole criteria value and recompute."""
        self._criteria = criteria
        return self.recompute()

    def set_search_term(self, term: str) -> tuple[PropertyRecord, ...]:
        return self.set_criteria(self._criteria.replace(search_term=term))

    def set_price_bucket(self, bucket: PriceBucket | str) -> tuple[PropertyRecord, ...]:
        return self.set_criteria(self._criteria.replace(price_bucket=bucket))

    def set_bedroom_bucket(self, bucket: BedroomBucket | str) -> tuple[PropertyRecord, ...]:
        return self.set_criteria(self._criteria.replace(bedroom_bucket=bucket))

    def set_property_type(self, property_type: PropertyType | str | None) -> tuple[PropertyRecord, ...]:
        return self.set_criteria(self._criteria.replace(property_type=property_type))

    def set_sort(self, sort_by: SortKey | str) -> tuple[PropertyRecord, ...]:
        return self.set_criteria(self._criteria.replace(sort_by=sort_by))

    def reset_filters(self) -> tuple[PropertyRecord, ...]:
        """Clear search and every filter axis; restore the initial sort."""
        return self.set_criteria(FilterCriteria(sort_by=self._initial_sort))

    # ------------------------------------------------------------------
    # Recompute / render
    # ------------------------------------------------------------------

    def recompute(self) -> tuple[PropertyRecord, ...]:
        """Run the pipeline for the current criteria and notify subscribers.

        Returns:
            The new :attr:`visible` tuple.
        """
        key = (id(self._records), self._criteria)
        if key != self._memo_key:
            self._visible = tuple(filter_and_sort(self._records, self._criteria))
            self._memo_key = key
            logger.debug(
                "Recomputed listings: %d/%d visible",
                len(self._visible),
                len(self._records),
                extra={"event": events.LISTINGS_RECOMPUTED},
            )
        for callback in list(self._subscribers):
            callback(self._visible)
        return self._visible

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register *callback* to run after every recompute.

        Returns:
            A no-argument function that removes the subscription.
        """
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    # ------------------------------------------------------------------
    # Saved properties
    # ------------------------------------------------------------------

    def toggle_saved(self, property_id: str) -> bool:
        """Add or remove *property_id* from the saved set.

        Returns:
            ``True`` if the id is saved after the call.
        """
        if property_id in self._saved:
            del self._saved[property_id]
            logger.info("Unsaved property %s", property_id, extra={"event": events.PROPERTY_UNSAVED})
            return False
        self._saved[property_id] = None
        logger.info("Saved property %s", property_id, extra={"event": events.PROPERTY_SAVED})
        return True

    def is_saved(self, property_id: str) -> bool:
        return property_id in self._saved

    @property
    def saved_ids(self) -> tuple[str, ...]:
        """Saved ids in the order they were saved."""
        return tuple(self._saved)

    # ------------------------------------------------------------------
    # Display state
    # ------------------------------------------------------------------

    def set_view_mode(self, mode: ViewMode | str) -> ViewMode:
        """Switch between grid and list cards; unknown values keep grid."""
        try:
            self.view_mode = ViewMode(str(mode).strip().lower())
        except ValueError:
            logger.debug("Unrecognised view mode %r; using grid", mode)
            self.view_mode = ViewMode.GRID
        return self.view_mode

    def toggle_filters(self) -> bool:
        self.show_filters = not self.show_filters
        return self.show_filters
