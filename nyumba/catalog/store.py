"""Read-only property catalog.

Provides :class:`PropertyCatalog`, the data provider the listings view and
detail view read from.  A catalog owns an immutable, id-unique tuple of
:class:`~nyumba.core.models.PropertyRecord`; nothing downstream mutates it.

Records come either from the built-in sample set or from a JSON file holding
an array of record objects::

    from nyumba.catalog.store import PropertyCatalog, load_catalog

    catalog = PropertyCatalog.sample()
    catalog = PropertyCatalog.from_json("listings.json")
    catalog = load_catalog(settings)       # picks one based on CATALOG_PATH
    catalog = catalog.with_record(new_record)  # returns a new catalog

    record = catalog.get("3")
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from nyumba.catalog.fixtures import SAMPLE_PROPERTIES
from nyumba.core import events
from nyumba.core.exceptions import (
    CatalogLoadError,
    ConfigError,
    DuplicatePropertyError,
    PropertyNotFoundError,
)
from nyumba.core.models import PropertyRecord
from nyumba.core.settings import Settings

__all__ = ["PropertyCatalog", "load_catalog"]

logger = logging.getLogger(__name__)

_RECORD_LIST = TypeAdapter(list[PropertyRecord])


class PropertyCatalog:
    """Immutable, ordered collection of property records.

    Args:
        records: Records in display-default order.  Ids must be unique.

    Raises:
        DuplicatePropertyError: If two records share an id.
    """

    def __init__(self, records: Iterable[PropertyRecord]) -> None:
        ordered = tuple(records)
        index: dict[str, PropertyRecord] = {}
        for record in ordered:
            if record.id in index:
                raise DuplicatePropertyError(record.id)
            index[record.id] = record
        self._records = ordered
        self._index = index

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def sample(cls) -> PropertyCatalog:
        """Catalog built from the bundled sample listings."""
        catalog = cls(_RECORD_LIST.validate_python(list(SAMPLE_PROPERTIES)))
        logger.debug(
            "Loaded %d sample properties",
            len(catalog),
            extra={"event": events.CATALOG_LOADED},
        )
        return catalog

    @classmethod
    def from_json(cls, path: str | Path) -> PropertyCatalog:
        """Load a catalog from a JSON array of property objects.

        Args:
            path: File to read.  Keys may be snake_case or camelCase.

        Raises:
            CatalogLoadError: If the file is unreadable, not JSON, or a record
                fails validation.
            DuplicatePropertyError: If two records share an id.
        """
        source = str(path)
        try:
            raw = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise CatalogLoadError(source, f"cannot read file: {exc}") from exc

        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise CatalogLoadError(source, f"invalid JSON: {exc}") from exc

        if not isinstance(payload, list):
            raise CatalogLoadError(source, "expected a JSON array of property objects")

        try:
            records = _RECORD_LIST.validate_python(payload)
        except ValidationError as exc:
            raise CatalogLoadError(
                source, f"{exc.error_count()} invalid record field(s): {exc}"
            ) from exc

        catalog = cls(records)
        logger.info(
            "Loaded %d properties from %s",
            len(catalog),
            source,
            extra={"event": events.CATALOG_LOADED},
        )
        return catalog

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def all(self) -> tuple[PropertyRecord, ...]:  # noqa: A003
        return self._records

    def find(self, property_id: str) -> PropertyRecord | None:
        return self._index.get(property_id)

    def get(self, property_id: str) -> PropertyRecord:
        """Return the record with *property_id*.

        Raises:
            PropertyNotFoundError: If no such record exists.
        """
        record = self._index.get(property_id)
        if record is None:
            raise PropertyNotFoundError(property_id)
        return record

    def featured(self) -> list[PropertyRecord]:
        return [record for record in self._records if record.featured]

    def by_landlord(self, landlord: str) -> list[PropertyRecord]:
        """Records whose landlord name equals *landlord* (case-insensitive)."""
        wanted = landlord.strip().casefold()
        return [record for record in self._records if record.landlord.casefold() == wanted]

    def search(self, query: str) -> list[PropertyRecord]:
        """Quick search used by the landing page search box.

        Broader than the listings-view search term: besides title, location
        and description it also matches any amenity label.
        """
        term = query.casefold()
        return [
            record
            for record in self._records
            if term in record.title.casefold()
            or term in record.location.casefold()
            or term in record.description.casefold()
            or any(term in amenity.casefold() for amenity in record.amenities)
        ]

    # ------------------------------------------------------------------
    # Derived catalogs
    # ------------------------------------------------------------------

    def with_record(self, record: PropertyRecord) -> PropertyCatalog:
        """Return a new catalog with *record* appended.

        This catalog is left unchanged.

        Raises:
            DuplicatePropertyError: If *record* reuses an existing id.
        """
        if record.id in self._index:
            raise DuplicatePropertyError(record.id)
        catalog = PropertyCatalog((*self._records, record))
        logger.info(
            "Added property %s (%r)",
            record.id,
            record.title,
            extra={"event": events.PROPERTY_ADDED},
        )
        return catalog

    def without(self, property_id: str) -> PropertyCatalog:
        """Return a new catalog lacking the record with *property_id*.

        Raises:
            PropertyNotFoundError: If no such record exists.
        """
        if property_id not in self._index:
            raise PropertyNotFoundError(property_id)
        catalog = PropertyCatalog(r for r in self._records if r.id != property_id)
        logger.info(
            "Removed property %s",
            property_id,
            extra={"event": events.PROPERTY_REMOVED},
        )
        return catalog

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[PropertyRecord]:
        return iter(self._records)

    def __contains__(self, property_id: object) -> bool:
        return property_id in self._index

    def __repr__(self) -> str:
        return f"PropertyCatalog(records={len(self._records)})"


def load_catalog(settings: Settings) -> PropertyCatalog:
    """Build the catalog selected by *settings*.

    Uses the bundled sample listings unless ``CATALOG_PATH`` is set.

    Raises:
        ConfigError: If ``CATALOG_PATH`` names a file that does not exist.
        CatalogLoadError: If the file exists but cannot be loaded.
    """
    path = settings.catalog_path_resolved
    if path is None:
        return PropertyCatalog.sample()
    if not path.is_file():
        raise ConfigError(f"CATALOG_PATH does not exist: {path}")
    return PropertyCatalog.from_json(path)
