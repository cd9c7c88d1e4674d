"""Read-only property data provider, landlord listing form and sample listings."""

from nyumba.catalog.fixtures import SAMPLE_PROPERTIES
from nyumba.catalog.forms import AddPropertyForm
from nyumba.catalog.store import PropertyCatalog, load_catalog

__all__ = [
    "SAMPLE_PROPERTIES",
    "AddPropertyForm",
    "PropertyCatalog",
    "load_catalog",
]
