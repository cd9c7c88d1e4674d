"""Unit tests for :class:`~nyumba.catalog.forms.AddPropertyForm`."""

from __future__ import annotations

from datetime import date

import pytest

from nyumba.catalog.forms import AddPropertyForm
from nyumba.core.exceptions import CatalogError, InvalidListingError
from nyumba.core.models import PropertyType


def _make_form(**overrides: object) -> AddPropertyForm:
    fields: dict[str, object] = {
        "title": "Garden Cottage",
        "location": "Area 10, Lilongwe",
        "price": "1800",
        "property_type": "house",
        "bedrooms": "2",
        "bathrooms": "1",
        "description": "Quiet two bedroom cottage with a walled garden.",
    }
    fields.update(overrides)
    return AddPropertyForm(**fields)  # type: ignore[arg-type]


# ===========================================================================
# validate()
# ===========================================================================


class TestAddPropertyFormValidation:
    def test_valid_form_has_no_errors(self) -> None:
        assert _make_form().validate() == {}

    def test_empty_form_reports_every_required_field(self) -> None:
        assert AddPropertyForm().validate() == {
            "title": "Property title is required",
            "location": "Location is required",
            "price": "Price is required",
            "property_type": "Property type is required",
            "bedrooms": "Number of bedrooms is required",
            "bathrooms": "Number of bathrooms is required",
            "description": "Property description is required",
        }

    def test_whitespace_only_text_is_missing(self) -> None:
        errors = _make_form(title="   ", location="\t", description="   ").validate()
        assert errors["title"] == "Property title is required"
        assert errors["location"] == "Location is required"
        assert errors["description"] == "Property description is required"

    @pytest.mark.parametrize("price", ["abc", "0", "-50", "nan"])
    def test_invalid_price(self, price: str) -> None:
        assert _make_form(price=price).validate() == {"price": "Please enter a valid price"}

    def test_short_description(self) -> None:
        errors = _make_form(description="Too short").validate()
        assert errors == {"description": "Description must be at least 20 characters"}

    def test_description_of_exactly_twenty_characters(self) -> None:
        assert _make_form(description="x" * 20).validate() == {}

    def test_unknown_property_type(self) -> None:
        errors = _make_form(property_type="castle").validate()
        assert errors == {"property_type": "Please select a valid property type"}

    @pytest.mark.parametrize("bedrooms", ["studio", "Studio", "1", "4+"])
    def test_bedroom_choices_accepted(self, bedrooms: str) -> None:
        assert _make_form(bedrooms=bedrooms).validate() == {}

    @pytest.mark.parametrize("bedrooms", ["many", "1.5", "-1"])
    def test_invalid_bedrooms(self, bedrooms: str) -> None:
        errors = _make_form(bedrooms=bedrooms).validate()
        assert errors == {"bedrooms": "Please enter a valid number of bedrooms"}

    def test_invalid_bathrooms(self) -> None:
        errors = _make_form(bathrooms="some").validate()
        assert errors == {"bathrooms": "Please enter a valid number of bathrooms"}


# ===========================================================================
# to_record()
# ===========================================================================


class TestAddPropertyFormToRecord:
    def test_builds_new_unrated_listing(self) -> None:
        record = _make_form(amenities=("Garden", "Parking")).to_record(
            landlord=" Sarah Johnson ", property_id="new-1", posted=date(2024, 2, 1)
        )
        assert record.id == "new-1"
        assert record.title == "Garden Cottage"
        assert record.price == 1800
        assert record.bedrooms == 2
        assert record.bathrooms == 1
        assert record.property_type is PropertyType.HOUSE
        assert record.amenities == ("Garden", "Parking")
        assert record.rating == 0
        assert record.reviews == 0
        assert record.available is True
        assert record.featured is False
        assert record.landlord == "Sarah Johnson"
        assert record.date_posted == date(2024, 2, 1)

    def test_defaults_to_today_and_random_id(self) -> None:
        first = _make_form().to_record()
        second = _make_form().to_record()
        assert first.date_posted == date.today()
        assert first.id and second.id and first.id != second.id

    def test_studio_and_plus_counts(self) -> None:
        assert _make_form(bedrooms="studio").to_record().bedrooms == 0
        record = _make_form(bedrooms="4+", bathrooms="2.5").to_record()
        assert record.bedrooms == 4
        assert record.bathrooms == 2.5

    def test_type_is_case_insensitive(self) -> None:
        assert _make_form(property_type=" Condo ").to_record().property_type is PropertyType.CONDO

    def test_unavailable_listing(self) -> None:
        assert _make_form(available=False).to_record().available is False

    def test_invalid_form_raises_with_field_errors(self) -> None:
        with pytest.raises(InvalidListingError) as exc_info:
            _make_form(title="", price="free").to_record()
        assert exc_info.value.field_errors == {
            "title": "Property title is required",
            "price": "Please enter a valid price",
        }
        assert "price, title" in str(exc_info.value)
        assert isinstance(exc_info.value, CatalogError)
