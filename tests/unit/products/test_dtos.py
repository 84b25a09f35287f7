"""Unit tests for Product DTOs.

Covers:
- ProductInputDTO: required fields, name bounds, alias handling, immutability.
- DateRangeDTO: parsing, timezone handling, inverted windows.
"""

from __future__ import annotations

from datetime import datetime

import pytest
from django.utils import timezone
from pydantic import ValidationError

from modules.core.validation import field_errors
from modules.products.dtos import DateRangeDTO, ProductInputDTO

pytestmark = pytest.mark.unit


# ===========================================================================
# ProductInputDTO
# ===========================================================================


class TestProductInputDTOValid:
    def test_accepts_is_under_sale_key(self):
        dto = ProductInputDTO.model_validate({"name": "Widget", "isUnderSale": True})
        assert dto.name == "Widget"
        assert dto.under_sale is True

    def test_accepts_under_sale_key(self):
        dto = ProductInputDTO.model_validate({"name": "Widget", "underSale": False})
        assert dto.under_sale is False

    def test_populate_by_field_name(self):
        dto = ProductInputDTO(name="Gadget", under_sale=True)
        assert dto.name == "Gadget"

    def test_name_bounds_inclusive(self):
        assert ProductInputDTO(name="abc", under_sale=True).name == "abc"
        assert ProductInputDTO(name="a" * 15, under_sale=True).name == "a" * 15

    def test_frozen(self):
        dto = ProductInputDTO(name="Widget", under_sale=True)
        with pytest.raises(ValidationError):
            dto.name = "Other"


class TestProductInputDTOInvalid:
    def test_missing_name(self):
        with pytest.raises(ValidationError) as exc_info:
            ProductInputDTO.model_validate({"isUnderSale": True})
        errors = field_errors(exc_info.value, ProductInputDTO)
        assert errors["name"] == "Name cannot be null"

    def test_null_name(self):
        with pytest.raises(ValidationError) as exc_info:
            ProductInputDTO.model_validate({"name": None, "isUnderSale": True})
        errors = field_errors(exc_info.value, ProductInputDTO)
        assert errors["name"] == "Name cannot be null"

    def test_name_too_short(self):
        with pytest.raises(ValidationError) as exc_info:
            ProductInputDTO.model_validate({"name": "ab", "isUnderSale": True})
        assert (
            field_errors(exc_info.value, ProductInputDTO)["name"]
            == "Name must be between 3 and 15 characters"
        )

    def test_name_too_long(self):
        with pytest.raises(ValidationError) as exc_info:
            ProductInputDTO.model_validate({"name": "a" * 16, "isUnderSale": True})
        assert (
            field_errors(exc_info.value, ProductInputDTO)["name"]
            == "Name must be between 3 and 15 characters"
        )

    def test_missing_sale_status(self):
        with pytest.raises(ValidationError) as exc_info:
            ProductInputDTO.model_validate({"name": "Widget"})
        assert field_errors(exc_info.value, ProductInputDTO) == {
            "underSale": "Sale status is required"
        }

    def test_reports_every_failing_field(self):
        with pytest.raises(ValidationError) as exc_info:
            ProductInputDTO.model_validate({})
        assert field_errors(exc_info.value, ProductInputDTO) == {
            "name": "Name cannot be null",
            "underSale": "Sale status is required",
        }

    @pytest.mark.parametrize("key", ["isUnderSale", "underSale"])
    def test_malformed_sale_status_keyed_by_wire_name(self, key):
        with pytest.raises(ValidationError) as exc_info:
            ProductInputDTO.model_validate({"name": "Widget", key: "maybe"})
        assert list(field_errors(exc_info.value, ProductInputDTO)) == ["underSale"]


# ===========================================================================
# DateRangeDTO
# ===========================================================================


class TestDateRangeDTO:
    def test_parses_iso_datetimes(self):
        dto = DateRangeDTO.model_validate(
            {"startDate": "2024-01-01T00:00:00", "endDate": "2024-01-31T23:59:59"}
        )
        assert dto.start.year == 2024
        assert dto.end.day == 31

    def test_naive_values_become_aware(self):
        dto = DateRangeDTO.model_validate(
            {"startDate": "2024-01-01T00:00:00", "endDate": "2024-01-02T00:00:00"}
        )
        assert timezone.is_aware(dto.start)
        assert timezone.is_aware(dto.end)

    def test_date_only_bounds_cover_whole_days(self):
        dto = DateRangeDTO.model_validate(
            {"startDate": "2024-01-01", "endDate": "2024-01-31"}
        )
        assert dto.start == timezone.make_aware(datetime(2024, 1, 1))
        assert dto.end == timezone.make_aware(
            datetime(2024, 1, 31, 23, 59, 59, 999999)
        )

    def test_same_date_only_bounds_allowed(self):
        dto = DateRangeDTO.model_validate(
            {"startDate": "2024-01-31", "endDate": "2024-01-31"}
        )
        assert dto.start < dto.end

    def test_invalid_calendar_date_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            DateRangeDTO.model_validate(
                {"startDate": "2024-01-01", "endDate": "2024-02-30"}
            )
        assert list(field_errors(exc_info.value, DateRangeDTO)) == ["endDate"]

    def test_same_instant_allowed(self):
        moment = timezone.make_aware(datetime(2024, 5, 1, 12, 0))
        dto = DateRangeDTO(start=moment, end=moment)
        assert dto.start == dto.end

    def test_missing_bounds(self):
        with pytest.raises(ValidationError) as exc_info:
            DateRangeDTO.model_validate({})
        errors = field_errors(exc_info.value, DateRangeDTO)
        assert set(errors) == {"startDate", "endDate"}

    def test_malformed_value(self):
        with pytest.raises(ValidationError) as exc_info:
            DateRangeDTO.model_validate(
                {"startDate": "yesterday", "endDate": "2024-01-02T00:00:00"}
            )
        assert "startDate" in field_errors(exc_info.value, DateRangeDTO)

    def test_end_before_start_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            DateRangeDTO.model_validate(
                {"startDate": "2024-02-01T00:00:00", "endDate": "2024-01-01T00:00:00"}
            )
        assert field_errors(exc_info.value, DateRangeDTO) == {
            "non_field_errors": "End date must not be before start date"
        }
