"""Unit tests for Subscriber DTOs.

Covers:
- SubscriberInputDTO: camelCase keys, required names, length bounds.
- LinkResult: success / rejection factories.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from modules.core.validation import field_errors
from modules.subscribers.constants import LinkStatus
from modules.subscribers.dtos import LinkResult, SubscriberInputDTO

pytestmark = pytest.mark.unit


class TestSubscriberInputDTO:
    def test_camel_case_keys(self):
        dto = SubscriberInputDTO.model_validate({"firstName": "John", "lastName": "Doe"})
        assert dto.first_name == "John"
        assert dto.last_name == "Doe"

    def test_populate_by_field_name(self):
        dto = SubscriberInputDTO(first_name="Jane", last_name="Roe")
        assert dto.first_name == "Jane"

    def test_missing_names(self):
        with pytest.raises(ValidationError) as exc_info:
            SubscriberInputDTO.model_validate({})
        assert field_errors(exc_info.value, SubscriberInputDTO) == {
            "firstName": "First name cannot be null",
            "lastName": "Last name cannot be null",
        }

    def test_null_name_keyed_by_wire_name(self):
        with pytest.raises(ValidationError) as exc_info:
            SubscriberInputDTO.model_validate({"firstName": None, "lastName": "Doe"})
        assert field_errors(exc_info.value, SubscriberInputDTO) == {
            "firstName": "First name cannot be null"
        }

    def test_first_name_too_short(self):
        with pytest.raises(ValidationError) as exc_info:
            SubscriberInputDTO.model_validate({"firstName": "Jo", "lastName": "Doe"})
        assert field_errors(exc_info.value, SubscriberInputDTO) == {
            "firstName": "First name must be between 3 and 15 characters"
        }

    def test_last_name_too_long(self):
        with pytest.raises(ValidationError) as exc_info:
            SubscriberInputDTO.model_validate(
                {"firstName": "John", "lastName": "x" * 16}
            )
        assert field_errors(exc_info.value, SubscriberInputDTO) == {
            "lastName": "Last name must be between 3 and 15 characters"
        }

    def test_non_string_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            SubscriberInputDTO.model_validate({"firstName": 123, "lastName": "Doe"})
        assert "firstName" in field_errors(exc_info.value, SubscriberInputDTO)


class TestLinkResult:
    def test_linked(self):
        subscriber = object()
        result = LinkResult.linked(subscriber)
        assert result.ok is True
        assert result.status is LinkStatus.LINKED
        assert result.subscriber is subscriber

    def test_rejected(self):
        result = LinkResult.rejected(LinkStatus.PRODUCT_NOT_ON_SALE, "nope")
        assert result.ok is False
        assert result.message == "nope"
        assert result.subscriber is None
