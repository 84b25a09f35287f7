"""Unit tests for the pydantic validation helpers."""

from __future__ import annotations

import pytest
from django.http import QueryDict
from pydantic import (
    AliasChoices,
    BaseModel,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic_core import PydanticCustomError

from modules.core.validation import (
    NON_FIELD_ERRORS,
    field_errors,
    request_payload,
    require_length,
    require_value,
    wire_names,
)

pytestmark = pytest.mark.unit


class _Sample(BaseModel):
    title: str
    code: str = "abc"

    @field_validator("code")
    @classmethod
    def code_bounds(cls, v: str) -> str:
        return require_length(v, "Code", 3, 5)

    @model_validator(mode="after")
    def title_differs_from_code(self):
        if self.title == self.code:
            raise PydanticCustomError("same", "Title and code must differ")
        return self


class TestRequireValue:
    def test_passes_value_through(self):
        assert require_value("x", "missing") == "x"
        assert require_value(False, "missing") is False

    def test_rejects_none(self):
        with pytest.raises(PydanticCustomError, match="Name cannot be null"):
            require_value(None, "Name cannot be null")


class TestRequireLength:
    @pytest.mark.parametrize("value", ["abc", "abcdefghijklmno"])
    def test_accepts_bounds(self, value):
        assert require_length(value, "Name", 3, 15) == value

    @pytest.mark.parametrize("value", ["ab", "abcdefghijklmnop"])
    def test_rejects_outside_bounds(self, value):
        with pytest.raises(PydanticCustomError) as exc_info:
            require_length(value, "Name", 3, 15)
        assert exc_info.value.message() == "Name must be between 3 and 15 characters"


class TestFieldErrors:
    def test_maps_each_field_to_message(self):
        with pytest.raises(ValidationError) as exc_info:
            _Sample.model_validate({"code": "ab"})

        errors = field_errors(exc_info.value, _Sample)

        assert set(errors) == {"title", "code"}
        assert errors["code"] == "Code must be between 3 and 5 characters"

    def test_model_level_errors_are_non_field(self):
        with pytest.raises(ValidationError) as exc_info:
            _Sample.model_validate({"title": "abc", "code": "abc"})

        assert field_errors(exc_info.value, _Sample) == {
            NON_FIELD_ERRORS: "Title and code must differ"
        }


class TestWireNames:
    def test_alias_and_first_choice_win(self):
        class _Aliased(BaseModel):
            first_name: str = Field(alias="firstName")
            on_sale: bool = Field(validation_alias=AliasChoices("onSale", "isOnSale"))
            plain: int

        assert wire_names(_Aliased) == {
            "first_name": "firstName",
            "firstName": "firstName",
            "on_sale": "onSale",
            "onSale": "onSale",
            "isOnSale": "onSale",
            "plain": "plain",
        }


class TestRequestPayload:
    def test_flattens_query_dict(self):
        data = QueryDict("startDate=2024-01-01&endDate=2024-02-01")
        assert request_payload(data) == {
            "startDate": "2024-01-01",
            "endDate": "2024-02-01",
        }

    def test_returns_plain_data_unchanged(self):
        body = {"name": "Widget"}
        assert request_payload(body) is body
        assert request_payload([1, 2]) == [1, 2]
