"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the bind models accepted from the wire: the views validate
request bodies / query strings into them before anything reaches the
service.  DTOs are immutable (``frozen=True``).

- ``ProductInputDTO``: input for product creation and full (PUT) updates.
- ``DateRangeDTO``: ``startDate`` / ``endDate`` query for the range look-up.
"""

from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Any, Optional

from django.utils import timezone
from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)
from pydantic_core import PydanticCustomError

from modules.core.validation import require_length, require_value
from modules.products.constants import NAME_MAX_LENGTH, NAME_MIN_LENGTH

DATE_ONLY = re.compile(r"\d{4}-\d{2}-\d{2}")

# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class ProductInputDTO(BaseModel):
    """Immutable DTO for product create/update requests.

    Validates:
    - ``name`` is present and 3-15 characters long.
    - ``isUnderSale`` (or ``underSale``) is present.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: Optional[str] = Field(default=None, validate_default=True)
    under_sale: Optional[bool] = Field(
        default=None,
        validation_alias=AliasChoices("underSale", "isUnderSale", "under_sale"),
        validate_default=True,
    )

    @field_validator("name", mode="before")
    @classmethod
    def name_must_be_present(cls, v: Any) -> Any:
        return require_value(v, "Name cannot be null")

    @field_validator("name")
    @classmethod
    def name_must_fit_bounds(cls, v: str) -> str:
        return require_length(v, "Name", NAME_MIN_LENGTH, NAME_MAX_LENGTH)

    @field_validator("under_sale", mode="before")
    @classmethod
    def sale_status_must_be_present(cls, v: Any) -> Any:
        return require_value(v, "Sale status is required")


class DateRangeDTO(BaseModel):
    """Inclusive creation-date window.

    A bare date covers that whole day: as ``startDate`` it means the start
    of the day, as ``endDate`` its last microsecond.  Naive datetimes are
    interpreted in the configured ``TIME_ZONE``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    start: datetime = Field(validation_alias=AliasChoices("startDate", "start"))
    end: datetime = Field(validation_alias=AliasChoices("endDate", "end"))

    @field_validator("start", "end", mode="before")
    @classmethod
    def expand_whole_day(cls, v: Any, info: ValidationInfo) -> Any:
        if isinstance(v, datetime):
            return v
        if isinstance(v, str) and DATE_ONLY.fullmatch(v.strip()):
            v = date.fromisoformat(v.strip())
        if isinstance(v, date):
            bound = time.max if info.field_name == "end" else time.min
            return datetime.combine(v, bound)
        return v

    @field_validator("start", "end")
    @classmethod
    def make_aware(cls, v: datetime) -> datetime:
        if timezone.is_naive(v):
            return timezone.make_aware(v)
        return v

    @model_validator(mode="after")
    def end_not_before_start(self) -> DateRangeDTO:
        if self.end < self.start:
            raise PydanticCustomError(
                "date_range", "End date must not be before start date"
            )
        return self
