"""Subscriber DTOs for the Service Layer.

- ``SubscriberInputDTO``: bind model for create and full (PUT) updates.
- ``LinkResult``: outcome of linking a product to a subscriber.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from modules.core.validation import require_length, require_value
from modules.subscribers.constants import NAME_MAX_LENGTH, NAME_MIN_LENGTH, LinkStatus

if TYPE_CHECKING:
    from modules.subscribers.models import Subscriber


class SubscriberInputDTO(BaseModel):
    """Immutable DTO for subscriber create/update requests.

    Both names are required and must be 3-15 characters long.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    first_name: Optional[str] = Field(
        default=None, alias="firstName", validate_default=True
    )
    last_name: Optional[str] = Field(
        default=None, alias="lastName", validate_default=True
    )

    @field_validator("first_name", mode="before")
    @classmethod
    def first_name_must_be_present(cls, v: Any) -> Any:
        return require_value(v, "First name cannot be null")

    @field_validator("first_name")
    @classmethod
    def first_name_must_fit_bounds(cls, v: str) -> str:
        return require_length(v, "First name", NAME_MIN_LENGTH, NAME_MAX_LENGTH)

    @field_validator("last_name", mode="before")
    @classmethod
    def last_name_must_be_present(cls, v: Any) -> Any:
        return require_value(v, "Last name cannot be null")

    @field_validator("last_name")
    @classmethod
    def last_name_must_fit_bounds(cls, v: str) -> str:
        return require_length(v, "Last name", NAME_MIN_LENGTH, NAME_MAX_LENGTH)


class LinkResult(BaseModel):
    """Outcome of ``SubscriberService.link_product``.

    On success ``subscriber`` holds the updated subscriber; otherwise
    ``message`` explains the rejection.  Rejections are values, not
    exceptions.
    """

    model_config = ConfigDict(frozen=True)

    status: LinkStatus
    message: str = ""
    subscriber: Optional[Any] = None

    @property
    def ok(self) -> bool:
        return self.status is LinkStatus.LINKED

    @classmethod
    def linked(cls, subscriber: Subscriber) -> LinkResult:
        return cls(status=LinkStatus.LINKED, subscriber=subscriber)

    @classmethod
    def rejected(cls, status: LinkStatus, message: str) -> LinkResult:
        return cls(status=status, message=message)
