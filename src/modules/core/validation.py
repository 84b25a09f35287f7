"""Translate pydantic validation failures into API error bodies."""

from __future__ import annotations

from typing import Any, Dict, Type

from pydantic import AliasChoices, BaseModel, ValidationError
from pydantic_core import PydanticCustomError

NON_FIELD_ERRORS = "non_field_errors"


def wire_names(model: Type[BaseModel]) -> Dict[str, str]:
    """Map every key a field may be reported under to its wire name.

    The wire name is the field's alias, or the first of its alias
    choices.  A failing field is located by its Python name when its
    default was validated and by the key actually sent otherwise; both
    resolve to the same wire name.
    """
    names: Dict[str, str] = {}
    for name, field in model.model_fields.items():
        alias = field.validation_alias or field.alias
        if isinstance(alias, AliasChoices):
            keys = [choice for choice in alias.choices if isinstance(choice, str)]
        elif isinstance(alias, str):
            keys = [alias]
        else:
            keys = []
        wire = keys[0] if keys else name
        for key in (name, *keys):
            names[key] = wire
    return names


def field_errors(exc: ValidationError, model: Type[BaseModel]) -> Dict[str, str]:
    """Map each failing field of ``model`` to the first message reported for it.

    Keys are wire names.  Errors without a location (model-level
    validators, a body that is not an object) are grouped under
    ``non_field_errors``.
    """
    names = wire_names(model)
    errors: Dict[str, str] = {}
    for error in exc.errors():
        loc = error.get("loc") or ()
        if loc:
            field = names.get(str(loc[0]), str(loc[0]))
        else:
            field = NON_FIELD_ERRORS
        errors.setdefault(field, error["msg"])
    return errors


def require_value(value: Any, message: str) -> Any:
    """Reject a missing (``None``) input value with ``message``."""
    if value is None:
        raise PydanticCustomError("not_null", message)
    return value


def require_length(value: str, label: str, min_length: int, max_length: int) -> str:
    """Reject strings outside ``[min_length, max_length]`` characters."""
    if not min_length <= len(value) <= max_length:
        raise PydanticCustomError(
            "size",
            "{label} must be between {min} and {max} characters",
            {"label": label, "min": min_length, "max": max_length},
        )
    return value


def request_payload(data: Any) -> Any:
    """Plain-dict view of DRF request data.

    ``QueryDict`` (form bodies, query strings) stores a list per key;
    pydantic needs the single values.
    """
    return data.dict() if hasattr(data, "dict") else data
