"""Base models for all domain entities."""

from collections.abc import Mapping
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, model_validator

from forum.domain.error import DataTypeMismatchError, MissingPropertyError


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


def _expected_type(annotation: Any) -> type:
    # NewType wrappers are resolved to the runtime type they alias
    while hasattr(annotation, "__supertype__"):
        annotation = annotation.__supertype__
    return annotation


def _is_missing(value: Any) -> bool:
    return value is None or value == ""


class PayloadEntity(DomainModel):
    """Domain model constructed from an untrusted payload.

    Construction validates the raw payload before pydantic sees it:
    every declared field must be present and non-empty, then every field
    must be an instance of its declared type. Failures raise domain
    validation errors coded with ``__error_prefix__``.
    """

    __error_prefix__: ClassVar[str] = ""

    @model_validator(mode="before")
    @classmethod
    def validate_payload(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            raise DataTypeMismatchError(cls.__error_prefix__)

        for name in cls.model_fields:
            if _is_missing(data.get(name)):
                raise MissingPropertyError(cls.__error_prefix__)

        for name, field in cls.model_fields.items():
            value = data[name]
            expected = _expected_type(field.annotation)
            if isinstance(value, bool) and expected is not bool:
                raise DataTypeMismatchError(cls.__error_prefix__)
            if not isinstance(value, expected):
                raise DataTypeMismatchError(cls.__error_prefix__)

        # Unknown keys are dropped rather than rejected
        return {name: data[name] for name in cls.model_fields}
