"""
Use case input models.

Pydantic models describing the shape of each use case input. Shape errors
are reported together as a single InputValidationError; business rules
stay on the entity.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from domain.shared.errors import FieldError, InputValidationError
from domain.shared.value_objects.identifier import is_canonical_uuid

TInput = TypeVar("TInput", bound=BaseModel)


class _IdInput(BaseModel):
    """Base for inputs addressing a user by id."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., strict=True, description="User identifier (UUID)")

    @field_validator("id")
    @classmethod
    def id_is_uuid(cls, v: str) -> str:
        """Reject ids that are not hyphenated UUID strings."""
        if not is_canonical_uuid(v):
            raise ValueError("id must be a UUID")
        return v


class GetUserInput(_IdInput):
    """
    Input for reading one user.

    Example:
        >>> GetUserInput(id="e4b8c9d0-1234-5678-9abc-def012345678")
    """


class AddDustUserInput(_IdInput):
    """
    Input for adding dust to a user balance.

    Example:
        >>> AddDustUserInput(id="e4b8c9d0-1234-5678-9abc-def012345678", dust=50)
    """

    dust: float = Field(..., strict=True, allow_inf_nan=False, description="Amount of dust")


class SubtractDustUserInput(AddDustUserInput):
    """Input for subtracting dust from a user balance."""


class CreateUserInput(BaseModel):
    """Input for creating a user."""

    model_config = ConfigDict(frozen=True)

    display_name: str = Field(..., strict=True, description="Display name")
    dust_balance: Optional[float] = Field(default=None, strict=True)
    is_active: Optional[bool] = Field(default=None, strict=True)


def parse_input(model: Type[TInput], raw: Union[TInput, Mapping[str, Any]]) -> TInput:
    """Validate raw input against `model`.

    Args:
        model: Input model class
        raw: Model instance or mapping of field values

    Returns:
        Validated model instance

    Raises:
        InputValidationError: Listing every malformed field
    """
    if isinstance(raw, model):
        return raw

    try:
        return model.model_validate(raw)
    except PydanticValidationError as e:
        errors = [
            FieldError(".".join(str(part) for part in err["loc"]) or "input", err["msg"])
            for err in e.errors()
        ]
        raise InputValidationError(errors) from e
