"""
Domain exceptions.

Typed exceptions shared by every domain module.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Union


# ═══════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain-specific exceptions inherit from this.
    """

    pass


@dataclass(frozen=True)
class FieldError:
    """Single field-level violation."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


# ═══════════════════════════════════════════════════════════
# FORMAT ERRORS
# ═══════════════════════════════════════════════════════════


class FormatError(DomainError, ValueError):
    """
    Value has an invalid textual format.

    Example:
        >>> raise FormatError("abc", "expected digits")
    """

    def __init__(self, value: Any, reason: str):
        """Initialize with the offending value and reason.

        Args:
            value: Value that failed format checks
            reason: Human readable explanation
        """
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid format '{value}': {reason}")


class InvalidIdentifierFormatError(FormatError):
    """Identifier is not a valid UUID."""

    def __init__(self, value: Any):
        super().__init__(value, "ID must be a valid UUID")


# ═══════════════════════════════════════════════════════════
# VALIDATION ERRORS
# ═══════════════════════════════════════════════════════════


class ValidationError(DomainError):
    """
    Aggregated validation failure.

    Always carries every violation found in the pass, not just the first.

    Example:
        >>> error = ValidationError([FieldError("name", "is required")])
        >>> error.fields
        ['name']
    """

    default_message = "Validation Error"

    def __init__(self, errors: Sequence[FieldError], message: str | None = None):
        self.errors: List[FieldError] = list(errors)
        details = "; ".join(str(e) for e in self.errors)
        text = message or self.default_message
        super().__init__(f"{text}: {details}" if details else text)

    @property
    def fields(self) -> List[str]:
        """Distinct field names in the order they failed."""
        seen: List[str] = []
        for error in self.errors:
            if error.field not in seen:
                seen.append(error.field)
        return seen

    def messages_for(self, field: str) -> List[str]:
        """All messages recorded for one field."""
        return [e.message for e in self.errors if e.field == field]

    def to_dict(self) -> Dict[str, List[str]]:
        """Group messages by field."""
        return {field: self.messages_for(field) for field in self.fields}


class EntityValidationError(ValidationError):
    """Entity state violates its invariants."""

    default_message = "Entity Validation Error"


class InputValidationError(ValidationError):
    """Use case input has the wrong shape."""

    default_message = "Input Validation Error"


# ═══════════════════════════════════════════════════════════
# LOOKUP ERRORS
# ═══════════════════════════════════════════════════════════


class NotFoundError(DomainError):
    """
    Entity lookup by identifier yielded nothing.

    Example:
        >>> raise NotFoundError("e4b8c9d0-...", "User")
    """

    def __init__(self, identifier: Union[Any, Sequence[Any]], entity_kind: Union[type, str]):
        """Initialize with identifier(s) and entity kind.

        Args:
            identifier: ID (or IDs) that were looked up
            entity_kind: Entity class or its name
        """
        if isinstance(identifier, (list, tuple)):
            self.identifiers = [str(i) for i in identifier]
        else:
            self.identifiers = [str(identifier)]
        self.identifier = ", ".join(self.identifiers)
        self.entity_kind = (
            entity_kind.__name__ if isinstance(entity_kind, type) else str(entity_kind)
        )
        super().__init__(f"{self.entity_kind} not found using ID {self.identifier}")
