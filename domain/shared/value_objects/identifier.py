"""Identifier value object."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional
import uuid

from domain.shared.errors import InvalidIdentifierFormatError


def is_canonical_uuid(value: Any) -> bool:
    """True for the hyphenated 8-4-4-4-12 hex form, any letter case."""
    if not isinstance(value, str):
        return False
    try:
        return str(uuid.UUID(value)) == value.lower()
    except ValueError:
        return False


@dataclass(frozen=True)
class Identifier:
    """Unique identifier value object.

    Wraps a UUID-formatted string. Immutable; equality by wrapped value.
    Only the hyphenated form is accepted; braces, ``urn:uuid:`` and bare
    hex are rejected.

    Examples:
        >>> identifier = Identifier()
        >>> len(str(identifier))
        36

        >>> identifier = Identifier("e4b8c9d0-1234-5678-9abc-def012345678")
        >>> identifier.value
        'e4b8c9d0-1234-5678-9abc-def012345678'
    """

    value: Optional[str] = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self) -> None:
        """Generate when None, otherwise validate UUID format."""
        if self.value is None:
            object.__setattr__(self, "value", str(uuid.uuid4()))
            return
        if not is_canonical_uuid(self.value):
            raise InvalidIdentifierFormatError(self.value)

    @staticmethod
    def generate() -> "Identifier":
        """Generate a new random Identifier.

        Returns:
            New Identifier with random UUID v4
        """
        return Identifier(str(uuid.uuid4()))

    @staticmethod
    def parse(value: Optional[str]) -> "Identifier":
        """Build from an optional string, generating one when absent."""
        return Identifier(value)

    def __str__(self) -> str:
        """String representation returns the UUID value."""
        return str(self.value)

    def __repr__(self) -> str:
        return f"Identifier('{self.value}')"
