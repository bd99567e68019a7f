"""Shared test fixtures."""

from __future__ import annotations

from typing import Any, List, Mapping, Sequence, Tuple

import pytest

from domain.shared.errors import FieldError
from infrastructure.user.in_memory_user_repository import InMemoryUserRepository


class RecordingValidationHook:
    """Validation hook that remembers every pass."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, dict, List[FieldError]]] = []

    def __call__(
        self, entity_name: str, data: Mapping[str, Any], errors: Sequence[FieldError]
    ) -> None:
        self.calls.append((entity_name, dict(data), list(errors)))


@pytest.fixture
def repository() -> InMemoryUserRepository:
    """Create fresh in-memory repository."""
    return InMemoryUserRepository()


@pytest.fixture
def validation_hook() -> RecordingValidationHook:
    """Create recording validation hook."""
    return RecordingValidationHook()
