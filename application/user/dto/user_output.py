"""User output DTO."""

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Dict, Union

from domain.user.core.entities.user import User


@dataclass(frozen=True)
class UserOutput:
    """Snapshot of a user returned by use cases."""

    id: str
    name: str
    dust_balance: Union[int, float]
    is_active: bool
    created_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict of the snapshot fields."""
        return asdict(self)


class UserOutputMapper:
    """Maps User entities to UserOutput snapshots."""

    @staticmethod
    def to_output(user: User) -> UserOutput:
        """Copy the entity representation into a detached UserOutput."""
        return UserOutput(**user.to_dict())
