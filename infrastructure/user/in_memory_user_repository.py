"""In-memory User Repository for testing."""

import logging
from typing import Dict, List, Optional

from domain.shared.errors import NotFoundError
from domain.shared.value_objects.identifier import Identifier
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository

logger = logging.getLogger(__name__)


class InMemoryUserRepository(IUserRepository):
    """In-memory implementation of User repository for testing.

    Stores users in memory using the identifier string as key.
    Useful for unit tests and integration tests without MongoDB dependency.

    Examples:
        >>> repo = InMemoryUserRepository()
        >>> user = User.create("John Doe")
        >>> await repo.insert(user)
        >>> found = await repo.find_by_id(user.user_id)
    """

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._users: Dict[str, User] = {}

    async def insert(self, user: User) -> None:
        """Store user in memory.

        Args:
            user: User entity to save
        """
        self._users[str(user.user_id)] = user
        logger.debug("User inserted", extra={"user_id": str(user.user_id)})

    async def find_by_id(self, user_id: Identifier) -> Optional[User]:
        """Find user by identifier.

        Args:
            user_id: User identifier

        Returns:
            User entity or None if not found
        """
        return self._users.get(str(user_id))

    async def find_all(self) -> List[User]:
        return list(self._users.values())

    async def update(self, user: User) -> None:
        """Replace stored user.

        Args:
            user: User entity to store

        Raises:
            NotFoundError: If user doesn't exist
        """
        key = str(user.user_id)
        if key not in self._users:
            raise NotFoundError(key, User)

        self._users[key] = user

    async def delete(self, user_id: Identifier) -> None:
        """Delete user by identifier.

        Args:
            user_id: User identifier

        Raises:
            NotFoundError: If user doesn't exist
        """
        key = str(user_id)
        if key not in self._users:
            raise NotFoundError(key, User)

        del self._users[key]

    def clear(self) -> None:
        """Clear all users from memory.

        Useful for test cleanup.
        """
        self._users.clear()

    def count(self) -> int:
        """Get total number of users in memory.

        Returns:
            Number of users stored
        """
        return len(self._users)
