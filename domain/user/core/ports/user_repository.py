"""User repository port (interface)."""

from abc import ABC, abstractmethod
from typing import List, Optional

from domain.shared.value_objects.identifier import Identifier
from domain.user.core.entities.user import User


class IUserRepository(ABC):
    """Repository interface for User aggregate.

    Defines contract for user persistence operations.
    Implementations must handle User entity serialization/deserialization.

    Examples:
        >>> # Implementation example (not actual usage)
        >>> class MongoUserRepository(IUserRepository):
        ...     async def insert(self, user: User) -> None:
        ...         # Insert into MongoDB
        ...         pass
    """

    @abstractmethod
    async def insert(self, user: User) -> None:
        """Store a new user.

        Args:
            user: User entity to persist
        """
        pass

    @abstractmethod
    async def find_by_id(self, user_id: Identifier) -> Optional[User]:
        """Find user by identifier.

        Args:
            user_id: User identifier

        Returns:
            User entity if found, None otherwise

        Examples:
            >>> user = await repository.find_by_id(Identifier("uuid-here"))
            >>> if user:
            ...     print(f"Balance: {user.dust_balance}")
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[User]:
        """Return every stored user."""
        pass

    @abstractmethod
    async def update(self, user: User) -> None:
        """Replace the stored state for `user.user_id`.

        Args:
            user: User entity with updated data

        Raises:
            NotFoundError: If no user is stored under that identifier
        """
        pass

    @abstractmethod
    async def delete(self, user_id: Identifier) -> None:
        """Delete user by identifier.

        Args:
            user_id: User identifier

        Raises:
            NotFoundError: If user doesn't exist
        """
        pass
