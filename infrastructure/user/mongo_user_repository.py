"""MongoDB User Repository implementation."""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from domain.shared.errors import NotFoundError
from domain.shared.value_objects.identifier import Identifier
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    """BSON dates are UTC; attach tzinfo when the client returned a naive one."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class MongoUserRepository(IUserRepository):
    """MongoDB implementation of User repository.

    Stores the user snapshot, keyed by user_id:
    - user_id: Identifier (UUID string)
    - display_name: Display name
    - dust_balance: Current balance
    - is_active: Account status
    - created_at: User creation timestamp

    Examples:
        >>> repo = MongoUserRepository(db)
        >>> user = User.create("John Doe")
        >>> await repo.insert(user)
        >>> found = await repo.find_by_id(user.user_id)
    """

    def __init__(self, db: Any) -> None:
        """Initialize repository with MongoDB database.

        Args:
            db: MongoDB database instance
        """
        self.db = db
        self.collection = db.users

    async def insert(self, user: User) -> None:
        """Insert a new user document.

        Args:
            user: User entity to save
        """
        await self.collection.insert_one(self._entity_to_document(user))

    async def find_by_id(self, user_id: Identifier) -> Optional[User]:
        """Find user by identifier.

        Args:
            user_id: User identifier

        Returns:
            User entity or None if not found
        """
        document = await self.collection.find_one({"user_id": str(user_id)})

        if not document:
            return None

        return self._document_to_entity(document)

    async def find_all(self) -> List[User]:
        users: List[User] = []
        async for document in self.collection.find({}):
            users.append(self._document_to_entity(document))
        return users

    async def update(self, user: User) -> None:
        """Replace the stored document for the user.

        Args:
            user: User entity with updated data

        Raises:
            NotFoundError: If user doesn't exist
        """
        result = await self.collection.replace_one(
            {"user_id": str(user.user_id)}, self._entity_to_document(user)
        )

        if result.matched_count == 0:
            raise NotFoundError(str(user.user_id), User)

        logger.debug("User document replaced", extra={"user_id": str(user.user_id)})

    async def delete(self, user_id: Identifier) -> None:
        """Delete user by identifier.

        Args:
            user_id: User identifier

        Raises:
            NotFoundError: If user doesn't exist
        """
        result = await self.collection.delete_one({"user_id": str(user_id)})

        if result.deleted_count == 0:
            raise NotFoundError(str(user_id), User)

    @staticmethod
    def _entity_to_document(user: User) -> Dict[str, Any]:
        return {
            "user_id": str(user.user_id),
            "display_name": user.display_name,
            "dust_balance": user.dust_balance,
            "is_active": user.is_active,
            "created_at": user.created_at,
        }

    def _document_to_entity(self, document: Dict[str, Any]) -> User:
        """Convert MongoDB document to User entity.

        Args:
            document: MongoDB document

        Returns:
            User entity instance
        """
        return User(
            user_id=Identifier(document["user_id"]),
            display_name=document["display_name"],
            dust_balance=document.get("dust_balance", 0),
            is_active=document.get("is_active", True),
            created_at=_as_utc(document["created_at"]),
        )
