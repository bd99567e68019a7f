"""Get user use case."""

from dataclasses import dataclass
from typing import Any, List, Mapping, Union

from application.user.dto.inputs import GetUserInput, parse_input
from application.user.dto.user_output import UserOutput, UserOutputMapper
from domain.shared.errors import NotFoundError
from domain.shared.value_objects.identifier import Identifier
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository


@dataclass
class GetUserUseCase:
    """Read-only lookup of one user by id.

    Examples:
        >>> output = await GetUserUseCase(repository).execute({"id": "uuid-here"})
    """

    repository: IUserRepository

    async def execute(self, input: Union[GetUserInput, Mapping[str, Any]]) -> UserOutput:
        """Get user by id.

        Raises:
            InputValidationError: If id is malformed
            NotFoundError: If user not found
        """
        command = parse_input(GetUserInput, input)

        user = await self.repository.find_by_id(Identifier(command.id))

        if user is None:
            raise NotFoundError(command.id, User)

        return UserOutputMapper.to_output(user)


@dataclass
class ListUsersUseCase:
    """Read-only listing of every user."""

    repository: IUserRepository

    async def execute(self) -> List[UserOutput]:
        """Return every stored user, in repository order."""
        users = await self.repository.find_all()
        return [UserOutputMapper.to_output(user) for user in users]
