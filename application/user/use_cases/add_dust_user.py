"""Add dust to user use case."""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from application.user.dto.inputs import AddDustUserInput, parse_input
from application.user.dto.user_output import UserOutput, UserOutputMapper
from domain.shared.errors import EntityValidationError, NotFoundError
from domain.shared.validation import ValidationHook
from domain.shared.value_objects.identifier import Identifier
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository

logger = logging.getLogger(__name__)


@dataclass
class AddDustUserUseCase:
    """Use case for increasing a user's dust balance.

    Validates the input shape, loads the user, adds the dust and persists
    the result. Persistence is the last step, so any failure leaves the
    stored state untouched.

    Examples:
        >>> use_case = AddDustUserUseCase(repository)
        >>> output = await use_case.execute({"id": str(user.user_id), "dust": 50})
        >>> output.dust_balance
        50.0
    """

    repository: IUserRepository
    validation_hook: Optional[ValidationHook] = None

    async def execute(self, input: Union[AddDustUserInput, Mapping[str, Any]]) -> UserOutput:
        """Execute add dust use case.

        Args:
            input: `{"id": str, "dust": number}` or AddDustUserInput

        Returns:
            Snapshot of the updated user

        Raises:
            InputValidationError: If id or dust are malformed
            NotFoundError: If no user exists for the id
            EntityValidationError: If the new balance is out of range
        """
        command = parse_input(AddDustUserInput, input)

        user = await self.repository.find_by_id(Identifier(command.id))

        if user is None:
            raise NotFoundError(command.id, User)

        if self.validation_hook is not None:
            user.validation_hook = self.validation_hook

        user.add_dust(command.dust)

        if user.notification.has_errors():
            raise EntityValidationError(user.notification.to_list())

        await self.repository.update(user)

        logger.info(
            "Dust added",
            extra={"user_id": command.id, "dust": command.dust, "balance": user.dust_balance},
        )

        return UserOutputMapper.to_output(user)
