"""Create user use case."""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from application.user.dto.inputs import CreateUserInput, parse_input
from application.user.dto.user_output import UserOutput, UserOutputMapper
from domain.shared.validation import ValidationHook
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository

logger = logging.getLogger(__name__)


@dataclass
class CreateUserUseCase:
    """Use case for registering a new user.

    Examples:
        >>> use_case = CreateUserUseCase(repository)
        >>> output = await use_case.execute({"display_name": "John Doe"})
        >>> output.dust_balance
        0
    """

    repository: IUserRepository
    validation_hook: Optional[ValidationHook] = None

    async def execute(self, input: Union[CreateUserInput, Mapping[str, Any]]) -> UserOutput:
        """Execute create user use case.

        Args:
            input: `{"display_name": str, "dust_balance"?: number, "is_active"?: bool}`

        Returns:
            Snapshot of the new user

        Raises:
            InputValidationError: If the input has the wrong shape
            EntityValidationError: If the user violates its invariants
        """
        command = parse_input(CreateUserInput, input)

        user = User.create(
            display_name=command.display_name,
            dust_balance=command.dust_balance,
            is_active=command.is_active,
            validation_hook=self.validation_hook,
        )

        await self.repository.insert(user)

        logger.info("User created", extra={"user_id": str(user.user_id)})

        return UserOutputMapper.to_output(user)
