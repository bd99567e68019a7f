"""Subtract dust from user use case."""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from application.user.dto.inputs import SubtractDustUserInput, parse_input
from application.user.dto.user_output import UserOutput, UserOutputMapper
from domain.shared.errors import EntityValidationError, NotFoundError
from domain.shared.validation import ValidationHook
from domain.shared.value_objects.identifier import Identifier
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository

logger = logging.getLogger(__name__)


@dataclass
class SubtractDustUserUseCase:
    """Use case for spending dust.

    Mirrors AddDustUserUseCase; a balance that would go negative fails the
    entity validation and nothing is persisted.
    """

    repository: IUserRepository
    validation_hook: Optional[ValidationHook] = None

    async def execute(
        self, input: Union[SubtractDustUserInput, Mapping[str, Any]]
    ) -> UserOutput:
        """Execute subtract dust use case.

        Raises:
            InputValidationError: If id or dust are malformed
            NotFoundError: If no user exists for the id
            EntityValidationError: If the new balance is out of range
        """
        command = parse_input(SubtractDustUserInput, input)

        user = await self.repository.find_by_id(Identifier(command.id))

        if user is None:
            raise NotFoundError(command.id, User)

        if self.validation_hook is not None:
            user.validation_hook = self.validation_hook

        user.subtract_dust(command.dust)

        if user.notification.has_errors():
            raise EntityValidationError(user.notification.to_list())

        await self.repository.update(user)

        logger.info(
            "Dust subtracted",
            extra={"user_id": command.id, "dust": command.dust, "balance": user.dust_balance},
        )

        return UserOutputMapper.to_output(user)
