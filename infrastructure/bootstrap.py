"""Application wiring: environment, logging and user use cases."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from application.user.use_cases.add_dust_user import AddDustUserUseCase
from application.user.use_cases.create_user import CreateUserUseCase
from application.user.use_cases.get_user import GetUserUseCase, ListUsersUseCase
from application.user.use_cases.subtract_dust_user import SubtractDustUserUseCase
from domain.user.core.ports.user_repository import IUserRepository
from infrastructure.config import load_environment
from infrastructure.observability.setup import configure_logging
from infrastructure.observability.validation_hook import StructlogValidationHook
from infrastructure.user.repository_factory import get_user_repository

logger = logging.getLogger("startup")


@dataclass
class UserUseCases:
    """Use cases sharing one repository and validation hook."""

    create_user: CreateUserUseCase
    get_user: GetUserUseCase
    list_users: ListUsersUseCase
    add_dust: AddDustUserUseCase
    subtract_dust: SubtractDustUserUseCase


def build_user_use_cases(repository: Optional[IUserRepository] = None) -> UserUseCases:
    """Build user use cases.

    Args:
        repository: Repository to use (defaults to the configured singleton)
    """
    repo = repository if repository is not None else get_user_repository()
    hook = StructlogValidationHook()

    return UserUseCases(
        create_user=CreateUserUseCase(repo, validation_hook=hook),
        get_user=GetUserUseCase(repo),
        list_users=ListUsersUseCase(repo),
        add_dust=AddDustUserUseCase(repo, validation_hook=hook),
        subtract_dust=SubtractDustUserUseCase(repo, validation_hook=hook),
    )


def bootstrap(env_file: Optional[Path] = None) -> UserUseCases:
    """Load .env, configure logging and build the user use cases."""
    loaded = load_environment(env_file)
    configure_logging()

    use_cases = build_user_use_cases()
    logger.info(
        "User use cases ready",
        extra={"env_loaded": loaded, "repository": type(use_cases.get_user.repository).__name__},
    )
    return use_cases
