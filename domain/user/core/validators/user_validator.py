"""User validation rules."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional

from domain.shared.validation import (
    FieldRules,
    Rule,
    RuleSetValidator,
    ValidationHook,
    is_boolean,
    is_not_empty,
    is_number,
    is_string,
    max_decimal_places,
    max_length,
    max_value,
    min_value,
)

if TYPE_CHECKING:
    from domain.user.core.entities.user import User

DISPLAY_NAME_MAX_LENGTH = 30
DUST_BALANCE_MIN = 0
DUST_BALANCE_MAX = 9999
DUST_BALANCE_DECIMAL_PLACES = 4


@dataclass(frozen=True)
class UserRules:
    """Projection of the User fields that carry invariants."""

    display_name: Any
    dust_balance: Any
    is_active: Any

    @classmethod
    def from_entity(cls, user: "User") -> "UserRules":
        return cls(
            display_name=user.display_name,
            dust_balance=user.dust_balance,
            is_active=user.is_active,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


USER_RULES: Dict[str, FieldRules] = {
    "display_name": FieldRules(
        [
            Rule(is_not_empty, "display_name should not be empty"),
            Rule(is_string, "display_name must be a string"),
            Rule(
                max_length(DISPLAY_NAME_MAX_LENGTH),
                f"Display name must be less than {DISPLAY_NAME_MAX_LENGTH} characters",
            ),
        ]
    ),
    "dust_balance": FieldRules(
        [
            Rule(is_number, "dust_balance must be a finite number"),
            Rule(
                max_decimal_places(DUST_BALANCE_DECIMAL_PLACES),
                f"dust_balance must have at most {DUST_BALANCE_DECIMAL_PLACES} decimal places",
            ),
            Rule(min_value(DUST_BALANCE_MIN), "Dust balance must be greater than 0"),
            Rule(max_value(DUST_BALANCE_MAX), "Dust balance must be less than 9999"),
        ],
        optional=True,
    ),
    "is_active": FieldRules(
        [
            Rule(is_not_empty, "is_active should not be empty"),
            Rule(is_boolean, "is_active must be a boolean value"),
        ]
    ),
}


class UserValidator(RuleSetValidator):
    """Validator for the User aggregate."""

    def __init__(self, hook: Optional[ValidationHook] = None) -> None:
        super().__init__(USER_RULES, entity_name="User", hook=hook)

    def validate_user(self, user: "User") -> bool:
        return self.validate(UserRules.from_entity(user).to_dict())


class UserValidatorFactory:
    @staticmethod
    def create(hook: Optional[ValidationHook] = None) -> UserValidator:
        return UserValidator(hook=hook)
