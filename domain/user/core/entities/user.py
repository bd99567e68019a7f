"""User entity - aggregate root."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, Optional, Union

from domain.shared.errors import EntityValidationError, FieldError
from domain.shared.validation import (
    Notification,
    ValidationHook,
    is_number,
    max_decimal_places,
)
from domain.shared.value_objects.identifier import Identifier
from domain.user.core.validators.user_validator import (
    DUST_BALANCE_DECIMAL_PLACES,
    UserValidatorFactory,
)

Number = Union[int, float]


def _decimal_sum(balance: Any, delta: Number) -> Any:
    """Add in decimal so 0.1 + 0.2 is 0.3, not 0.30000000000000004."""
    if not is_number(balance):
        return balance
    if isinstance(balance, int) and isinstance(delta, int):
        return balance + delta
    return float(Decimal(str(balance)) + Decimal(str(delta)))


@dataclass
class User:
    """User aggregate root.

    Holds a display name and a virtual-currency balance ("dust").

    Invariants (checked after every validated mutation, not only at creation):
    - display_name is a non-empty string of at most 30 characters
    - dust_balance is a finite number in [0, 9999] with at most 4 decimals
    - is_active is a boolean

    activate() and deactivate() do not re-validate.

    A mutation that breaks an invariant is rolled back before
    EntityValidationError is raised, so the in-memory instance stays valid.

    Examples:
        >>> user = User.create("John Doe")
        >>> user.dust_balance, user.is_active
        (0, True)

        >>> user.add_dust(50)
        >>> user.dust_balance
        50
    """

    display_name: str
    user_id: Identifier = field(default_factory=Identifier.generate)
    dust_balance: Number = 0
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    notification: Notification = field(default_factory=Notification, repr=False, compare=False)
    validation_hook: Optional[ValidationHook] = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Fill defaults for values explicitly passed as None."""
        if self.user_id is None:
            self.user_id = Identifier.generate()
        if self.dust_balance is None:
            self.dust_balance = 0
        if self.is_active is None:
            self.is_active = True
        if self.created_at is None:
            self.created_at = datetime.now(timezone.utc)

    @property
    def entity_id(self) -> Identifier:
        """Aggregate identity."""
        return self.user_id

    @staticmethod
    def create(
        display_name: str,
        dust_balance: Optional[Number] = None,
        is_active: Optional[bool] = None,
        validation_hook: Optional[ValidationHook] = None,
    ) -> "User":
        """Factory method to create a new validated user.

        Args:
            display_name: Name shown to other users (1-30 characters)
            dust_balance: Initial balance (defaults to 0)
            is_active: Initial status (defaults to True)
            validation_hook: Optional observer for validation passes

        Returns:
            New User instance

        Raises:
            EntityValidationError: If any invariant is violated
        """
        user = User(
            display_name=display_name,
            dust_balance=dust_balance,
            is_active=is_active,
            validation_hook=validation_hook,
        )
        User.validate(user)
        return user

    def change_display_name(self, name: str) -> None:
        """Rename the user.

        Raises:
            EntityValidationError: If the new name is invalid
        """
        self._apply(display_name=name)

    def add_dust(self, amount: Number) -> None:
        """Increase the balance by `amount`.

        Raises:
            EntityValidationError: If the resulting balance is out of range
        """
        self._shift_balance(amount)

    def subtract_dust(self, amount: Number) -> None:
        """Decrease the balance by `amount`.

        There is no dedicated insufficient-funds error: a negative result
        fails the regular balance validation.

        Raises:
            EntityValidationError: If the resulting balance is out of range
        """
        if is_number(amount):
            amount = -amount
        self._shift_balance(amount)

    def activate(self) -> None:
        """Mark user as active. Not validated."""
        self.is_active = True

    def deactivate(self) -> None:
        """Mark user as inactive. Not validated."""
        self.is_active = False

    def _shift_balance(self, delta: Any) -> None:
        if not is_number(delta):
            raise EntityValidationError(
                [FieldError("dust_balance", "dust amount must be a finite number")]
            )
        if not max_decimal_places(DUST_BALANCE_DECIMAL_PLACES)(delta):
            raise EntityValidationError(
                [
                    FieldError(
                        "dust_balance",
                        f"dust amount must have at most {DUST_BALANCE_DECIMAL_PLACES} decimal places",
                    )
                ]
            )
        self._apply(dust_balance=_decimal_sum(self.dust_balance, delta))

    def _apply(self, **changes: Any) -> None:
        """Set fields, validate, restore previous values on failure."""
        previous = {name: getattr(self, name) for name in changes}
        for name, value in changes.items():
            setattr(self, name, value)

        try:
            User.validate(self)
        except EntityValidationError:
            for name, value in previous.items():
                setattr(self, name, value)
            raise

    @staticmethod
    def validate(entity: "User") -> None:
        """Run the user rule catalog against `entity`.

        Errors of the pass are recorded in `entity.notification`.

        Raises:
            EntityValidationError: Carrying every violated rule
        """
        validator = UserValidatorFactory.create(hook=entity.validation_hook)
        entity.notification.clear()
        if not validator.validate_user(entity):
            entity.notification.copy_errors(validator.errors)
            raise EntityValidationError(validator.errors)

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot of public fields for serialization."""
        return {
            "id": str(self.user_id),
            "name": self.display_name,
            "dust_balance": self.dust_balance,
            "is_active": self.is_active,
            "created_at": self.created_at,
        }

    def __eq__(self, other: object) -> bool:
        """Equality based on user_id (aggregate identity)."""
        if not isinstance(other, User):
            return False
        return self.user_id == other.user_id

    def __hash__(self) -> int:
        """Hash based on user_id (aggregate identity)."""
        return hash(self.user_id)
