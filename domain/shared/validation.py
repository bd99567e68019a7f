"""
Field-level validation primitives.

A validator is a mapping from field name to an ordered list of rules.
Every rule of every field runs on each pass; failures are collected,
never short-circuited, so callers always see the full set of violations.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from numbers import Real
from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol, Sequence

from domain.shared.errors import FieldError

Predicate = Callable[[Any], bool]


class ValidationHook(Protocol):
    """Observer called after every validation pass.

    Implementations must not raise; validation results never depend on them.
    """

    def __call__(
        self, entity_name: str, data: Mapping[str, Any], errors: Sequence[FieldError]
    ) -> None: ...


# ═══════════════════════════════════════════════════════════
# PREDICATES
# ═══════════════════════════════════════════════════════════


def is_not_empty(value: Any) -> bool:
    return value is not None and value != ""


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_number(value: Any) -> bool:
    """Finite real number; booleans are not numbers here."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)


def max_length(limit: int) -> Predicate:
    return lambda value: isinstance(value, str) and len(value) <= limit


def min_value(limit: float) -> Predicate:
    return lambda value: is_number(value) and value >= limit


def max_value(limit: float) -> Predicate:
    return lambda value: is_number(value) and value <= limit


def max_decimal_places(places: int) -> Predicate:
    """Number written with at most `places` digits after the point."""

    def check(value: Any) -> bool:
        if not is_number(value):
            return False
        try:
            exponent = Decimal(str(value)).normalize().as_tuple().exponent
        except InvalidOperation:
            return False
        return not isinstance(exponent, int) or -exponent <= places

    return check


# ═══════════════════════════════════════════════════════════
# RULES
# ═══════════════════════════════════════════════════════════


@dataclass(frozen=True)
class Rule:
    """Predicate plus the message reported when it fails."""

    predicate: Predicate
    message: str

    def check(self, value: Any) -> bool:
        return bool(self.predicate(value))


@dataclass
class FieldRules:
    """Ordered rules for a single field.

    Optional fields skip all their rules when the value is None.
    """

    rules: List[Rule]
    optional: bool = False

    def errors_for(self, field_name: str, value: Any) -> List[FieldError]:
        if self.optional and value is None:
            return []
        return [FieldError(field_name, r.message) for r in self.rules if not r.check(value)]


class RuleSetValidator:
    """Runs a declarative rule catalog against a mapping of field values.

    Examples:
        >>> validator = RuleSetValidator({"name": FieldRules([Rule(is_string, "name must be a string")])})
        >>> validator.validate({"name": 5})
        False
        >>> validator.errors
        [FieldError(field='name', message='name must be a string')]
    """

    def __init__(
        self,
        rules: Dict[str, FieldRules],
        entity_name: str = "entity",
        hook: Optional[ValidationHook] = None,
    ) -> None:
        self.rules = rules
        self.entity_name = entity_name
        self.hook = hook
        self.errors: List[FieldError] = []

    def validate(self, data: Mapping[str, Any]) -> bool:
        """Check every field; return True when no rule failed."""
        errors: List[FieldError] = []
        for field_name, field_rules in self.rules.items():
            errors.extend(field_rules.errors_for(field_name, data.get(field_name)))
        self.errors = errors

        if self.hook is not None:
            self.hook(self.entity_name, data, list(errors))

        return not errors


# ═══════════════════════════════════════════════════════════
# NOTIFICATION
# ═══════════════════════════════════════════════════════════


@dataclass
class Notification:
    """Collector for field errors attached to an entity."""

    errors: List[FieldError] = field(default_factory=list)

    def add_error(self, message: str, field_name: str) -> None:
        self.errors.append(FieldError(field_name, message))

    def copy_errors(self, errors: Sequence[FieldError]) -> None:
        self.errors.extend(errors)

    def has_errors(self) -> bool:
        return bool(self.errors)

    def clear(self) -> None:
        self.errors.clear()

    def to_list(self) -> List[FieldError]:
        return list(self.errors)

    def to_dict(self) -> Dict[str, List[str]]:
        grouped: Dict[str, List[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.field, []).append(error.message)
        return grouped
