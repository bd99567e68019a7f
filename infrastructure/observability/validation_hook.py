"""
Structured logging of validation passes.

Injected into validators as a ValidationHook; nothing in the domain
depends on it being present.
"""

from typing import Any, Mapping, Optional, Sequence

import structlog

from domain.shared.errors import FieldError


class StructlogValidationHook:
    """
    Emit one structlog event per validation pass.

    Successful passes are logged at debug level, failures at warning
    level with the violated fields.

    Example:
        >>> hook = StructlogValidationHook()
        >>> user = User.create("John Doe", validation_hook=hook)
    """

    def __init__(self, logger: Optional[Any] = None) -> None:
        self.logger = logger or structlog.get_logger("validation")

    def __call__(
        self, entity_name: str, data: Mapping[str, Any], errors: Sequence[FieldError]
    ) -> None:
        event_prefix = entity_name.lower()
        if errors:
            self.logger.warning(
                f"{event_prefix}.validation_failed",
                entity=entity_name,
                fields=sorted({e.field for e in errors}),
                errors=[str(e) for e in errors],
            )
        else:
            self.logger.debug(
                f"{event_prefix}.validated",
                entity=entity_name,
                data=dict(data),
            )
