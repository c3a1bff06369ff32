"""Domain errors – rule construction and caller contract violations."""

from __future__ import annotations

from typing import Any

from mp_masking.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a masking rule or its inputs are invalid."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules."""

    default_code = "validation_error"


class InvalidArgumentError(ValidationError, ValueError):
    """A caller passed an argument the operation cannot accept.

    Covers negative visible-character counts, a missing rule handed to
    ``mask_with_rule`` and a missing provider handed to ``MaskingService``.
    These are programming errors and are never swallowed.
    """

    default_code = "invalid_argument"

    def __init__(
        self,
        argument: str,
        value: Any,
        reason: str,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Invalid argument '{argument}' ({value!r}): {reason}",
            detail={"argument": argument, "reason": reason},
            **kwargs,
        )
        self.argument = argument
        self.value = value
        self.reason = reason


__all__ = ["DomainError", "InvalidArgumentError", "ValidationError"]
