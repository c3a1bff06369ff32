"""Masking rules – pure ``str -> str`` transforms tagged by policy name.

Every rule is a frozen dataclass, so the same instance can be shared by any
number of fields and threads. ``mask`` never raises: empty input and input
that does not fit the rule's shape come back unchanged.
"""
from __future__ import annotations

import abc
import dataclasses
import re
from typing import ClassVar, Final, Literal

from mp_masking.kernel.errors import InvalidArgumentError
from mp_masking.observability.logging.processors import get_logger

__all__ = [
    "CreditCardMasking",
    "EmailMasking",
    "MaskingRule",
    "MaskingStrategy",
    "NameMasking",
    "PassportMasking",
    "PhoneMasking",
]

MaskingStrategy = Literal["Email", "Phone", "Name", "CreditCard", "Passport"]

MASK_CHAR: Final = "*"

_PHONE_RE: Final = re.compile(r"(\d{3})-(\d{4})-(\d{4})", re.ASCII)
_CARD_SEPARATORS_RE: Final = re.compile(r"[-\s]")
_PASSPORT_RE: Final = re.compile(r"([A-Z]\d)(\d{6})(\d)", re.ASCII)
_PASSPORT_FLEXIBLE_RE: Final = re.compile(r"([A-Z]{1,2}\d{1,2})(\d{4,6})(\d{1,2})", re.ASCII)

_log = get_logger(__name__)


def _check_visible_chars(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError("visible_chars", value, "must be an integer")
    if value < 0:
        raise InvalidArgumentError("visible_chars", value, "must be >= 0")


class MaskingRule(abc.ABC):
    """Base class of the five masking policies."""

    masking_type: ClassVar[MaskingStrategy]

    def mask(self, value: str | None) -> str | None:
        """Return *value* masked, or unchanged when it does not fit the rule."""
        if not value:
            return value
        try:
            return self._apply(value)
        except Exception as exc:  # noqa: BLE001
            _log.warning("masking_rule_failed", rule=self.masking_type, error=repr(exc))
            return value

    __call__ = mask

    @abc.abstractmethod
    def _apply(self, value: str) -> str: ...


@dataclasses.dataclass(frozen=True)
class EmailMasking(MaskingRule):
    """``honggildong@example.com`` → ``ho*********@example.com``."""

    visible_chars: int = 2
    masking_type: ClassVar[MaskingStrategy] = "Email"

    def __post_init__(self) -> None:
        _check_visible_chars(self.visible_chars)

    def _apply(self, value: str) -> str:
        parts = value.split("@")
        if len(parts) != 2:
            return value
        local, domain = parts
        if not local.strip() or not domain.strip():
            return value
        if len(local) <= self.visible_chars:
            return value
        hidden = len(local) - self.visible_chars
        return f"{local[:self.visible_chars]}{MASK_CHAR * hidden}@{domain}"


@dataclasses.dataclass(frozen=True)
class PhoneMasking(MaskingRule):
    """``010-1234-5678`` → ``010-****-5678``."""

    masking_type: ClassVar[MaskingStrategy] = "Phone"

    def _apply(self, value: str) -> str:
        match = _PHONE_RE.fullmatch(value)
        if match is None:
            return value
        return f"{match[1]}-{MASK_CHAR * 4}-{match[3]}"


@dataclasses.dataclass(frozen=True)
class NameMasking(MaskingRule):
    """``홍길동`` → ``홍**``."""

    visible_chars: int = 1
    masking_type: ClassVar[MaskingStrategy] = "Name"

    def __post_init__(self) -> None:
        _check_visible_chars(self.visible_chars)

    def _apply(self, value: str) -> str:
        if len(value) <= self.visible_chars:
            return value
        return value[:self.visible_chars] + MASK_CHAR * (len(value) - self.visible_chars)


@dataclasses.dataclass(frozen=True)
class CreditCardMasking(MaskingRule):
    """Mask the third group of a 16-digit or 15-digit (Amex) card number.

    Dashes and whitespace are stripped before the length check; the output
    is always dash-separated::

        1234-5678-9012-3456  →  1234-5678-****-3456
        123456789012345      →  1234-567890-*****-2345
    """

    masking_type: ClassVar[MaskingStrategy] = "CreditCard"

    def _apply(self, value: str) -> str:
        digits = _CARD_SEPARATORS_RE.sub("", value)
        if not (digits.isascii() and digits.isdigit()):
            return value
        if len(digits) == 16:
            return f"{digits[:4]}-{digits[4:8]}-{MASK_CHAR * 4}-{digits[12:]}"
        if len(digits) == 15:
            return f"{digits[:4]}-{digits[4:10]}-{MASK_CHAR * 5}-{digits[11:]}"
        return value


@dataclasses.dataclass(frozen=True)
class PassportMasking(MaskingRule):
    """``M12345678`` → ``M1******8``; ``AB1234567`` → ``AB12****7``.

    The strict form is one letter and a digit, six digits, one check digit.
    Anything else that still looks like letters-then-digits falls back to the
    flexible form, where only the middle group is hidden.
    """

    masking_type: ClassVar[MaskingStrategy] = "Passport"

    def _apply(self, value: str) -> str:
        match = _PASSPORT_RE.fullmatch(value) or _PASSPORT_FLEXIBLE_RE.fullmatch(value)
        if match is None:
            return value
        return f"{match[1]}{MASK_CHAR * len(match[2])}{match[3]}"
