"""Masking facade – mask a single value when the policy is already known.

Nothing here touches type descriptors; each call builds the rule and
applies it. Use :class:`MaskingService` where the provider must be
swappable, or the module-level functions for one-off calls::

    >>> mask_email("honggildong@example.com")
    'ho*********@example.com'
    >>> mask_phone("010-1234-5678")
    '010-****-5678'
"""
from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any

from mp_masking.application.masking.rules import (
    CreditCardMasking,
    EmailMasking,
    MaskingRule,
    NameMasking,
    PassportMasking,
    PhoneMasking,
)
from mp_masking.kernel.errors import InvalidArgumentError

if TYPE_CHECKING:
    from mp_masking.config.settings import MaskingSettings

__all__ = [
    "DefaultMaskingProvider",
    "MaskingProvider",
    "MaskingService",
    "mask_credit_card",
    "mask_email",
    "mask_name",
    "mask_passport",
    "mask_phone",
    "mask_with_rule",
]


class MaskingProvider(abc.ABC):
    """Port: value-level masking operations."""

    @abc.abstractmethod
    def mask_email(self, value: str | None, visible_chars: int | None = None) -> str | None: ...

    @abc.abstractmethod
    def mask_phone(self, value: str | None) -> str | None: ...

    @abc.abstractmethod
    def mask_name(self, value: str | None, visible_chars: int | None = None) -> str | None: ...

    @abc.abstractmethod
    def mask_credit_card(self, value: str | None) -> str | None: ...

    @abc.abstractmethod
    def mask_passport(self, value: str | None) -> str | None: ...

    @abc.abstractmethod
    def mask_with_rule(self, value: str | None, rule: MaskingRule) -> str | None: ...


class DefaultMaskingProvider(MaskingProvider):
    """Applies the built-in rules.

    ``visible_chars=None`` on a call falls back to the provider's own
    default (2 for e-mail, 1 for names unless configured otherwise).
    """

    def __init__(self, email_visible_chars: int = 2, name_visible_chars: int = 1) -> None:
        # Validates eagerly so a bad default fails at construction.
        self._email = EmailMasking(email_visible_chars)
        self._name = NameMasking(name_visible_chars)
        self._phone = PhoneMasking()
        self._card = CreditCardMasking()
        self._passport = PassportMasking()

    @classmethod
    def from_settings(cls, settings: MaskingSettings) -> DefaultMaskingProvider:
        return cls(settings.email_visible_chars, settings.name_visible_chars)

    def mask_email(self, value: str | None, visible_chars: int | None = None) -> str | None:
        rule = self._email if visible_chars is None else EmailMasking(visible_chars)
        return rule.mask(value)

    def mask_phone(self, value: str | None) -> str | None:
        return self._phone.mask(value)

    def mask_name(self, value: str | None, visible_chars: int | None = None) -> str | None:
        rule = self._name if visible_chars is None else NameMasking(visible_chars)
        return rule.mask(value)

    def mask_credit_card(self, value: str | None) -> str | None:
        return self._card.mask(value)

    def mask_passport(self, value: str | None) -> str | None:
        return self._passport.mask(value)

    def mask_with_rule(self, value: str | None, rule: MaskingRule) -> str | None:
        if rule is None:
            raise InvalidArgumentError("rule", rule, "a masking rule is required")
        if not isinstance(rule, MaskingRule):
            raise InvalidArgumentError("rule", rule, "expected a MaskingRule")
        return rule.mask(value)


_DEFAULT: Any = object()


class MaskingService:
    """Entry point for value-level masking backed by a :class:`MaskingProvider`.

    ``MaskingService()`` uses :class:`DefaultMaskingProvider`; passing
    ``None`` explicitly is a programming error.
    """

    def __init__(self, provider: MaskingProvider | None = _DEFAULT) -> None:
        if provider is _DEFAULT:
            provider = DefaultMaskingProvider()
        if provider is None:
            raise InvalidArgumentError("provider", provider, "a masking provider is required")
        self._provider = provider

    @property
    def provider(self) -> MaskingProvider:
        return self._provider

    def mask_email(self, value: str | None, visible_chars: int | None = None) -> str | None:
        return self._provider.mask_email(value, visible_chars)

    def mask_phone(self, value: str | None) -> str | None:
        return self._provider.mask_phone(value)

    def mask_name(self, value: str | None, visible_chars: int | None = None) -> str | None:
        return self._provider.mask_name(value, visible_chars)

    def mask_credit_card(self, value: str | None) -> str | None:
        return self._provider.mask_credit_card(value)

    def mask_passport(self, value: str | None) -> str | None:
        return self._provider.mask_passport(value)

    def mask_with_rule(self, value: str | None, rule: MaskingRule) -> str | None:
        return self._provider.mask_with_rule(value, rule)


_provider = DefaultMaskingProvider()


def mask_email(value: str | None, visible_chars: int = 2) -> str | None:
    return _provider.mask_email(value, visible_chars)


def mask_phone(value: str | None) -> str | None:
    return _provider.mask_phone(value)


def mask_name(value: str | None, visible_chars: int = 1) -> str | None:
    return _provider.mask_name(value, visible_chars)


def mask_credit_card(value: str | None) -> str | None:
    return _provider.mask_credit_card(value)


def mask_passport(value: str | None) -> str | None:
    return _provider.mask_passport(value)


def mask_with_rule(value: str | None, rule: MaskingRule) -> str | None:
    """Apply an arbitrary rule; ``rule=None`` raises :class:`InvalidArgumentError`."""
    return _provider.mask_with_rule(value, rule)
