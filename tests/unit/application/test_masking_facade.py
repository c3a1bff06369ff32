"""Unit tests for the value-level masking facade."""
from __future__ import annotations

import pytest

from mp_masking.application.masking import (
    DefaultMaskingProvider,
    EmailMasking,
    MaskingProvider,
    MaskingService,
    NameMasking,
    mask_credit_card,
    mask_email,
    mask_name,
    mask_passport,
    mask_phone,
    mask_with_rule,
)
from mp_masking.config.settings import MaskingSettings
from mp_masking.kernel.errors import InvalidArgumentError


class OneCharEmailProvider(DefaultMaskingProvider):
    def mask_email(self, value, visible_chars=None):
        return super().mask_email(value, 1)


class TestModuleFunctions:
    def test_mask_email(self):
        assert mask_email("test@example.com") == "te**@example.com"
        assert mask_email("test@example.com", 3) == "tes*@example.com"

    def test_mask_phone(self):
        assert mask_phone("010-1234-5678") == "010-****-5678"
        assert mask_phone("123456") == "123456"

    def test_mask_name(self):
        assert mask_name("홍길동") == "홍**"
        assert mask_name("홍길동", 2) == "홍길*"

    def test_mask_credit_card(self):
        assert mask_credit_card("1234-5678-9012-3456") == "1234-5678-****-3456"
        assert mask_credit_card("123456789012345") == "1234-567890-*****-2345"

    def test_mask_passport(self):
        assert mask_passport("M12345678") == "M1******8"
        assert mask_passport("AB1234567") == "AB12****7"

    def test_none_passthrough(self):
        for fn in (mask_email, mask_phone, mask_name, mask_credit_card, mask_passport):
            assert fn(None) is None
            assert fn("") == ""

    def test_negative_visible_chars(self):
        with pytest.raises(InvalidArgumentError):
            mask_email("test@example.com", -1)
        with pytest.raises(InvalidArgumentError):
            mask_name("홍길동", -1)


class TestMaskWithRule:
    def test_applies_rule(self):
        assert mask_with_rule("홍길동", NameMasking(2)) == "홍길*"

    def test_missing_rule_rejected(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            mask_with_rule("test", None)  # type: ignore[arg-type]
        assert exc_info.value.argument == "rule"

    def test_missing_rule_rejected_even_for_empty_value(self):
        with pytest.raises(InvalidArgumentError):
            mask_with_rule("", None)  # type: ignore[arg-type]

    def test_non_rule_rejected(self):
        with pytest.raises(InvalidArgumentError):
            mask_with_rule("test", "Email")  # type: ignore[arg-type]

    def test_empty_value_with_rule(self):
        assert mask_with_rule("", EmailMasking()) == ""


class TestDefaultMaskingProvider:
    def test_is_provider(self):
        assert isinstance(DefaultMaskingProvider(), MaskingProvider)

    def test_configured_defaults(self):
        provider = DefaultMaskingProvider(email_visible_chars=3, name_visible_chars=2)
        assert provider.mask_email("honggildong@example.com") == "hon********@example.com"
        assert provider.mask_name("홍길동") == "홍길*"

    def test_explicit_count_overrides_default(self):
        provider = DefaultMaskingProvider(email_visible_chars=3)
        assert provider.mask_email("test@example.com", 1) == "t***@example.com"

    def test_invalid_defaults_rejected(self):
        with pytest.raises(InvalidArgumentError):
            DefaultMaskingProvider(email_visible_chars=-1)

    def test_from_settings(self):
        provider = DefaultMaskingProvider.from_settings(MaskingSettings(name_visible_chars=2))
        assert provider.mask_name("홍길동") == "홍길*"


class TestMaskingService:
    def test_default_provider(self, masking_service):
        assert isinstance(masking_service.provider, DefaultMaskingProvider)
        assert masking_service.mask_email("test@example.com") == "te**@example.com"
        assert masking_service.mask_phone("010-1234-5678") == "010-****-5678"
        assert masking_service.mask_name("홍길동") == "홍**"
        assert masking_service.mask_credit_card("1234567890123456") == "1234-5678-****-3456"
        assert masking_service.mask_passport("M12345678") == "M1******8"
        assert masking_service.mask_with_rule("홍길동", NameMasking(0)) == "***"

    def test_none_provider_rejected(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            MaskingService(None)
        assert exc_info.value.argument == "provider"

    def test_custom_provider(self):
        service = MaskingService(OneCharEmailProvider())
        assert service.mask_email("test@example.com") == "t***@example.com"
        assert service.mask_phone("010-1234-5678") == "010-****-5678"

    def test_negative_visible_chars(self, masking_service):
        with pytest.raises(InvalidArgumentError):
            masking_service.mask_email("test@example.com", -1)
        with pytest.raises(InvalidArgumentError):
            masking_service.mask_name("홍길동", -1)
