"""Application Data Masking / PII redaction of annotated objects."""
from mp_masking.application.masking.accessors import AccessorCache, FieldAccessor, compile_accessor
from mp_masking.application.masking.descriptors import DescriptorCache, FieldDescriptor, TypeDescriptor
from mp_masking.application.masking.engine import RedactionEngine
from mp_masking.application.masking.facade import (
    DefaultMaskingProvider,
    MaskingProvider,
    MaskingService,
    mask_credit_card,
    mask_email,
    mask_name,
    mask_passport,
    mask_phone,
    mask_with_rule,
)
from mp_masking.application.masking.log_filter import MaskingLogFilter, MaskingProcessor
from mp_masking.application.masking.rules import (
    CreditCardMasking,
    EmailMasking,
    MaskingRule,
    MaskingStrategy,
    NameMasking,
    PassportMasking,
    PhoneMasking,
)

__all__ = [
    "AccessorCache",
    "CreditCardMasking",
    "DefaultMaskingProvider",
    "DescriptorCache",
    "EmailMasking",
    "FieldAccessor",
    "FieldDescriptor",
    "MaskingLogFilter",
    "MaskingProcessor",
    "MaskingProvider",
    "MaskingRule",
    "MaskingService",
    "MaskingStrategy",
    "NameMasking",
    "PassportMasking",
    "PhoneMasking",
    "RedactionEngine",
    "TypeDescriptor",
    "compile_accessor",
    "mask_credit_card",
    "mask_email",
    "mask_name",
    "mask_passport",
    "mask_phone",
    "mask_with_rule",
]
