"""Property-based tests for masking rules and the redaction engine."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

from hypothesis import given, settings
from hypothesis import strategies as st

from mp_masking.application.masking import (
    CreditCardMasking,
    EmailMasking,
    NameMasking,
    PassportMasking,
    PhoneMasking,
    RedactionEngine,
    mask_credit_card,
    mask_email,
    mask_name,
    mask_passport,
    mask_phone,
)
from mp_masking.testing.generators import (
    card_number_strategy,
    email_strategy,
    name_strategy,
    passport_strategy,
    phone_strategy,
)


@dataclass
class Contact:
    name: Annotated[str, NameMasking()] = ""
    email: Annotated[str, EmailMasking()] = ""
    phone: Annotated[str, PhoneMasking()] = ""
    card: Annotated[str, CreditCardMasking()] = ""
    passport: Annotated[str, PassportMasking()] = ""
    memo: str = ""


_ENGINE = RedactionEngine()


class TestEmailProperties:
    @given(email_strategy(min_local=1), st.integers(min_value=0, max_value=6))
    def test_domain_and_prefix_kept(self, email, n):
        local, domain = email.split("@")
        masked = mask_email(email, n)
        if len(local) <= n:
            assert masked == email
        else:
            masked_local, masked_domain = masked.split("@")
            assert masked_domain == domain
            assert masked_local[:n] == local[:n]
            assert masked_local[n:] == "*" * (len(local) - n)

    @given(email_strategy(), st.integers(min_value=0, max_value=6))
    def test_fixed_point(self, email, n):
        once = mask_email(email, n)
        assert mask_email(once, n) == once


class TestNameProperties:
    @given(name_strategy(), st.integers(min_value=0, max_value=4))
    def test_length_preserved(self, name, n):
        assert len(mask_name(name, n)) == len(name)

    @given(name_strategy(), st.integers(min_value=0, max_value=4))
    def test_fixed_point(self, name, n):
        once = mask_name(name, n)
        assert mask_name(once, n) == once


class TestShapeProperties:
    @given(phone_strategy())
    def test_phone_middle_hidden(self, phone):
        head, _, tail = phone.split("-")
        assert mask_phone(phone) == f"{head}-****-{tail}"

    @given(card_number_strategy())
    def test_card_keeps_edges(self, card):
        digits = card.replace("-", "").replace(" ", "")
        masked = mask_credit_card(card)
        assert masked.startswith(digits[:4] + "-")
        assert masked.endswith("-" + digits[-4:])
        assert "*" * 4 in masked

    @given(passport_strategy())
    def test_passport_strict(self, passport):
        assert mask_passport(passport) == passport[:2] + "*" * 6 + passport[-1]

    @given(st.text(max_size=30))
    def test_rules_never_raise(self, text):
        for fn in (mask_email, mask_phone, mask_name, mask_credit_card, mask_passport):
            assert isinstance(fn(text), str)


class TestEngineProperties:
    @settings(max_examples=50)
    @given(
        st.lists(
            st.builds(
                Contact,
                name=name_strategy(),
                email=email_strategy(),
                phone=phone_strategy(),
                card=card_number_strategy(),
                passport=passport_strategy(),
                memo=st.text(max_size=10),
            ),
            max_size=20,
        )
    )
    def test_parallel_matches_sequential(self, contacts):
        assert _ENGINE.mask_all_parallel(contacts) == list(_ENGINE.mask_all(contacts))

    @given(st.builds(Contact, name=name_strategy(), email=email_strategy(), memo=st.text()))
    def test_original_untouched_and_memo_kept(self, contact):
        snapshot = Contact(**vars(contact))
        masked = _ENGINE.mask(contact)
        assert contact == snapshot
        assert masked.memo == contact.memo
        assert masked.name == mask_name(contact.name)
        assert masked.email == mask_email(contact.email)
