"""Testing generators – hypothesis strategies for maskable values."""
from mp_masking.testing.generators.strategies import (
    card_number_strategy,
    email_strategy,
    name_strategy,
    passport_strategy,
    phone_strategy,
)

__all__ = [
    "card_number_strategy",
    "email_strategy",
    "name_strategy",
    "passport_strategy",
    "phone_strategy",
]
