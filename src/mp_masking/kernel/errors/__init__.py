"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError            (domain.py)
    │   └── ValidationError
    │       └── InvalidArgumentError
    └── ApplicationError       (application.py)
        └── RedactionError
"""

from mp_masking.kernel.errors.application import ApplicationError, RedactionError
from mp_masking.kernel.errors.base import BaseError
from mp_masking.kernel.errors.domain import DomainError, InvalidArgumentError, ValidationError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InvalidArgumentError",
    "RedactionError",
    "ValidationError",
]
