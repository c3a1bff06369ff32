"""Application-layer errors – failures of the redaction use case itself."""

from __future__ import annotations

from mp_masking.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class RedactionError(ApplicationError):
    """An object could not be redacted and the engine is running fail-closed."""

    default_code = "redaction_failed"


__all__ = ["ApplicationError", "RedactionError"]
