"""Root of the mp-masking error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Every error raised by mp-masking.

    Redaction errors usually end up in logs, so the serialised form never
    carries the text of the underlying exception, which may quote the very
    value that was being masked. Only the cause's type name is kept.

    Args:
        message: Human-readable description. Must not contain raw field values.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Structured context such as the argument name or the type
            that could not be redacted.
        cause: Original exception; chained as ``__cause__``.
    """

    default_code: str = "masking_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail) if detail else {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, detail={self.detail!r})"

    def to_dict(self) -> dict[str, Any]:
        """Log-safe payload: code, message, detail and the cause's type."""
        payload: dict[str, Any] = {"error": type(self).__name__, "code": self.code, "message": self.message}
        if self.detail:
            payload["detail"] = dict(self.detail)
        if self.cause is not None:
            payload["cause"] = type(self.cause).__qualname__
        return payload


__all__ = ["BaseError"]
