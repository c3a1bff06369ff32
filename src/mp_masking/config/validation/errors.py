"""Configuration errors for settings and the masking policy table."""
from __future__ import annotations

from mp_masking.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded, or masking was declared incorrectly."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A ``<PREFIX>_<FIELD>`` variable with no default is absent."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but out of range or not coercible."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


class MaskingConfigError(ConfigError):
    """A rule was registered for a field that cannot take it.

    *masked_type* and *field_name* identify the offending declaration and are
    copied into ``detail`` for structured logs.
    """
    default_code = "masking_config_error"

    def __init__(
        self,
        message: str,
        *,
        masked_type: type | None = None,
        field_name: str | None = None,
    ) -> None:
        detail: dict[str, str] = {}
        if masked_type is not None:
            detail["type"] = masked_type.__qualname__
        if field_name is not None:
            detail["field"] = field_name
        super().__init__(message, detail=detail)
        self.masked_type = masked_type
        self.field_name = field_name


__all__ = [
    "ConfigError",
    "InvalidSettingValueError",
    "MaskingConfigError",
    "MissingRequiredSettingError",
]
