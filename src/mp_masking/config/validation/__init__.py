"""Config validation errors."""
from mp_masking.config.validation.errors import (
    ConfigError,
    InvalidSettingValueError,
    MaskingConfigError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "InvalidSettingValueError",
    "MaskingConfigError",
    "MissingRequiredSettingError",
]
