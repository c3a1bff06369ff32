"""Config – 12-factor settings and validation errors."""

from mp_masking.config.settings import EnvSettingsLoader, MaskingSettings, Settings, SettingsLoader
from mp_masking.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MaskingConfigError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MaskingConfigError",
    "MaskingSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
