"""Config settings – 12-factor env-based configuration."""
from mp_masking.config.settings.base import Settings
from mp_masking.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from mp_masking.config.settings.masking import MaskingSettings

__all__ = ["EnvSettingsLoader", "MaskingSettings", "Settings", "SettingsLoader"]
