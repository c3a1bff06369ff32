"""
mp_masking – declaration-driven object redaction.

Import path convention::

    from mp_masking.application.masking import RedactionEngine, EmailMasking
    from mp_masking.application.masking import mask_email, MaskingService
    from mp_masking.config.settings import MaskingSettings, EnvSettingsLoader
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
