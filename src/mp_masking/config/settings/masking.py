"""Config settings – MaskingSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from mp_masking.config.settings.base import Settings
from mp_masking.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class MaskingSettings(Settings):
    """Runtime knobs for the redaction engine and the string facade.

    Read from ``MASKING_*`` environment variables by
    :class:`~mp_masking.config.settings.loaders.EnvSettingsLoader`.

    ``fail_open`` keeps the engine returning the original object when it
    cannot be cloned. Setting it to ``False`` raises ``RedactionError``
    instead, so unmasked data never leaves the engine.
    """

    _prefix: ClassVar[str] = "MASKING"

    email_visible_chars: int = 2
    name_visible_chars: int = 1
    parallel_max_workers: int = 0
    fail_open: bool = True
    log_level: str = "INFO"

    def _validate(self) -> None:
        for name in ("email_visible_chars", "name_visible_chars", "parallel_max_workers"):
            value = getattr(self, name)
            if value < 0:
                raise InvalidSettingValueError(name, value, "must be >= 0")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown log level")

    @property
    def level(self) -> int:
        """Numeric stdlib log level for :attr:`log_level`."""
        return logging.getLevelName(self.log_level.upper())

    @property
    def max_workers(self) -> int | None:
        """Worker count for parallel batches; ``None`` lets the executor decide."""
        return self.parallel_max_workers or None


__all__ = ["MaskingSettings"]
