"""Config settings – environment-bound Settings base."""
from __future__ import annotations

import dataclasses
from typing import Mapping, TypeVar

S = TypeVar("S", bound="Settings")


@dataclasses.dataclass
class Settings:
    """Dataclass whose fields map to ``<_prefix>_<FIELD>`` variables.

    Subclasses set ``_prefix`` and may override :meth:`_validate`, which runs
    after every construction, whether from code or from the environment.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Raise ``InvalidSettingValueError`` for out-of-range values."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable that feeds *field_name*, e.g. ``MASKING_FAIL_OPEN``."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    @classmethod
    def from_env(cls: type[S], environ: Mapping[str, str] | None = None) -> S:
        """Load an instance through :class:`EnvSettingsLoader`."""
        from mp_masking.config.settings.loaders import EnvSettingsLoader

        return EnvSettingsLoader(environ).load(cls)


__all__ = ["Settings"]
