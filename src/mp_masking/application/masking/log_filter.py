from __future__ import annotations

import logging
from typing import Any

from mp_masking.application.masking.engine import RedactionEngine

__all__ = ["MaskingLogFilter", "MaskingProcessor"]


def _mask_value(engine: RedactionEngine, value: Any) -> Any:
    return engine.mask(value) if engine.is_maskable(value) else value


class MaskingLogFilter(logging.Filter):
    """Replaces annotated objects in a record's msg and args with masked copies."""

    def __init__(self, engine: RedactionEngine, name: str = "") -> None:
        super().__init__(name)
        self._engine = engine

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.msg = _mask_value(self._engine, record.msg)
        if isinstance(record.args, dict):
            record.args = {k: _mask_value(self._engine, v) for k, v in record.args.items()}
        elif isinstance(record.args, tuple):
            record.args = tuple(_mask_value(self._engine, arg) for arg in record.args)
        return True


class MaskingProcessor:
    """structlog processor: masks annotated objects among top-level event values."""

    def __init__(self, engine: RedactionEngine) -> None:
        self._engine = engine

    def __call__(
        self,
        logger: Any,       # noqa: ARG002
        method_name: str,  # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        return {k: _mask_value(self._engine, v) for k, v in event_dict.items()}
