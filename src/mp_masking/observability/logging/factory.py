"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from mp_masking.application.masking.engine import RedactionEngine
    from mp_masking.config.settings import MaskingSettings


class JsonLoggerFactory:
    """Configure structlog for JSON output on top of the stdlib root logger."""

    @staticmethod
    def configure(level: int = logging.INFO, engine: RedactionEngine | None = None) -> None:
        """Install the processor chain and a JSON-rendering root handler.

        When *engine* is given, annotated objects placed in event dicts are
        replaced by their masked clones before anything is rendered.
        """
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        if engine is not None:
            from mp_masking.application.masking.log_filter import MaskingProcessor

            shared_processors.insert(0, MaskingProcessor(engine))

        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(default=str),
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)

    @classmethod
    def configure_from(cls, settings: MaskingSettings, engine: RedactionEngine | None = None) -> None:
        """:meth:`configure` at ``settings.log_level``."""
        cls.configure(settings.level, engine)


__all__ = ["JsonLoggerFactory"]
