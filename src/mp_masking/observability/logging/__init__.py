"""Observability – structured logging helpers."""
from mp_masking.observability.logging.factory import JsonLoggerFactory
from mp_masking.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
