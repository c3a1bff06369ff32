"""Testing fixtures – pytest fixtures for the redaction engine."""
from mp_masking.testing.fixtures.masking import (
    captured_logs,
    descriptor_cache,
    masking_engine,
    masking_service,
)

__all__ = [
    "captured_logs",
    "descriptor_cache",
    "masking_engine",
    "masking_service",
]
