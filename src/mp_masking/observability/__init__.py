"""Observability – structured logging for the redaction engine."""
