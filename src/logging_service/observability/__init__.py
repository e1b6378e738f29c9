"""Observability – structured logging for the service's own diagnostics."""

from logging_service.observability.logging import configure_logging, get_logger, resolve_level

__all__ = ["configure_logging", "get_logger", "resolve_level"]
