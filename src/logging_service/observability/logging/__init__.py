"""Observability – structlog configuration and logger helpers."""
from logging_service.observability.logging.factory import configure_logging, resolve_level
from logging_service.observability.logging.loggers import get_logger

__all__ = ["configure_logging", "get_logger", "resolve_level"]
