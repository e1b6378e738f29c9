"""Observability – structlog configuration and log level resolution."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from logging_service.config.validation import InvalidSettingValueError

_LEVEL_ALIASES = {"WARN": logging.WARNING, "FATAL": logging.CRITICAL}


def resolve_level(value: int | str) -> int:
    """Turn a level name (``"debug"``, ``"WARN"``) or number into a stdlib level.

    Raises :class:`InvalidSettingValueError` for anything else.
    """
    if isinstance(value, bool):
        raise InvalidSettingValueError("log_level", value, "expected a level name or number")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        name = value.strip().upper()
        if name in _LEVEL_ALIASES:
            return _LEVEL_ALIASES[name]
        level = logging.getLevelName(name)
        if isinstance(level, int):
            return level
    raise InvalidSettingValueError("log_level", value, "unknown log level")


def configure_logging(level: int | str = logging.INFO, *, json: bool = True) -> None:
    """Configure structlog on top of stdlib logging.

    Records are rendered by a :class:`structlog.stdlib.ProcessorFormatter`
    attached to a root ``StreamHandler`` (stderr): JSON lines when *json* is
    true, the colourless console renderer otherwise.
    """
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            renderer,
        ],
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolve_level(level))


__all__ = ["configure_logging", "resolve_level"]
