"""Observability – get_logger helper."""
from __future__ import annotations

import logging
from typing import Any

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger bound over the stdlib logger *name*.

    Level filtering is delegated to stdlib logging, so the level set on
    ``logging.getLogger(name)`` (or an ancestor) decides what is emitted.
    The processor chain is looked up on every call, never cached, so
    loggers created at import time follow later ``structlog.configure``
    and ``structlog.reset_defaults`` calls.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
        **initial_values,
    )


__all__ = ["get_logger"]
