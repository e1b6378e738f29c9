"""Events – ready-made post-validation hooks.

A hook receives the validated :class:`LogEvent`, may enrich or further
validate it, and must return it.
"""
from __future__ import annotations

import os
import socket

from logging_service.config.validation import ConfigurationError
from logging_service.events.listeners import PostValidateHook
from logging_service.events.model import LogEvent


def add_host_metadata(event: LogEvent) -> LogEvent:
    """Attach ``host`` and ``pid`` unless the caller already set them."""
    event.fields.setdefault("host", socket.gethostname())
    event.fields.setdefault("pid", os.getpid())
    return event


def chain_hooks(*hooks: PostValidateHook) -> PostValidateHook:
    """Compose *hooks* left to right into a single hook."""
    for hook in hooks:
        if not callable(hook):
            raise ConfigurationError(
                "post_validate hooks must be callable",
                detail={"hook": repr(hook)},
            )

    def chained(event: LogEvent) -> LogEvent:
        for hook in hooks:
            event = hook(event)
        return event

    return chained


__all__ = ["add_host_metadata", "chain_hooks"]
