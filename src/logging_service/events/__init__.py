"""Events – validation and dispatch of submitted log events."""
from logging_service.events.hooks import add_host_metadata, chain_hooks
from logging_service.events.listeners import (
    ConsoleEventListener,
    ConsoleInvalidEventListener,
    EventListener,
    InvalidEventListener,
    PostValidateHook,
)
from logging_service.events.model import EventData, LogEvent, TimestampInput
from logging_service.events.options import LoggingServiceOptions
from logging_service.events.service import LoggingService, create_logging_service
from logging_service.events.validation import build_event

__all__ = [
    "ConsoleEventListener",
    "ConsoleInvalidEventListener",
    "EventData",
    "EventListener",
    "InvalidEventListener",
    "LogEvent",
    "LoggingService",
    "LoggingServiceOptions",
    "PostValidateHook",
    "TimestampInput",
    "add_host_metadata",
    "build_event",
    "chain_hooks",
    "create_logging_service",
]
