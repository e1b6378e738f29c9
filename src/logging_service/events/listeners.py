"""Events – listener contracts and the default console listeners."""
from __future__ import annotations

import sys
from typing import Any, Callable, TextIO

from logging_service.events.encoding import describe_error, dumps
from logging_service.events.model import LogEvent
from logging_service.kernel.errors import SerializationError
from logging_service.kernel.time import Clock, SystemClock
from logging_service.observability.logging import get_logger

EventListener = Callable[[LogEvent], Any]
InvalidEventListener = Callable[[Any, BaseException], Any]
PostValidateHook = Callable[[LogEvent], LogEvent]

INVALID_EVENT_KIND = "invalidEvent"

_log = get_logger(__name__)


def invalid_event_record(
    candidate: Any,
    error: BaseException,
    timestamp: Any,
) -> dict[str, Any]:
    """Build the diagnostic record written for a rejected event."""
    return {
        "timestamp": timestamp,
        "kind": INVALID_EVENT_KIND,
        "originalEvent": candidate,
        "error": describe_error(error),
    }


class ConsoleEventListener:
    """Writes each valid event as a JSON line to stdout.

    Events that cannot be serialized are written with ``repr`` instead.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def __call__(self, event: LogEvent) -> None:
        try:
            line = event.to_json()
        except SerializationError as exc:
            _log.warning("event_serialization_failed", event_id=event.id, error=exc.message)
            line = repr(event)
        print(line, file=self._stream or sys.stdout, flush=True)  # noqa: T201


class ConsoleInvalidEventListener:
    """Writes an ``invalidEvent`` diagnostic record as a JSON line to stderr."""

    def __init__(self, stream: TextIO | None = None, clock: Clock | None = None) -> None:
        self._stream = stream
        self._clock = clock or SystemClock()

    def __call__(self, candidate: Any, error: BaseException) -> None:
        record = invalid_event_record(candidate, error, self._clock.now())
        try:
            line = dumps(record)
        except SerializationError as exc:
            _log.warning("invalid_event_serialization_failed", error=exc.message)
            line = repr(record)
        print(line, file=self._stream or sys.stderr, flush=True)  # noqa: T201


__all__ = [
    "ConsoleEventListener",
    "ConsoleInvalidEventListener",
    "EventListener",
    "INVALID_EVENT_KIND",
    "InvalidEventListener",
    "PostValidateHook",
    "invalid_event_record",
]
