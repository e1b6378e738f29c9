"""Events – LoggingService: validate submitted events and dispatch them.

Valid events increment ``event_count`` and are handed to every event
listener; invalid ones increment ``invalid_event_count`` and are handed,
unmodified, to every invalid-event listener together with the error.

Listener policy: each outcome keeps an ordered list of listeners, invoked in
registration order.  A listener given in the options replaces the default
console listener for that outcome; :meth:`LoggingService.add_event_listener`
and :meth:`LoggingService.add_invalid_event_listener` append to the list.

Usage::

    service = LoggingService({"post_validate": add_host_metadata})
    service.log({"tags": ["info"], "data": "started"})
"""
from __future__ import annotations

import logging
import threading
from typing import Any, Mapping

from logging_service.config.settings import EnvSettingsLoader
from logging_service.config.validation import ConfigurationError
from logging_service.events.listeners import (
    ConsoleEventListener,
    ConsoleInvalidEventListener,
    EventListener,
    InvalidEventListener,
)
from logging_service.events.model import LogEvent
from logging_service.events.options import LoggingServiceOptions
from logging_service.events.validation import build_event
from logging_service.kernel.errors import InvalidEventError
from logging_service.kernel.time import Clock, SystemClock
from logging_service.kernel.types import IdFactory, new_event_id
from logging_service.observability.logging import get_logger

LOGGER_NAME = "logging_service"


def _ensure_callable(value: Any, name: str) -> None:
    if not callable(value):
        raise ConfigurationError(
            f"{name} must be callable, got {type(value).__name__}",
            detail={"option": name},
        )


class LoggingService:
    """In-process event validator and dispatcher.

    Parameters
    ----------
    options:
        ``None`` (defaults), a :class:`LoggingServiceOptions`, or a mapping of
        option names.  Invalid options raise :class:`ConfigurationError`.
    clock:
        Source of the timestamp stamped on events that carry none.
    id_factory:
        Zero-argument callable producing event ids (UUID4 strings by default).
    """

    def __init__(
        self,
        options: LoggingServiceOptions | Mapping[str, Any] | None = None,
        *,
        clock: Clock | None = None,
        id_factory: IdFactory | None = None,
    ) -> None:
        self._options = LoggingServiceOptions.coerce(options)
        if id_factory is not None:
            _ensure_callable(id_factory, "id_factory")
        self._clock = clock or SystemClock()
        self._id_factory = id_factory or new_event_id
        self._post_validate = self._options.post_validate

        self._lock = threading.Lock()
        self._event_count = 0
        self._invalid_event_count = 0

        self._event_listeners: list[EventListener] = [
            self._options.event_listener or ConsoleEventListener()
        ]
        self._invalid_event_listeners: list[InvalidEventListener] = [
            self._options.invalid_event_listener or ConsoleInvalidEventListener(clock=self._clock)
        ]

        stdlib_logger = logging.getLogger(LOGGER_NAME)
        stdlib_logger.setLevel(self._options.level)
        self._log = get_logger(LOGGER_NAME)
        if stdlib_logger.isEnabledFor(logging.DEBUG):
            self._log.debug("logging_service_configured", **self._options.describe())

    @classmethod
    def from_env(
        cls,
        environ: dict[str, str] | None = None,
        **overrides: Any,
    ) -> LoggingService:
        """Build a service whose options are read from ``LOGGING_SERVICE_*`` variables."""
        options = EnvSettingsLoader(environ).load(LoggingServiceOptions)
        return cls(options.merged(overrides))

    # ------------------------------------------------------------------
    # Counters
    # ------------------------------------------------------------------

    @property
    def event_count(self) -> int:
        return self._event_count

    @property
    def invalid_event_count(self) -> int:
        return self._invalid_event_count

    def stats(self) -> dict[str, int]:
        with self._lock:
            return {
                "event_count": self._event_count,
                "invalid_event_count": self._invalid_event_count,
            }

    @property
    def options(self) -> LoggingServiceOptions:
        return self._options

    # ------------------------------------------------------------------
    # Listener registration
    # ------------------------------------------------------------------

    def add_event_listener(self, listener: EventListener) -> None:
        _ensure_callable(listener, "event listener")
        self._event_listeners.append(listener)

    def remove_event_listener(self, listener: EventListener) -> None:
        self._event_listeners.remove(listener)

    def add_invalid_event_listener(self, listener: InvalidEventListener) -> None:
        _ensure_callable(listener, "invalid event listener")
        self._invalid_event_listeners.append(listener)

    def remove_invalid_event_listener(self, listener: InvalidEventListener) -> None:
        self._invalid_event_listeners.remove(listener)

    @property
    def event_listeners(self) -> tuple[EventListener, ...]:
        return tuple(self._event_listeners)

    @property
    def invalid_event_listeners(self) -> tuple[InvalidEventListener, ...]:
        return tuple(self._invalid_event_listeners)

    # ------------------------------------------------------------------
    # Validation and dispatch
    # ------------------------------------------------------------------

    def validate_event(self, candidate: Any) -> LogEvent:
        """Return the normalized event for *candidate*.

        Raises :class:`InvalidEventError` when the shape is wrong or when the
        post-validation hook does not return a :class:`LogEvent`.  Exceptions
        raised by the hook itself propagate unchanged.
        """
        event = build_event(candidate, clock=self._clock, id_factory=self._id_factory)
        if self._post_validate is None:
            return event
        result = self._post_validate(event)
        if not isinstance(result, LogEvent):
            raise InvalidEventError(
                "post_validate hook must return the event",
                detail={"returned": type(result).__name__},
            )
        return result

    def log(self, candidate: Any) -> None:
        """Validate *candidate* and dispatch it; never raises."""
        try:
            event = self.validate_event(candidate)
        except Exception as exc:  # noqa: BLE001 - every failure goes to the invalid path
            with self._lock:
                self._invalid_event_count += 1
            self._log.debug("invalid_event", error=type(exc).__name__, reason=getattr(exc, "message", str(exc)))
            self._notify(self._invalid_event_listeners, candidate, exc)
            return

        with self._lock:
            self._event_count += 1
        self._notify(self._event_listeners, event)

    def _notify(self, listeners: list[Any], *args: Any) -> None:
        for listener in tuple(listeners):
            try:
                listener(*args)
            except Exception:  # noqa: BLE001
                self._log.exception(
                    "listener_failed",
                    listener=getattr(listener, "__qualname__", None) or type(listener).__name__,
                )


def create_logging_service(
    options: LoggingServiceOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> LoggingService:
    """Factory: ``create_logging_service(logListener=print)``."""
    resolved = LoggingServiceOptions.coerce(options)
    if overrides:
        resolved = resolved.merged(overrides)
    return LoggingService(resolved)


__all__ = ["LOGGER_NAME", "LoggingService", "create_logging_service"]
