"""Events – construction options for :class:`LoggingService`."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar, Mapping

from logging_service.config.settings import Settings
from logging_service.config.validation import ConfigurationError
from logging_service.events.listeners import (
    EventListener,
    InvalidEventListener,
    PostValidateHook,
)
from logging_service.observability.logging import resolve_level

# camelCase names accepted for compatibility with existing option objects
OPTION_ALIASES: dict[str, str] = {
    "logListener": "event_listener",
    "invalidEventListener": "invalid_event_listener",
    "postValidate": "post_validate",
    "logLevel": "log_level",
}

_CALLABLE_OPTIONS = ("event_listener", "invalid_event_listener", "post_validate")


@dataclasses.dataclass
class LoggingServiceOptions(Settings):
    """Options for a :class:`~logging_service.events.service.LoggingService`.

    All fields are optional.  ``log_level`` is the only one that can be read
    from the environment (``LOGGING_SERVICE_LOG_LEVEL``).

    Raises :class:`ConfigurationError` on construction when a listener or the
    hook is not callable, or when ``log_level`` is not a known level.
    """

    _prefix: ClassVar[str] = "LOGGING_SERVICE"

    event_listener: EventListener | None = None
    invalid_event_listener: InvalidEventListener | None = None
    post_validate: PostValidateHook | None = None
    log_level: str = "WARNING"

    def _validate(self) -> None:
        for name in _CALLABLE_OPTIONS:
            value = getattr(self, name)
            if value is not None and not callable(value):
                raise ConfigurationError(
                    f"{name} must be callable, got {type(value).__name__}",
                    detail={"option": name},
                )
        resolve_level(self.log_level)

    @property
    def level(self) -> int:
        return resolve_level(self.log_level)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> LoggingServiceOptions:
        """Build options from a plain mapping.

        Keys may be field names or their camelCase aliases; ``None`` values
        are treated as absent.  Unknown keys raise :class:`ConfigurationError`.
        """
        return cls(**cls._normalize(options))

    @classmethod
    def coerce(cls, options: LoggingServiceOptions | Mapping[str, Any] | None) -> LoggingServiceOptions:
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, Mapping):
            return cls.from_mapping(options)
        raise ConfigurationError(
            f"options must be a mapping or {cls.__name__}, got {type(options).__name__}"
        )

    def merged(self, overrides: Mapping[str, Any]) -> LoggingServiceOptions:
        """Return a copy with *overrides* applied (same key rules as :meth:`from_mapping`)."""
        normalized = self._normalize(overrides)
        if not normalized:
            return self
        return dataclasses.replace(self, **normalized)

    @classmethod
    def _normalize(cls, options: Mapping[str, Any]) -> dict[str, Any]:
        known = cls.field_names()
        normalized: dict[str, Any] = {}
        for key, value in options.items():
            name = OPTION_ALIASES.get(key, key)
            if name not in known:
                raise ConfigurationError(f"Unknown option {key!r}", detail={"option": key})
            if value is not None:
                normalized[name] = value
        return normalized


__all__ = ["LoggingServiceOptions", "OPTION_ALIASES"]
