"""Events – shape checks and normalization for submitted log events.

A candidate event is any mapping with:

* ``tags`` – REQUIRED, non-empty sequence of strings;
* ``data`` – OPTIONAL, a string or a mapping;
* ``timestamp`` (or the legacy ``ts``) – OPTIONAL, an ISO 8601 / RFC 2822
  string, a number of milliseconds since the epoch, or a ``datetime``.
  Defaults to the clock's current time.

Any other key is carried over into :attr:`LogEvent.fields`.  ``data`` and the
extra fields are deep-copied, so the candidate is never modified through the
event.
"""
from __future__ import annotations

import copy
import math
from collections.abc import Mapping, Sequence
from datetime import UTC, datetime, timedelta
from email.utils import parsedate_to_datetime
from numbers import Real
from typing import Any

from logging_service.events.model import RESERVED_KEYS, EventData, LogEvent
from logging_service.kernel.errors import InvalidEventError
from logging_service.kernel.time import Clock
from logging_service.kernel.types import IdFactory

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def coerce_tags(value: Any) -> tuple[str, ...]:
    if value is None:
        raise InvalidEventError("event is missing required property 'tags'", field="tags")
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise InvalidEventError("event.tags must be a sequence of strings", field="tags")
    if not value:
        raise InvalidEventError("event.tags cannot be empty", field="tags")
    for tag in value:
        if not isinstance(tag, str):
            raise InvalidEventError(
                f"event.tags must only contain strings, got {type(tag).__name__}",
                field="tags",
            )
    return tuple(value)


def coerce_data(value: Any) -> EventData:
    if value is None or isinstance(value, (str, Mapping)):
        return value
    raise InvalidEventError(
        f"event.data must be a string or a mapping, got {type(value).__name__}",
        field="data",
    )


def _as_utc(value: datetime) -> datetime:
    # naive values are taken to be UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    try:
        return value.astimezone(UTC)
    except OverflowError as exc:
        raise InvalidEventError(
            f"event.timestamp {value.isoformat()!r} is out of range in UTC",
            field="timestamp",
            cause=exc,
        ) from exc


def _detached(value: Any, field: str) -> Any:
    if isinstance(value, Mapping) and not isinstance(value, dict):
        value = dict(value)
    try:
        return copy.deepcopy(value)
    except (TypeError, copy.Error, RecursionError) as exc:
        raise InvalidEventError(
            f"event.{field} holds a value that cannot be copied: {exc}",
            field=field,
            cause=exc,
        ) from exc


def _parse_text(text: str) -> datetime:
    stripped = text.strip()
    if not stripped:
        raise InvalidEventError("event.timestamp must not be blank", field="timestamp")
    try:
        return datetime.fromisoformat(stripped)
    except ValueError:
        pass
    try:
        return parsedate_to_datetime(stripped)
    except (TypeError, ValueError, IndexError) as exc:
        raise InvalidEventError(
            f"event.timestamp {text!r} is not an ISO 8601 or RFC 2822 date",
            field="timestamp",
            cause=exc,
        ) from exc


def _from_epoch_millis(value: Real) -> datetime:
    millis = value if isinstance(value, int) else float(value)
    if isinstance(millis, float) and not math.isfinite(millis):
        raise InvalidEventError("event.timestamp must be a finite number", field="timestamp")
    try:
        return EPOCH + timedelta(milliseconds=millis)
    except OverflowError as exc:
        raise InvalidEventError(
            f"event.timestamp {value!r} is out of range",
            field="timestamp",
            cause=exc,
        ) from exc


def coerce_timestamp(value: Any, clock: Clock) -> datetime:
    """Return a timezone-aware UTC datetime for *value*."""
    if value is None:
        return _as_utc(clock.now())
    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, str):
        return _as_utc(_parse_text(value))
    if isinstance(value, Real) and not isinstance(value, bool):
        return _from_epoch_millis(value)
    raise InvalidEventError(
        f"event.timestamp must be a string, a number or a datetime, got {type(value).__name__}",
        field="timestamp",
    )


def build_event(candidate: Any, *, clock: Clock, id_factory: IdFactory) -> LogEvent:
    """Validate *candidate* and return a new, normalized :class:`LogEvent`.

    Raises :class:`InvalidEventError` on the first violated rule.
    """
    if not isinstance(candidate, Mapping):
        raise InvalidEventError(
            f"event must be a mapping, got {type(candidate).__name__}",
            detail={"type": type(candidate).__name__},
        )

    timestamp = candidate.get("timestamp")
    legacy_ts = candidate.get("ts")
    if timestamp is not None and legacy_ts is not None:
        raise InvalidEventError(
            "event must not specify both 'timestamp' and 'ts'", field="timestamp"
        )

    return LogEvent(
        tags=coerce_tags(candidate.get("tags")),
        data=_detached(coerce_data(candidate.get("data")), "data"),
        timestamp=coerce_timestamp(timestamp if timestamp is not None else legacy_ts, clock),
        id=id_factory(),
        fields=_detached(
            {k: v for k, v in candidate.items() if k not in RESERVED_KEYS}, "fields"
        ),
    )


__all__ = ["EPOCH", "build_event", "coerce_data", "coerce_tags", "coerce_timestamp"]
