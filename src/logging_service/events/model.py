"""Events – the normalized LogEvent and the accepted input shapes."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any, Mapping

from logging_service.events.encoding import dumps

EventData = str | Mapping[str, Any] | None
TimestampInput = str | int | float | datetime | None

RESERVED_KEYS = frozenset({"tags", "data", "timestamp", "ts", "id"})


@dataclasses.dataclass
class LogEvent:
    """A validated log event.

    ``fields`` carries any extra keys the caller supplied plus metadata
    attached by a post-validation hook.
    """

    tags: tuple[str, ...]
    timestamp: datetime
    id: str
    data: EventData = None
    fields: dict[str, Any] = dataclasses.field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = dict(self.fields)
        payload["tags"] = list(self.tags)
        payload["timestamp"] = self.timestamp.isoformat()
        payload["id"] = self.id
        if self.data is not None:
            payload["data"] = self.data
        return payload

    def to_json(self) -> str:
        """Serialize to a JSON line; raises :class:`SerializationError`."""
        return dumps(self.to_dict())


__all__ = ["EventData", "LogEvent", "RESERVED_KEYS", "TimestampInput"]
