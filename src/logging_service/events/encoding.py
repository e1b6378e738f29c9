"""Events – JSON encoding shared by the model and the console listeners."""
from __future__ import annotations

import json
from datetime import date, datetime
from typing import Any, Mapping

from logging_service.kernel.errors import BaseError, SerializationError


def _default_serializer(obj: Any) -> Any:
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    if isinstance(obj, BaseError):
        return obj.to_dict()
    if isinstance(obj, Mapping):
        return dict(obj)
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def dumps(payload: Any) -> str:
    """Serialize *payload* to a single JSON line.

    Raises :class:`SerializationError` for cyclic structures and objects
    JSON has no representation for.
    """
    try:
        return json.dumps(payload, default=_default_serializer, ensure_ascii=False)
    except (TypeError, ValueError, RecursionError) as exc:
        raise SerializationError(
            f"Could not serialize {type(payload).__name__}: {exc}",
            payload_type=type(payload).__name__,
            cause=exc,
        ) from exc


def describe_error(error: BaseException) -> dict[str, Any]:
    """Render an exception as a JSON-ready dict."""
    if isinstance(error, BaseError):
        return error.to_dict()
    return {"type": type(error).__name__, "message": str(error)}


__all__ = ["describe_error", "dumps"]
