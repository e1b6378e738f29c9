"""Event identifier helpers."""

from __future__ import annotations

import uuid
from typing import Callable

IdFactory = Callable[[], str]


def new_event_id() -> str:
    """Return a fresh UUID4 string."""
    return str(uuid.uuid4())


__all__ = ["IdFactory", "new_event_id"]
