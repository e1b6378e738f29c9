"""Kernel value types."""

from logging_service.kernel.types.ids import IdFactory, new_event_id

__all__ = ["IdFactory", "new_event_id"]
