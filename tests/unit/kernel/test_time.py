"""Unit tests for kernel time and identifier utilities."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from logging_service.kernel.time import FrozenClock, SystemClock
from logging_service.kernel.types import new_event_id


class TestSystemClock:
    def test_now_returns_utc_aware_datetime(self) -> None:
        result = SystemClock().now()
        assert isinstance(result, datetime)
        assert result.utcoffset().total_seconds() == 0  # type: ignore[union-attr]


class TestFrozenClock:
    def test_returns_fixed_time(self) -> None:
        fixed = datetime(2024, 6, 1, 9, 30, tzinfo=UTC)
        clk = FrozenClock(fixed)
        assert clk.now() == fixed
        assert clk.now() == fixed


class TestNewEventId:
    def test_is_uuid4_string(self) -> None:
        value = new_event_id()
        assert uuid.UUID(value).version == 4

    def test_is_unique(self) -> None:
        assert len({new_event_id() for _ in range(100)}) == 100
