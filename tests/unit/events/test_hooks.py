"""Unit tests for the ready-made post-validation hooks."""

from __future__ import annotations

import os
import socket
from datetime import UTC, datetime

import pytest

from logging_service.config.validation import ConfigurationError
from logging_service.events import LoggingService, add_host_metadata, chain_hooks
from logging_service.events.model import LogEvent
from logging_service.testing import RecordingEventListener


def _event() -> LogEvent:
    return LogEvent(tags=("info",), timestamp=datetime(2026, 1, 1, tzinfo=UTC), id="evt-1")


class TestAddHostMetadata:
    def test_adds_host_and_pid(self) -> None:
        event = add_host_metadata(_event())
        assert event.fields == {"host": socket.gethostname(), "pid": os.getpid()}

    def test_keeps_caller_values(self) -> None:
        event = _event()
        event.fields["host"] = "web-1"
        assert add_host_metadata(event).fields["host"] == "web-1"

    def test_through_service(self) -> None:
        events = RecordingEventListener()
        service = LoggingService({"event_listener": events, "post_validate": add_host_metadata})
        service.log({"tags": ["info"]})
        assert events.last.fields["pid"] == os.getpid()
        assert "host" in events.last.to_dict()


class TestChainHooks:
    def test_runs_left_to_right(self) -> None:
        calls: list[str] = []

        def first(event: LogEvent) -> LogEvent:
            calls.append("first")
            event.fields["step"] = 1
            return event

        def second(event: LogEvent) -> LogEvent:
            calls.append("second")
            event.fields["step"] += 1
            return event

        event = chain_hooks(first, second)(_event())
        assert calls == ["first", "second"]
        assert event.fields["step"] == 2

    def test_empty_chain_is_identity(self) -> None:
        event = _event()
        assert chain_hooks()(event) is event

    def test_rejects_non_callable(self) -> None:
        with pytest.raises(ConfigurationError):
            chain_hooks(add_host_metadata, "nope")  # type: ignore[arg-type]
