"""Testing fakes – in-memory doubles for clocks and listeners."""
from logging_service.testing.fakes.clock import FAKE_NOW, FakeClock
from logging_service.testing.fakes.listeners import (
    RecordingEventListener,
    RecordingInvalidEventListener,
)

__all__ = ["FAKE_NOW", "FakeClock", "RecordingEventListener", "RecordingInvalidEventListener"]
