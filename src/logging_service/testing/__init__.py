"""Testing support – fakes and hypothesis strategies for logging_service."""

from logging_service.testing.fakes import (
    FAKE_NOW,
    FakeClock,
    RecordingEventListener,
    RecordingInvalidEventListener,
)
from logging_service.testing.generators import (
    data_strategy,
    invalid_tags_event_strategy,
    tags_strategy,
    timestamp_input_strategy,
    valid_event_strategy,
)

__all__ = [
    "FAKE_NOW",
    "FakeClock",
    "RecordingEventListener",
    "RecordingInvalidEventListener",
    "data_strategy",
    "invalid_tags_event_strategy",
    "tags_strategy",
    "timestamp_input_strategy",
    "valid_event_strategy",
]
