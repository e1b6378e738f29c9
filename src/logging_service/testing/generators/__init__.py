"""Testing generators – hypothesis strategies for log events."""
from logging_service.testing.generators.strategies import (
    data_strategy,
    invalid_tags_event_strategy,
    tags_strategy,
    timestamp_input_strategy,
    valid_event_strategy,
)

__all__ = [
    "data_strategy",
    "invalid_tags_event_strategy",
    "tags_strategy",
    "timestamp_input_strategy",
    "valid_event_strategy",
]
