"""
logging_service – in-process log event validation and dispatch.

Import path convention::

    from logging_service import LoggingService, create_logging_service
    from logging_service.events import LogEvent, add_host_metadata
    from logging_service.kernel.errors import InvalidEventError
    from logging_service.config import ConfigurationError
"""

from logging_service.config.validation import ConfigurationError
from logging_service.events import (
    LogEvent,
    LoggingService,
    LoggingServiceOptions,
    create_logging_service,
)
from logging_service.kernel.errors import InvalidEventError, SerializationError

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "InvalidEventError",
    "LogEvent",
    "LoggingService",
    "LoggingServiceOptions",
    "SerializationError",
    "__version__",
    "create_logging_service",
]
