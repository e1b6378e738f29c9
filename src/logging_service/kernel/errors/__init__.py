"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── InvalidEventError
    ├── ApplicationError     (application.py)
    │   └── ConfigError      (logging_service.config.validation)
    └── InfrastructureError  (infrastructure.py)
        └── SerializationError
"""

from logging_service.kernel.errors.application import ApplicationError
from logging_service.kernel.errors.base import BaseError
from logging_service.kernel.errors.domain import DomainError, InvalidEventError
from logging_service.kernel.errors.infrastructure import (
    InfrastructureError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "InvalidEventError",
    "SerializationError",
]
