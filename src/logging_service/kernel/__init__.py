"""Kernel – framework-agnostic building blocks: errors, clock, identifiers."""

from logging_service.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InfrastructureError,
    InvalidEventError,
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
