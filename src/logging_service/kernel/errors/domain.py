"""Domain errors – event shape violations."""

from __future__ import annotations

from typing import Any

from logging_service.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule is violated."""

    default_code = "domain_error"


class InvalidEventError(DomainError):
    """A submitted log event failed validation.

    ``field`` names the offending event property (``None`` when the event
    itself is malformed, e.g. not a mapping).
    """

    default_code = "invalid_event"

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.field = field
        if field is not None:
            self.detail.setdefault("field", field)


__all__ = ["DomainError", "InvalidEventError"]
