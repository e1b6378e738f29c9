"""Root error class for the logging-service error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Every error the service raises renders itself as a flat record through
    :meth:`to_dict`; that record is what the ``error`` member of an
    ``invalidEvent`` diagnostic line contains.

    Args:
        message: Human-readable reason, e.g. ``"event.tags cannot be empty"``.
        code: Stable slug identifying the failure (defaults to ``default_code``).
        detail: Extra context such as the offending ``field``.
        cause: Lower-level exception that triggered this error.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Diagnostic record: exception type, code, message, detail and cause."""
        record: dict[str, Any] = {
            "type": type(self).__name__,
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            record["cause"] = _describe_cause(self.cause)
        return record


def _describe_cause(cause: BaseException) -> str:
    """``"<TypeName>: <message>"`` for a wrapped exception."""
    text = str(cause)
    return f"{type(cause).__name__}: {text}" if text else type(cause).__name__


__all__ = ["BaseError"]
