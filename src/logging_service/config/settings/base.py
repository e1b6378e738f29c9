"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar


def _summarize(value: Any) -> Any:
    # callables are logged by name, never by repr
    if callable(value):
        return getattr(value, "__qualname__", None) or type(value).__name__
    return value


@dataclasses.dataclass
class Settings:
    """Base class for service settings.

    Subclasses are dataclasses; scalar fields can be read from
    ``<_prefix>_<FIELD>`` environment variables by
    :class:`~logging_service.config.settings.loaders.EnvSettingsLoader`.
    Validation runs on construction.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    @classmethod
    def field_names(cls) -> frozenset[str]:
        return frozenset(f.name for f in dataclasses.fields(cls))

    def describe(self) -> dict[str, Any]:
        """Loggable summary: field values, with callables reduced to their names."""
        return {f.name: _summarize(getattr(self, f.name)) for f in dataclasses.fields(self)}


__all__ = ["Settings"]
