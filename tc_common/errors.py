"""Shared error taxonomy for tagcell-editor."""

from __future__ import annotations

from typing import Any, Mapping


def _normalize_context_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return normalize_context(value)
    if isinstance(value, (list, tuple)):
        return [_normalize_context_value(item) for item in value]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


def normalize_context(context: Mapping[str, Any]) -> dict[str, Any]:
    """Return a JSON-friendly copy of an error context mapping."""
    return {key: _normalize_context_value(val) for key, val in context.items()}


class TagCellError(Exception):
    """Base error type for recoverable editor failures."""

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.context = normalize_context(context or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.error_type, "message": str(self), "context": self.context}


class DuplicateName(TagCellError):
    """An option with the same (case-insensitive) name already exists."""


class NotFound(TagCellError):
    """The referenced option id is not part of the option set."""


class InvalidOptionName(TagCellError):
    """The option name is empty after trimming."""


class PersistenceError(TagCellError):
    """Failure while handing a snapshot to the host grid."""


class ConfigurationError(TagCellError):
    """Failure due to invalid configuration."""


def error_to_payload(error: TagCellError) -> dict[str, Any]:
    """Convert a TagCellError to a flat payload for logs and CLI output."""
    return {
        "error_type": error.error_type,
        "error": str(error),
        "error_context": error.context,
    }
