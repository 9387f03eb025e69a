"""querybind exception hierarchy."""

from __future__ import annotations


class QueryBindError(Exception):
    """Base exception for all querybind errors."""


class DecodeError(QueryBindError, ValueError):
    """A raw value could not be converted to the field's type."""

    def __init__(self, value: str, target: str, message: str) -> None:
        self.value = value
        self.target = target
        super().__init__(message)


class PreconditionError(QueryBindError):
    """The binding API was called incorrectly."""


class EmptyMessagesError(PreconditionError):
    """An error-sink write was attempted without any message."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"no messages given for parameter {name!r}")


class RecordTypeError(PreconditionError, TypeError):
    """The binding target is not a supported record."""
