"""Error sink: ordered per-parameter collection of decode messages."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from querybind.core.exceptions import EmptyMessagesError


class FieldErrors(Mapping[str, list[str]]):
    """Ordered multimap of parameter name -> error messages.

    ``add`` appends and never overwrites; ``set`` replaces. Keys keep the
    order in which they were first written.
    """

    def __init__(self, initial: Mapping[str, list[str]] | None = None) -> None:
        self._messages: dict[str, list[str]] = {}
        if initial:
            for name, messages in initial.items():
                self.add(name, *messages)

    def add(self, name: str, *messages: str) -> None:
        """Append one or more messages under ``name``."""
        if not messages:
            raise EmptyMessagesError(name)
        self._messages.setdefault(name, []).extend(messages)

    def set(self, name: str, *messages: str) -> None:
        """Replace every message recorded under ``name``."""
        if not messages:
            raise EmptyMessagesError(name)
        self._messages[name] = list(messages)

    def delete(self, name: str) -> None:
        self._messages.pop(name, None)

    def clear(self) -> None:
        self._messages.clear()

    def __getitem__(self, name: str) -> list[str]:
        return self._messages[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, FieldErrors):
            return self._messages == other._messages
        if isinstance(other, Mapping):
            return self._messages == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"FieldErrors({self._messages!r})"

    def to_dict(self) -> dict[str, list[str]]:
        """Return a plain copy suitable for JSON responses."""
        return {name: list(messages) for name, messages in self._messages.items()}
