"""Protocol interfaces for the capabilities a bound type can opt into.

Structural typing: a type satisfies a capability by defining the method,
no inheritance required.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from querybind.binding.errors import FieldErrors


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

@runtime_checkable
class QueryUnmarshaler(Protocol):
    """Type-specific decoder for query values.

    Takes precedence over ``TextUnmarshaler`` and the generic converter.
    Raise ``ValueError`` (or ``DecodeError``) to reject the input;
    ``TypeError`` and ``LookupError`` are also recorded as decode errors.
    Never called with an empty string.
    """

    @classmethod
    def unmarshal_query(cls, data: str) -> Any: ...


@runtime_checkable
class TextUnmarshaler(Protocol):
    """General-purpose text decoder, used when no query decoder exists."""

    @classmethod
    def unmarshal_text(cls, data: str) -> Any: ...


# ---------------------------------------------------------------------------
# Post-processing
# ---------------------------------------------------------------------------

@runtime_checkable
class QuerySanitizer(Protocol):
    """Record hook run by ``parse`` after every field has been bound."""

    def sanitize_query(self, errors: FieldErrors) -> None: ...


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

@runtime_checkable
class MultiValueMapping(Protocol):
    """Read-only string mapping where a key can carry several values."""

    def __contains__(self, key: object) -> bool: ...

    def __iter__(self) -> Iterator[str]: ...

    def getlist(self, key: str) -> list[str]: ...
