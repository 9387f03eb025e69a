"""Generic string -> primitive conversion backed by pydantic's lax validation."""

from __future__ import annotations

import functools
from enum import Enum
from typing import Any

from pydantic import TypeAdapter, ValidationError
from pydantic.errors import PydanticSchemaGenerationError

from querybind.core.exceptions import DecodeError


@functools.lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def _type_name(target: Any) -> str:
    return getattr(target, "__name__", repr(target))


def _convert_enum(raw: str, target: type[Enum]) -> Enum:
    for member in target:
        if str(member.value) == raw:
            return member
    for member in target:
        if member.name == raw:
            return member
    raise DecodeError(raw, target.__name__, f"invalid {target.__name__} value: {raw!r}")


def convert(raw: str, target: Any) -> Any:
    """Convert ``raw`` into an instance of ``target``.

    Enums match a member by value, then by name. ``int`` subclasses go
    through ``int`` and are re-wrapped. Everything else is validated by a
    cached ``TypeAdapter`` in lax mode (``"1"`` -> 1, ``"yes"`` -> True).

    Raises:
        DecodeError: ``raw`` is not a valid ``target`` or the type has no
            string conversion.
    """
    if isinstance(target, type) and issubclass(target, Enum):
        return _convert_enum(raw, target)
    if isinstance(target, type) and issubclass(target, int) and target not in (int, bool):
        return target(convert(raw, int))

    try:
        return _adapter(target).validate_python(raw)
    except ValidationError as exc:
        message = exc.errors()[0]["msg"] if exc.errors() else str(exc)
        raise DecodeError(raw, _type_name(target), message) from exc
    except PydanticSchemaGenerationError as exc:
        raise DecodeError(
            raw, _type_name(target), f"no string conversion for {_type_name(target)}"
        ) from exc
